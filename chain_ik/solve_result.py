#!/usr/bin/env python3
"""
Solve Result Module

Outcome of one solve call and the strategy interface both solvers implement.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from .chain_model import Chain


class SolveStatus(Enum):
    SOLVED = 'solved'
    UNREACHABLE = 'unreachable'
    STRETCHED = 'stretched'


@dataclass
class SolveResult:
    """
    Result of solving a chain for one target.

    Attributes:
        status: SOLVED, UNREACHABLE (chain unchanged) or STRETCHED
        chain: Updated chain (the input chain when UNREACHABLE)
        converged: Whether the hand ended within tolerance of the target
        iterations: Number of iterations used
        final_error: Distance from hand to target after solving
    """
    status: SolveStatus
    chain: Chain
    converged: bool
    iterations: int
    final_error: float

    @property
    def solved(self) -> bool:
        return self.status is SolveStatus.SOLVED

    @property
    def unreachable(self) -> bool:
        return self.status is SolveStatus.UNREACHABLE


class IkSolver(ABC):
    """Interchangeable IK strategy. A caller selects one per chain update."""

    @abstractmethod
    def solve(self, chain: Chain, target) -> SolveResult:
        """Solve chain for target and return a new chain in the result."""
