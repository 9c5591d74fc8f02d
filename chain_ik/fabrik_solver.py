#!/usr/bin/env python3
"""
FABRIK Solver - Master Orchestrator
====================================
Main solver class that orchestrates the complete FABRIK IK solving process.
Encapsulates the reachability precondition, cold/hot start, the iteration
loop with convergence checking, and orientation derivation.
"""

import logging
from typing import Optional, Union

import numpy as np

from chain_config import motion as motion_config
from .chain_model import Chain, cold_start_positions
from .chain_orientation import local_orientations
from .chain_reachability import (
    UnreachablePolicy, stretch_positions, target_distance, total_length
)
from .fabrik_iteration import FabrikIteration
from .solve_result import IkSolver, SolveResult, SolveStatus
from .vector_math import as_point, is_collinear, rotate_about

logger = logging.getLogger(__name__)


class FabrikSolver(IkSolver):
    """
    Master FABRIK solver that orchestrates the complete IK solving process.

    This class encapsulates:
    - Reachability check (once, before the loop) and the unreachable policy
    - Initialization (cold start from rest, hot start from the last solution)
    - Iteration loop with convergence checking
    - Orientation derivation from solved positions
    """

    def __init__(self,
                 default_tolerance: float = motion_config.FABRIK_TOLERANCE,
                 default_max_iterations: int = motion_config.FABRIK_MAX_ITERATIONS,
                 unreachable_policy: Union[UnreachablePolicy, str] = motion_config.FABRIK_UNREACHABLE_POLICY,
                 use_hot_start: bool = motion_config.FABRIK_USE_HOT_START,
                 collinear_turn: float = motion_config.FABRIK_COLLINEAR_TURN):
        """
        Initialize FABRIK solver.

        Args:
            default_tolerance: Default convergence tolerance in world units (default 0.01)
            default_max_iterations: Default maximum iterations (default 15)
            unreachable_policy: REPORT leaves the chain untouched, STRETCH points it at the target
            use_hot_start: Whether to start from the chain's current positions
            collinear_turn: Rotation about the root (radians) applied when the chain and
                            target lie on one line, where the passes cannot bend it
        """
        if default_max_iterations < 0:
            raise ValueError(f'max_iterations must be >= 0, got {default_max_iterations}')
        if default_tolerance < 0:
            raise ValueError(f'tolerance must be >= 0, got {default_tolerance}')

        self.default_tolerance = default_tolerance
        self.default_max_iterations = default_max_iterations
        self.unreachable_policy = UnreachablePolicy(unreachable_policy)
        self.use_hot_start = use_hot_start
        self.collinear_turn = collinear_turn

    def solve(self,
              chain: Chain,
              target,
              tolerance: Optional[float] = None,
              max_iterations: Optional[int] = None) -> SolveResult:
        """
        Solve inverse kinematics using FABRIK algorithm.

        Args:
            chain: Chain to solve. Never modified
            target: Target end-effector position [x, y]
            tolerance: Convergence tolerance (uses default if None)
            max_iterations: Maximum iterations (uses default if None)

        Returns:
            SolveResult with status SOLVED, UNREACHABLE or STRETCHED
        """
        # Use default parameters if not provided
        if tolerance is None:
            tolerance = self.default_tolerance
        if max_iterations is None:
            max_iterations = self.default_max_iterations

        target = as_point(target)
        lengths = chain.lengths

        # Reachability precondition, checked once
        distance = target_distance(chain.root, target)
        reach = total_length(lengths)
        if reach < distance:
            return self._solve_unreachable(chain, target, distance, reach)

        # Initialize with hot or cold start
        if self.use_hot_start and not chain.is_at_rest():
            j_current = chain.positions.copy()
            j_current[0] = chain.root
        else:
            j_current = cold_start_positions(chain.root, lengths)

        # Run FABRIK iteration loop
        iterations_used = 0
        for iteration in range(max_iterations):
            # Check convergence
            current_error = np.linalg.norm(j_current[-1] - target)
            if current_error <= tolerance:
                break

            # Passes keep a straight chain on the target's line; turn it off that line
            if chain.num_joints > 1 and is_collinear(np.vstack([j_current, target])):
                logger.debug('Chain collinear with target at iteration %d, turning by %.3f rad',
                             iteration, self.collinear_turn)
                j_current = rotate_about(j_current, chain.root, self.collinear_turn)

            j_current = FabrikIteration.iterate_once(j_current, target, chain.root, lengths)
            iterations_used = iteration + 1

        final_error = float(np.linalg.norm(j_current[-1] - target))
        converged = final_error <= tolerance

        logger.debug(
            'FABRIK %s in %d iterations, error %.5f',
            'converged' if converged else 'did not converge', iterations_used, final_error
        )

        return SolveResult(
            status=SolveStatus.SOLVED,
            chain=chain.with_state(j_current, local_orientations(j_current)),
            converged=converged,
            iterations=iterations_used,
            final_error=final_error,
        )

    def _solve_unreachable(self,
                           chain: Chain,
                           target: np.ndarray,
                           distance: float,
                           reach: float) -> SolveResult:
        """Apply the unreachable policy without iterating."""
        logger.debug('Target %.3f away exceeds reach %.3f (%s)',
                     distance, reach, self.unreachable_policy.value)

        if self.unreachable_policy is UnreachablePolicy.STRETCH:
            positions = stretch_positions(chain.root, chain.lengths, target)
            return SolveResult(
                status=SolveStatus.STRETCHED,
                chain=chain.with_state(positions, local_orientations(positions)),
                converged=False,
                iterations=0,
                final_error=float(np.linalg.norm(positions[-1] - target)),
            )

        return SolveResult(
            status=SolveStatus.UNREACHABLE,
            chain=chain,
            converged=False,
            iterations=0,
            final_error=float(np.linalg.norm(chain.positions[-1] - target)),
        )


def solve_fabrik(chain: Chain,
                 target,
                 max_iterations: int = motion_config.FABRIK_MAX_ITERATIONS,
                 tolerance: float = motion_config.FABRIK_TOLERANCE,
                 unreachable_policy: Union[UnreachablePolicy, str] = motion_config.FABRIK_UNREACHABLE_POLICY
                 ) -> SolveResult:
    """Solve chain for target with a one-off FabrikSolver."""
    solver = FabrikSolver(
        default_tolerance=tolerance,
        default_max_iterations=max_iterations,
        unreachable_policy=unreachable_policy,
    )
    return solver.solve(chain, target)
