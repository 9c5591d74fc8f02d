"""
Planar Chain Inverse Kinematics Module

FABRIK and CCD solvers for 2D articulated arms.

Modules:
    - chain_model: Chain, Joint, build_chain, cold start pose, forward kinematics
    - chain_reachability: Reachability check and unreachable-target policies
    - fabrik_solver: FABRIK orchestrator (use this for position-based IK)
    - fabrik_iteration: Single FABRIK iteration (forward + backward pass)
    - ccd_solver: Cyclic Coordinate Descent (rotation-based IK)
    - chain_orientation: Link rotations from solved positions
    - chain_registry: Owned collection of chains addressed by handle
"""

from .chain_errors import (
    ChainError, InvalidChainError, MissingEffectorError,
    UnreachableTargetError, UnknownChainError
)
from .chain_model import Chain, Joint, build_chain, cold_start_positions, forward_kinematics
from .chain_reachability import UnreachablePolicy, check_reachability, is_reachable
from .solve_result import IkSolver, SolveResult, SolveStatus
from .fabrik_iteration import FabrikIteration
from .fabrik_solver import FabrikSolver, solve_fabrik
from .ccd_solver import CcdSolver, solve_ccd
from .chain_orientation import local_orientations, world_orientations
from .chain_registry import ChainHandle, ChainRegistry

__all__ = [
    'ChainError',
    'InvalidChainError',
    'MissingEffectorError',
    'UnreachableTargetError',
    'UnknownChainError',
    'Chain',
    'Joint',
    'build_chain',
    'cold_start_positions',
    'forward_kinematics',
    'UnreachablePolicy',
    'check_reachability',
    'is_reachable',
    'IkSolver',
    'SolveResult',
    'SolveStatus',
    'FabrikIteration',
    'FabrikSolver',
    'solve_fabrik',
    'CcdSolver',
    'solve_ccd',
    'local_orientations',
    'world_orientations',
    'ChainHandle',
    'ChainRegistry'
]
