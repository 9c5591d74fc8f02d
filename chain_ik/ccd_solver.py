#!/usr/bin/env python3
"""
CCD Solver
==========
Cyclic Coordinate Descent: rotation-based alternative to FABRIK on the same
chain shape.

Each sweep visits the joints from root to hand. Every joint is rotated
(by at most max_rotation_per_iteration) so its joint->hand vector turns
toward its joint->target vector. The hand position is recomputed after
every joint, since each rotation moves it.

When the hand lies past the target on the same ray from a joint, the angle
between the two vectors is zero; that joint turns by the full clamp instead so
the joints after it can fold the chain.

CCD never checks reachability and never reports failure: it runs the full
iteration budget and returns whatever pose it reached (best effort).
"""

import logging
from typing import Tuple

import numpy as np

from chain_config import motion as motion_config
from .chain_errors import InvalidChainError
from .chain_model import Chain, forward_kinematics
from .solve_result import IkSolver, SolveResult, SolveStatus
from .vector_math import as_point, cross, normalize, rotate_about, signed_angle, wrap_angle

logger = logging.getLogger(__name__)


def _sweep(orientations: np.ndarray,
           points: np.ndarray,
           target: np.ndarray,
           max_rotation: float,
           epsilon: float) -> int:
    """
    Run one root-to-hand sweep in place.

    Args:
        orientations: Parent-relative rotations, shape (num_joints,). Updated in place
        points: Joint positions followed by the hand, shape (num_joints+1, 2). Updated in place
        target: Target position
        max_rotation: Clamp for each joint's rotation (radians)
        epsilon: Hand-on-target distance and degenerate vector length

    Returns:
        Number of joints rotated
    """
    rotated = 0
    for i in range(len(orientations)):
        joint = points[i]
        hand = points[-1]

        # Already close enough, nothing to improve
        if np.linalg.norm(hand - target) <= epsilon:
            continue

        to_hand = normalize(hand - joint, epsilon=epsilon)
        to_target = normalize(target - joint, epsilon=epsilon)
        if to_hand is None or to_target is None:
            logger.debug('Skipping joint %d: coincides with hand or target', i)
            continue

        overshoot = np.linalg.norm(hand - joint) > np.linalg.norm(target - joint)
        if overshoot and abs(cross(to_hand, to_target)) <= motion_config.DEGENERATE_EPSILON \
                and np.dot(to_hand, to_target) > 0.0:
            # Hand past the target on the same ray: turn off the ray so later joints can fold
            angle = max_rotation
        else:
            angle = float(np.clip(signed_angle(to_hand, to_target), -max_rotation, max_rotation))
        if angle == 0.0:
            continue

        # Compose with the existing rotation and carry every child along
        orientations[i] = wrap_angle(orientations[i] + angle)
        points[i + 1:] = rotate_about(points[i + 1:], joint, angle)
        rotated += 1

    return rotated


def _solve(orientations,
           joint_positions,
           hand_position,
           target,
           max_iterations: int,
           max_rotation_per_iteration: float,
           epsilon: float) -> Tuple[np.ndarray, np.ndarray]:
    """Run the bounded CCD loop on copies. Returns (orientations, points)."""
    if max_iterations < 0:
        raise ValueError(f'max_iterations must be >= 0, got {max_iterations}')
    if max_rotation_per_iteration < 0:
        raise ValueError(f'max_rotation_per_iteration must be >= 0, got {max_rotation_per_iteration}')

    orientations = np.array(orientations, dtype=np.float64).reshape(-1)
    joint_positions = np.asarray(joint_positions, dtype=np.float64).reshape(-1, 2)
    if len(joint_positions) != len(orientations):
        raise InvalidChainError(
            f'got {len(joint_positions)} joint positions for {len(orientations)} orientations'
        )

    points = np.vstack([joint_positions, as_point(hand_position)])
    target = as_point(target)

    for iteration in range(max_iterations):
        rotated = _sweep(orientations, points, target, max_rotation_per_iteration, epsilon)
        logger.debug('CCD sweep %d rotated %d joints, error %.5f',
                     iteration + 1, rotated, np.linalg.norm(points[-1] - target))

    return orientations, points


def solve_ccd(chain_orientations,
              joint_positions,
              lengths,
              hand_position,
              target,
              max_iterations: int = motion_config.CCD_MAX_ITERATIONS,
              max_rotation_per_iteration: float = motion_config.CCD_MAX_ROTATION_PER_ITERATION,
              epsilon: float = motion_config.CCD_EPSILON) -> np.ndarray:
    """
    Solve inverse kinematics using Cyclic Coordinate Descent.

    Args:
        chain_orientations: Parent-relative rotation of each joint (radians)
        joint_positions: World position of each joint, root first, shape (num_joints, 2)
        lengths: Link lengths, shape (num_joints,)
        hand_position: World position of the end effector
        target: Target position [x, y]
        max_iterations: Number of full root-to-hand sweeps
        max_rotation_per_iteration: Largest rotation of one joint per sweep (radians)
        epsilon: Hand-on-target distance, and length below which a vector is degenerate

    Returns:
        Updated parent-relative rotations, shape (num_joints,)

    Raises:
        InvalidChainError: sizes disagree, or the distances between consecutive
                           positions do not match lengths (within epsilon)
    """
    lengths = np.asarray(lengths, dtype=np.float64).reshape(-1)
    joint_positions = np.asarray(joint_positions, dtype=np.float64).reshape(-1, 2)
    if len(lengths) != len(np.asarray(chain_orientations).reshape(-1)):
        raise InvalidChainError('lengths and chain_orientations must have the same size')

    if len(joint_positions) == len(lengths):
        points = np.vstack([joint_positions, as_point(hand_position)])
        link_lengths = np.linalg.norm(np.diff(points, axis=0), axis=1)
        if not np.allclose(link_lengths, lengths, atol=epsilon):
            raise InvalidChainError(
                f'joint positions give link lengths {link_lengths.tolist()}, expected {lengths.tolist()}'
            )

    orientations, _ = _solve(chain_orientations, joint_positions, hand_position, target,
                             max_iterations, max_rotation_per_iteration, epsilon)
    return orientations


class CcdSolver(IkSolver):
    """CCD strategy on a Chain. Always best effort, never UNREACHABLE."""

    def __init__(self,
                 max_iterations: int = motion_config.CCD_MAX_ITERATIONS,
                 max_rotation_per_iteration: float = motion_config.CCD_MAX_ROTATION_PER_ITERATION,
                 epsilon: float = motion_config.CCD_EPSILON):
        self.max_iterations = max_iterations
        self.max_rotation_per_iteration = max_rotation_per_iteration
        self.epsilon = epsilon

    def solve(self, chain: Chain, target) -> SolveResult:
        target = as_point(target)

        # Positions follow from the stored rotations; a chain at rest unfolds along the rest axis
        positions = forward_kinematics(chain.root, chain.lengths, chain.orientations)

        orientations, points = _solve(
            chain.orientations, positions[:-1], positions[-1], target,
            self.max_iterations, self.max_rotation_per_iteration, self.epsilon
        )

        final_error = float(np.linalg.norm(points[-1] - target))
        return SolveResult(
            status=SolveStatus.SOLVED,
            chain=chain.with_state(points, orientations),
            converged=final_error <= self.epsilon,
            iterations=self.max_iterations,
            final_error=final_error,
        )
