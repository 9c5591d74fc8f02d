#!/usr/bin/env python3
"""
FABRIK Iteration Module

Implements the forward and backward reaching passes of the FABRIK IK solver.

Naming follows the reaching direction:
    - forward pass: end-effector -> root (pins the hand on the target)
    - backward pass: root -> end-effector (pins the root back on its base)
"""

import logging

import numpy as np

from .vector_math import REST_AXIS, normalize

logger = logging.getLogger(__name__)


class FabrikIteration:
    """FABRIK iteration with forward and backward passes."""

    @staticmethod
    def _reaching_direction(desired: np.ndarray,
                            previous: np.ndarray,
                            rest_direction: np.ndarray,
                            index: int) -> np.ndarray:
        """
        Unit direction for one link placement.

        Falls back to the link's direction before the pass, then to the rest
        axis, when the desired vector has zero length.
        """
        direction = normalize(desired)
        if direction is not None:
            return direction

        direction = normalize(previous)
        if direction is not None:
            logger.debug('Degenerate direction at joint %d, reusing previous link direction', index)
            return direction

        logger.debug('Degenerate direction at joint %d, using rest axis', index)
        return rest_direction

    @staticmethod
    def forward_pass(joints: np.ndarray,
                     target: np.ndarray,
                     segment_lengths: np.ndarray) -> np.ndarray:
        """
        Perform forward pass: pull joints toward target from end-effector to root.

        Args:
            joints: Current joint positions, shape (num_joints+1, 2)
            target: Target end-effector position, shape (2,)
            segment_lengths: Link lengths, shape (num_joints,)

        Returns:
            f_joints: Joint positions after forward pass, shape (num_joints+1, 2)
        """
        f_joints = joints.copy()

        # Step 1: Move end-effector to target
        f_joints[-1] = target

        # Step 2: Loop from second-to-last joint down to root
        for i in range(len(joints) - 2, -1, -1):
            direction = FabrikIteration._reaching_direction(
                f_joints[i] - f_joints[i + 1],
                joints[i] - joints[i + 1],
                -REST_AXIS,
                i
            )
            f_joints[i] = f_joints[i + 1] + direction * segment_lengths[i]

        return f_joints

    @staticmethod
    def backward_pass(forward_joints: np.ndarray,
                      root: np.ndarray,
                      segment_lengths: np.ndarray) -> np.ndarray:
        """
        Perform backward pass: push joints from root toward end-effector.

        Args:
            forward_joints: Joint positions after forward pass, shape (num_joints+1, 2)
            root: Fixed base position, shape (2,)
            segment_lengths: Link lengths, shape (num_joints,)

        Returns:
            b_joints: Joint positions after backward pass, shape (num_joints+1, 2)
        """
        b_joints = forward_joints.copy()

        # Step 1: Pin root on its base
        b_joints[0] = root

        # Step 2: Loop from root to end-effector
        for i in range(len(forward_joints) - 1):
            direction = FabrikIteration._reaching_direction(
                b_joints[i + 1] - b_joints[i],
                forward_joints[i + 1] - forward_joints[i],
                REST_AXIS,
                i + 1
            )
            b_joints[i + 1] = b_joints[i] + direction * segment_lengths[i]

        return b_joints

    @staticmethod
    def iterate_once(joints: np.ndarray,
                     target: np.ndarray,
                     root: np.ndarray,
                     segment_lengths: np.ndarray) -> np.ndarray:
        """
        Perform one complete FABRIK iteration (forward + backward).

        Args:
            joints: Current joint positions
            target: Target position
            root: Fixed base position
            segment_lengths: Fixed link lengths

        Returns:
            Updated joint positions after one iteration. Every link has its
            exact length and positions[0] == root.
        """
        f_joints = FabrikIteration.forward_pass(joints, target, segment_lengths)
        return FabrikIteration.backward_pass(f_joints, root, segment_lengths)

    @staticmethod
    def calculate_segment_lengths(joints: np.ndarray) -> np.ndarray:
        """
        Calculate distances between consecutive joints.

        Args:
            joints: Array of shape (num_joints+1, 2)

        Returns:
            Array of distances of shape (num_joints,)
        """
        return np.linalg.norm(np.diff(joints, axis=0), axis=1)
