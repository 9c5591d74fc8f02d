#!/usr/bin/env python3
"""
Chain Model Module

Ordered kinematic chain: a fixed root, one joint per rigid link, the joint
positions (root first, hand last) and the parent-relative link orientations.
Supports the rest state (all positions on the root), the cold start pose
(straight along the rest axis) and forward kinematics from orientations.
"""

from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple

import numpy as np

from chain_config import physical as phys_config
from .chain_errors import InvalidChainError, MissingEffectorError
from .vector_math import REST_AXIS, as_point, rotate


@dataclass(frozen=True)
class Joint:
    """A hinge point in the chain. Its position lives in the chain, not here."""
    length: float
    # Declared range, kept as metadata only. No solver enforces it.
    angle_min: float = phys_config.DEFAULT_ANGLE_MIN
    angle_max: float = phys_config.DEFAULT_ANGLE_MAX


@dataclass(eq=False)
class Chain:
    """
    Ordered kinematic chain.

    positions has one more row than joints: positions[0] is the root and
    positions[-1] the end effector. orientations[i] is the rotation of link i
    relative to its parent link (link 0 relative to the world rest axis).
    """
    root: np.ndarray
    joints: Tuple[Joint, ...]
    positions: np.ndarray
    orientations: np.ndarray
    lengths: np.ndarray = field(init=False, repr=False)

    def __post_init__(self):
        try:
            self.root = as_point(self.root)
        except ValueError as exc:
            raise InvalidChainError(f'root must be a 2D point, got {self.root!r}') from exc
        self.joints = tuple(self.joints)
        self.positions = np.asarray(self.positions, dtype=np.float64)
        self.orientations = np.asarray(self.orientations, dtype=np.float64)
        self.lengths = np.array([joint.length for joint in self.joints], dtype=np.float64)

        if len(self.joints) == 0:
            raise MissingEffectorError()
        if not np.all(np.isfinite(self.root)):
            raise InvalidChainError(f'root must be finite, got {self.root.tolist()}')
        _validate_lengths(self.lengths)
        if self.positions.shape != (len(self.joints) + 1, 2):
            raise InvalidChainError(
                f'expected positions of shape {(len(self.joints) + 1, 2)}, got {self.positions.shape}'
            )
        if self.orientations.shape != (len(self.joints),):
            raise InvalidChainError(
                f'expected {len(self.joints)} orientations, got shape {self.orientations.shape}'
            )

    @property
    def num_joints(self) -> int:
        return len(self.joints)

    @property
    def total_length(self) -> float:
        return float(np.sum(self.lengths))

    @property
    def end_effector(self) -> np.ndarray:
        return self.positions[-1].copy()

    def is_at_rest(self) -> bool:
        """True while every position still sits on the root (nothing solved yet)."""
        offsets = np.linalg.norm(self.positions - self.root, axis=1)
        return bool(np.all(offsets <= phys_config.REST_POSITION_TOLERANCE))

    def with_state(self, positions: np.ndarray, orientations: np.ndarray) -> 'Chain':
        """Return a new chain sharing joints and root, with copied state buffers."""
        return Chain(
            root=self.root.copy(),
            joints=self.joints,
            positions=np.array(positions, dtype=np.float64),
            orientations=np.array(orientations, dtype=np.float64),
        )

    def reset(self) -> 'Chain':
        """Return this chain in its rest state (drops any previous solution)."""
        return self.with_state(
            np.tile(self.root, (self.num_joints + 1, 1)),
            np.zeros(self.num_joints),
        )


def _validate_lengths(lengths: Sequence[float]) -> np.ndarray:
    lengths = np.asarray(lengths, dtype=np.float64).reshape(-1)
    if lengths.size == 0:
        raise MissingEffectorError()
    if not np.all(np.isfinite(lengths)):
        raise InvalidChainError(f'segment lengths must be finite, got {lengths.tolist()}')
    if np.any(lengths < 0.0):
        raise InvalidChainError(f'segment lengths must be non-negative, got {lengths.tolist()}')
    return lengths


def build_chain(root,
                lengths: Sequence[float],
                angle_limits: Optional[Sequence[Tuple[float, float]]] = None) -> Chain:
    """
    Build a chain in its rest state.

    Every position starts on the root (zero extension) and every orientation
    at zero. Solvers unfold the chain on their first pass.

    Args:
        root: Base position [x, y]
        lengths: Link lengths, root to hand
        angle_limits: Optional (angle_min, angle_max) per joint in radians.
                      Stored as metadata, never enforced

    Returns:
        New Chain

    Raises:
        MissingEffectorError: lengths is empty
        InvalidChainError: negative or non-finite length, bad root, or
                           angle_limits of the wrong size
    """
    try:
        root = as_point(root)
    except ValueError as exc:
        raise InvalidChainError(f'root must be a 2D point, got {root!r}') from exc
    if not np.all(np.isfinite(root)):
        raise InvalidChainError(f'root must be finite, got {root.tolist()}')

    lengths = _validate_lengths(lengths)

    if angle_limits is None:
        joints = tuple(Joint(float(length)) for length in lengths)
    else:
        angle_limits = list(angle_limits)
        if len(angle_limits) != len(lengths):
            raise InvalidChainError(
                f'got {len(angle_limits)} angle limits for {len(lengths)} joints'
            )
        joints = tuple(
            Joint(float(length), float(angle_min), float(angle_max))
            for length, (angle_min, angle_max) in zip(lengths, angle_limits)
        )

    return Chain(
        root=root,
        joints=joints,
        positions=np.tile(root, (len(joints) + 1, 1)),
        orientations=np.zeros(len(joints)),
    )


def cold_start_positions(root: np.ndarray, lengths: np.ndarray) -> np.ndarray:
    """
    Create positions of a straight chain along the rest axis (cold start).

    Returns:
        Array of shape (num_joints+1, 2), positions[0] == root
    """
    root = as_point(root)
    offsets = np.concatenate(([0.0], np.cumsum(lengths)))
    return root + offsets[:, np.newaxis] * REST_AXIS


def forward_kinematics(root: np.ndarray,
                       lengths: np.ndarray,
                       orientations: np.ndarray) -> np.ndarray:
    """
    Calculate joint positions from parent-relative link orientations.

    The world angle of link i is the sum of orientations[0..i]; at angle zero
    a link points along the rest axis.

    Args:
        root: Base position, shape (2,)
        lengths: Link lengths, shape (num_joints,)
        orientations: Parent-relative rotations in radians, shape (num_joints,)

    Returns:
        Positions of shape (num_joints+1, 2)
    """
    root = as_point(root)
    positions = np.zeros((len(lengths) + 1, 2), dtype=np.float64)
    positions[0] = root

    world_angle = 0.0
    for i, (length, orientation) in enumerate(zip(lengths, orientations)):
        world_angle += orientation
        positions[i + 1] = positions[i] + rotate(REST_AXIS, world_angle) * length

    return positions
