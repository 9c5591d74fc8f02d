#!/usr/bin/env python3
"""
Chain Orientation Module

Converts solved joint positions into per-link rotations for a renderer or
animator.

Convention: a link at rotation 0 points along the rest axis (+Y, "up"), so
the rotation of a link is atan2 of its vector minus pi/2. All angles are in
radians, wrapped to (-pi, pi].
"""

import math

import numpy as np

from chain_config import motion as motion_config
from chain_config import physical as phys_config
from .vector_math import wrap_angle


def link_angle(vector: np.ndarray) -> float:
    """World rotation of a single link vector relative to the rest axis."""
    return wrap_angle(math.atan2(vector[1], vector[0]) - phys_config.REST_AXIS_OFFSET)


def world_orientations(positions: np.ndarray,
                       epsilon: float = motion_config.DEGENERATE_EPSILON) -> np.ndarray:
    """
    Calculate the world rotation of every link.

    A zero-length link has no direction of its own and inherits the rotation
    of the link before it (the first link falls back to 0).

    Args:
        positions: Joint positions, shape (num_joints+1, 2)

    Returns:
        World rotations, shape (num_joints,)
    """
    positions = np.asarray(positions, dtype=np.float64)
    angles = np.zeros(len(positions) - 1, dtype=np.float64)

    previous = 0.0
    for i, vector in enumerate(np.diff(positions, axis=0)):
        if np.linalg.norm(vector) > epsilon:
            previous = link_angle(vector)
        angles[i] = previous

    return angles


def world_to_local(world: np.ndarray) -> np.ndarray:
    """Parent-relative rotations from world rotations."""
    world = np.asarray(world, dtype=np.float64)
    return wrap_angle(np.diff(world, prepend=0.0))


def orientations_to_world(local: np.ndarray) -> np.ndarray:
    """World rotations from parent-relative rotations."""
    return wrap_angle(np.cumsum(np.asarray(local, dtype=np.float64)))


def local_orientations(positions: np.ndarray,
                       epsilon: float = motion_config.DEGENERATE_EPSILON) -> np.ndarray:
    """
    Calculate the parent-relative rotation of every link.

    This is the form chain.orientations stores, and the form forward
    kinematics consumes.

    Args:
        positions: Joint positions, shape (num_joints+1, 2)

    Returns:
        Parent-relative rotations, shape (num_joints,)
    """
    return world_to_local(world_orientations(positions, epsilon))
