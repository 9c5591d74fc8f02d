#!/usr/bin/env python3
"""
Vector Math Module

Small 2D helpers shared by the FABRIK and CCD solvers.
"""

import math
from typing import Optional

import numpy as np

from chain_config import motion as motion_config
from chain_config import physical as phys_config

REST_AXIS = np.array(phys_config.REST_AXIS, dtype=np.float64)


def as_point(value) -> np.ndarray:
    """Convert any 2-sequence to a float64 point of shape (2,)."""
    return np.asarray(value, dtype=np.float64).reshape(2)


def normalize(vector: np.ndarray,
              fallback: Optional[np.ndarray] = None,
              epsilon: float = motion_config.DEGENERATE_EPSILON) -> Optional[np.ndarray]:
    """
    Normalize a vector, guarding against zero length.

    Args:
        vector: Vector to normalize
        fallback: Returned (normalized) when vector is degenerate. If the fallback
                  is degenerate as well, or None, the result is None
        epsilon: Length below which a vector counts as degenerate

    Returns:
        Unit vector, or None if neither vector nor fallback can be normalized
    """
    length = np.linalg.norm(vector)
    if length > epsilon:
        return vector / length
    if fallback is None:
        return None
    fallback_length = np.linalg.norm(fallback)
    if fallback_length > epsilon:
        return fallback / fallback_length
    return None


def cross(a: np.ndarray, b: np.ndarray) -> float:
    """2D cross (perp-dot) product. Positive when b is counter-clockwise of a."""
    return float(a[0] * b[1] - a[1] * b[0])


def signed_angle(from_vector: np.ndarray, to_vector: np.ndarray) -> float:
    """Signed angle in radians rotating from_vector onto to_vector, in [-pi, pi]."""
    return math.atan2(cross(from_vector, to_vector), float(np.dot(from_vector, to_vector)))


def is_collinear(points: np.ndarray, epsilon: float = motion_config.FABRIK_COLLINEAR_EPSILON) -> bool:
    """True if every point lies within epsilon of one line through points[0]."""
    offsets = np.asarray(points, dtype=np.float64) - points[0]
    distances = np.linalg.norm(offsets, axis=1)
    farthest = int(np.argmax(distances))
    if distances[farthest] <= epsilon:
        return True

    direction = offsets[farthest] / distances[farthest]
    off_line = offsets[:, 0] * direction[1] - offsets[:, 1] * direction[0]
    return bool(np.all(np.abs(off_line) <= epsilon))


def rotate(vector: np.ndarray, angle: float) -> np.ndarray:
    """Rotate a vector counter-clockwise by angle radians."""
    c = math.cos(angle)
    s = math.sin(angle)
    return np.array([c * vector[0] - s * vector[1],
                     s * vector[0] + c * vector[1]])


def rotate_about(points: np.ndarray, pivot: np.ndarray, angle: float) -> np.ndarray:
    """Rotate an (N, 2) array of points about pivot by angle radians."""
    c = math.cos(angle)
    s = math.sin(angle)
    rotation = np.array([[c, -s], [s, c]])
    return (points - pivot) @ rotation.T + pivot


def wrap_angle(angle):
    """Wrap an angle (or array of angles) to (-pi, pi]."""
    wrapped = np.pi - np.mod(np.pi - np.asarray(angle, dtype=np.float64), 2.0 * np.pi)
    if np.ndim(wrapped) == 0:
        return float(wrapped)
    return wrapped
