#!/usr/bin/env python3
"""
Chain Reachability Module

Decides whether a target lies within the chain's maximum reach. FABRIK runs
this once before its main loop: its passes cannot detect an out-of-reach
target themselves and would oscillate until the iteration budget runs out.
"""

import logging
from enum import Enum

import numpy as np

from .chain_errors import UnreachableTargetError
from .vector_math import REST_AXIS, as_point, normalize

logger = logging.getLogger(__name__)


class UnreachablePolicy(Enum):
    """What a solver does with a target outside the chain's reach."""
    REPORT = 'report'    # Surface UNREACHABLE, leave the chain unchanged
    STRETCH = 'stretch'  # Point every link straight at the target, no iteration


def total_length(lengths) -> float:
    """Sum of link lengths (reach of the fully stretched chain)."""
    return float(np.sum(lengths))


def target_distance(root, target) -> float:
    """Distance from root to target."""
    return float(np.linalg.norm(as_point(target) - as_point(root)))


def is_reachable(root, lengths, target) -> bool:
    """True unless the target is further from the root than the stretched chain reaches."""
    return not total_length(lengths) < target_distance(root, target)


def check_reachability(root, lengths, target) -> None:
    """
    Raise if the target is out of reach.

    Raises:
        UnreachableTargetError: total length < distance from root to target
    """
    distance = target_distance(root, target)
    reach = total_length(lengths)
    if reach < distance:
        logger.debug('Target out of reach: distance %.3f > reach %.3f', distance, reach)
        raise UnreachableTargetError(distance, reach)


def stretch_positions(root, lengths, target) -> np.ndarray:
    """
    Point every link straight from the root toward the target in one pass.

    Used by the STRETCH policy. When the target coincides with the root the
    chain is stretched along the rest axis.

    Returns:
        Positions of shape (num_joints+1, 2)
    """
    root = as_point(root)
    direction = normalize(as_point(target) - root, fallback=REST_AXIS)
    offsets = np.concatenate(([0.0], np.cumsum(lengths)))
    return root + offsets[:, np.newaxis] * direction
