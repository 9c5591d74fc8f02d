#!/usr/bin/env python3
"""
Chain Errors Module

Exceptions raised by chain construction, reachability checks and the registry.
Degenerate directions never raise; the solvers recover from them locally.
"""


class ChainError(Exception):
    """Base class for all chain IK errors."""


class InvalidChainError(ChainError, ValueError):
    """Chain configuration violates the model contract."""


class MissingEffectorError(InvalidChainError):
    """Chain has no joints, so there is no end effector to move."""

    def __init__(self, message: str = 'chain needs at least one joint to have an end effector'):
        super().__init__(message)


class UnreachableTargetError(ChainError):
    """Target lies further from the root than the fully stretched chain."""

    def __init__(self, distance: float, total_length: float):
        self.distance = distance
        self.total_length = total_length
        super().__init__(
            f'target is {distance:.3f} from root but chain reaches only {total_length:.3f}'
        )


class UnknownChainError(ChainError, KeyError):
    """No chain is registered under the given handle."""
