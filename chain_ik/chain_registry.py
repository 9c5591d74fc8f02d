#!/usr/bin/env python3
"""
Chain Registry Module

Owned collection of chains addressed by integer handles. Each chain is
solved independently; no state is shared between chains.
"""

import logging
from typing import Dict, Iterator, NewType, Tuple

from .chain_errors import UnknownChainError
from .chain_model import Chain
from .solve_result import IkSolver, SolveResult, SolveStatus

logger = logging.getLogger(__name__)

ChainHandle = NewType('ChainHandle', int)


class ChainRegistry:
    """Chains owned by index. Handles are never reused after removal."""

    def __init__(self):
        self._chains: Dict[ChainHandle, Chain] = {}
        self._next_handle = 0

    def add(self, chain: Chain) -> ChainHandle:
        handle = ChainHandle(self._next_handle)
        self._next_handle += 1
        self._chains[handle] = chain
        return handle

    def get(self, handle: ChainHandle) -> Chain:
        try:
            return self._chains[handle]
        except KeyError:
            raise UnknownChainError(f'no chain registered under handle {handle}') from None

    def update(self, handle: ChainHandle, chain: Chain) -> None:
        self.get(handle)
        self._chains[handle] = chain

    def remove(self, handle: ChainHandle) -> Chain:
        chain = self.get(handle)
        del self._chains[handle]
        return chain

    def __len__(self) -> int:
        return len(self._chains)

    def __contains__(self, handle) -> bool:
        return handle in self._chains

    def __iter__(self) -> Iterator[Tuple[ChainHandle, Chain]]:
        return iter(list(self._chains.items()))

    def solve(self, handle: ChainHandle, target, solver: IkSolver) -> SolveResult:
        """
        Solve one chain and store the updated chain.

        An UNREACHABLE result leaves the stored chain as it was.
        """
        result = solver.solve(self.get(handle), target)
        logger.debug('Chain %d: %s, error %.5f', handle, result.status.value, result.final_error)
        if result.status is not SolveStatus.UNREACHABLE:
            self._chains[handle] = result.chain
        return result

    def solve_all(self, target, solver: IkSolver) -> Dict[ChainHandle, SolveResult]:
        """Solve every chain for the same target. Returns results by handle."""
        return {handle: self.solve(handle, target, solver) for handle, _ in self}
