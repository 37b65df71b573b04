"""
Interfaces for node RPC access.

The watcher only needs read-only queries: the current head and a full
block by height.
"""
from abc import ABC, abstractmethod

from ..types import Block


class RPCClientInterface(ABC):
    """Interface for RPC client implementations."""

    @abstractmethod
    def get_block_number(self) -> int:
        """
        Get the latest block number.

        Returns:
            Latest block number
        """
        pass

    @abstractmethod
    def get_block(self, block_number: int) -> Block:
        """
        Get a block by number, including full transaction objects.

        Args:
            block_number: Block number

        Returns:
            Block data
        """
        pass
