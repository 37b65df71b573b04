"""
Interfaces for new-block notification components.
"""
from abc import ABC, abstractmethod
from typing import Optional


class BlockListener(ABC):
    """Interface for components that listen for new blocks."""

    @abstractmethod
    def on_new_block(self, block_number: int) -> None:
        """
        Called once per newly observed block.

        Args:
            block_number: Block number reported by the node
        """
        pass


class BlockNotifierInterface(ABC):
    """Interface for new-block notification feeds."""

    @abstractmethod
    def register_listener(self, listener: BlockListener) -> None:
        """
        Register the block listener. A feed carries exactly one listener.

        Args:
            listener: Block listener to register
        """
        pass

    @abstractmethod
    def run(self, max_polls: Optional[int] = None, max_blocks: Optional[int] = None) -> None:
        """
        Deliver notifications until stopped.

        Args:
            max_polls: Stop after this many polls (optional)
            max_blocks: Stop after this many notifications (optional)
        """
        pass

    @abstractmethod
    def stop(self) -> None:
        """Stop delivering notifications."""
        pass
