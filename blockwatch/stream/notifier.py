"""
Polling new-block notifier.

HTTP JSON-RPC has no push channel, so new blocks are observed by polling
eth_blockNumber and announcing every height between the last seen head
and the current one.
"""
import threading
from typing import Optional, Callable

from .interfaces import BlockNotifierInterface, BlockListener
from ..clients.interfaces import RPCClientInterface
from ..core.errors import WatcherError
from ..core.logging import LoggingMixin
from ..types import StreamConfig


class PollingBlockNotifier(BlockNotifierInterface, LoggingMixin):
    """
    New-block notification feed backed by head polling.

    The first poll only records the current head. Each later poll calls the
    listener for every height in (last_seen, head], lowest first. Listener
    and RPC exceptions are not caught here and end the run. stop() is final,
    including when it is called before run().
    """

    def __init__(self,
                 rpc: RPCClientInterface,
                 config: Optional[StreamConfig] = None,
                 sleep: Optional[Callable[[float], None]] = None):
        self.rpc = rpc
        self.config = config or StreamConfig()
        self.listener: Optional[BlockListener] = None
        self.last_seen: Optional[int] = None
        self.polls = 0

        self._remaining: Optional[int] = None
        self._stop_event = threading.Event()
        self._sleep = sleep or self._interruptible_sleep

    def register_listener(self, listener: BlockListener) -> None:
        if self.listener is not None:
            raise WatcherError("A block listener is already registered")
        self.listener = listener

    def stop(self) -> None:
        self._stop_event.set()

    @property
    def stopped(self) -> bool:
        return self._stop_event.is_set()

    def _interruptible_sleep(self, seconds: float) -> None:
        self._stop_event.wait(seconds)

    def poll(self) -> list[int]:
        """
        Run a single poll and notify the listener.

        Returns:
            Block numbers announced during this poll
        """
        if self.listener is None:
            raise WatcherError("No block listener registered")

        head = self.rpc.get_block_number()
        self.polls += 1

        if self.last_seen is None:
            self.last_seen = head
            self.log_info("Starting from latest block", head=head)
            return []

        if head < self.last_seen:
            self.log_warning("Head moved backwards, resynchronising",
                             head=head, last_seen=self.last_seen)
            self.last_seen = head
            return []

        if head == self.last_seen:
            return []

        start = self.last_seen + 1
        window = self.config.max_catchup_blocks
        if head - start + 1 > window:
            skipped = head - start + 1 - window
            self.log_warning("Too many blocks behind, skipping to recent window",
                             head=head, last_seen=self.last_seen, skipped=skipped)
            start = head - window + 1

        announced = []
        for block_number in range(start, head + 1):
            self.listener.on_new_block(block_number)
            self.last_seen = block_number
            announced.append(block_number)

            if self._remaining is not None:
                self._remaining -= 1
                if self._remaining <= 0:
                    self.stop()

            if self.stopped:
                break

        return announced

    def run(self, max_polls: Optional[int] = None, max_blocks: Optional[int] = None) -> None:
        if self.listener is None:
            raise WatcherError("No block listener registered")

        self._remaining = max_blocks
        self.log_info("Block polling started")

        try:
            polls = 0
            while not self.stopped:
                self.poll()
                polls += 1

                if self.stopped or (max_polls is not None and polls >= max_polls):
                    break

                self._sleep(self.config.poll_interval)
        finally:
            self._remaining = None

        self.log_info("Block polling stopped", last_seen=self.last_seen)
