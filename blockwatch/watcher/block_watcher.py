# blockwatch/watcher/block_watcher.py

from typing import Optional

from .output import OutputSink, console_output, format_block
from ..clients.interfaces import RPCClientInterface
from ..core.errors import BlockFetchError
from ..core.logging import LoggingMixin
from ..stream.interfaces import BlockListener


class BlockWatcher(BlockListener, LoggingMixin):
    """
    Prints the transactions of every newly observed block.

    For each notification the full block is fetched once and one line per
    transaction is written to the output sink. A failed fetch is logged and
    re-raised as BlockFetchError; nothing is printed for that block.
    """

    def __init__(self, rpc: RPCClientInterface, output: Optional[OutputSink] = None):
        self.rpc = rpc
        self.output = output or console_output
        self.blocks_seen = 0
        self.transactions_seen = 0

    def on_new_block(self, block_number: int) -> None:
        self.log_info(f"blockNumber {block_number}", block_number=block_number)

        try:
            block = self.rpc.get_block(block_number)
        except Exception as e:
            self.log_error("Block fetch failed",
                           block_number=block_number,
                           error=str(e),
                           exception_type=type(e).__name__)
            raise BlockFetchError(block_number, str(e)) from e

        lines = format_block(block)
        for line in lines:
            self.output(line)

        self.blocks_seen += 1
        self.transactions_seen += len(lines)
        self.log_debug("Block processed", block_number=block_number, tx_count=len(lines))
