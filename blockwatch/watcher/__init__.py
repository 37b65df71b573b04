from .block_watcher import BlockWatcher
from .output import console_output, format_block, format_transaction

__all__ = ["BlockWatcher", "console_output", "format_block", "format_transaction"]
