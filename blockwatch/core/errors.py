# blockwatch/core/errors.py

from typing import Optional


class WatcherError(Exception):
    """Base class for all block watcher failures"""


class ConfigError(WatcherError):
    """Raised when configuration values are missing or malformed"""


class NodeConnectionError(WatcherError, ConnectionError):
    """Raised when the RPC node cannot be reached or the handle is closed"""

    def __init__(self, message: str, endpoint: Optional[str] = None):
        super().__init__(message)
        self.endpoint = endpoint


class BlockFetchError(WatcherError):
    """Raised when a block cannot be retrieved from the node"""

    def __init__(self, block_number: int, message: str):
        super().__init__(f"Failed to fetch block {block_number}: {message}")
        self.block_number = block_number
