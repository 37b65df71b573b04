# blockwatch/types/__init__.py

# Chain Types
from .chain import (
    Block,
    Transaction,
)

# Configuration Types
from .config import (
    RpcConfig,
    StreamConfig,
    LoggingConfig,
)

__all__ = [
    "Block",
    "Transaction",
    "RpcConfig",
    "StreamConfig",
    "LoggingConfig",
]
