# blockwatch/types/config.py

from typing import Optional
from pathlib import Path

from msgspec import Struct


class RpcConfig(Struct, frozen=True):
    endpoint_url: str
    timeout: int = 30

class StreamConfig(Struct, frozen=True):
    poll_interval: float = 4.0
    max_catchup_blocks: int = 1000

class LoggingConfig(Struct, frozen=True):
    log_level: str = "INFO"
    log_dir: Optional[Path] = None
    file_enabled: bool = False
    structured_format: bool = False
