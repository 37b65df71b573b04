# blockwatch/core/config.py

import os
from pathlib import Path
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from msgspec import Struct

from ..types import RpcConfig, StreamConfig, LoggingConfig
from .errors import ConfigError

ENV_PREFIX = "BLOCKWATCH_"
DEFAULT_RPC_URL = "http://127.0.0.1:8545"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("1", "true", "yes", "on")


class WatcherConfig(Struct, frozen=True):
    rpc: RpcConfig
    stream: StreamConfig
    logging: LoggingConfig

    @classmethod
    def from_env(cls, env_vars: Optional[Mapping[str, str]] = None,
                 load_env_file: bool = True, **overrides) -> 'WatcherConfig':
        """
        Build configuration from BLOCKWATCH_* environment variables.

        Keyword overrides (rpc_url, rpc_timeout, poll_interval, max_catchup,
        log_level, log_dir, log_file, log_structured) win over the environment
        when not None.
        """
        if env_vars is None:
            if load_env_file:
                load_dotenv()
            env_vars = os.environ

        def get(name: str, default: Any = None) -> Any:
            override = overrides.get(name)
            if override is not None:
                return override
            return env_vars.get(f"{ENV_PREFIX}{name.upper()}", default)

        try:
            rpc = RpcConfig(
                endpoint_url=str(get("rpc_url", DEFAULT_RPC_URL)).strip(),
                timeout=int(get("rpc_timeout", 30)),
            )
            stream = StreamConfig(
                poll_interval=float(get("poll_interval", 4.0)),
                max_catchup_blocks=int(get("max_catchup", 1000)),
            )
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid numeric configuration value: {e}") from e

        log_dir = get("log_dir")
        logging_config = LoggingConfig(
            log_level=str(get("log_level", "INFO")).upper(),
            log_dir=Path(log_dir) if log_dir else None,
            file_enabled=_env_bool(get("log_file", "false")),
            structured_format=_env_bool(get("log_structured", "false")),
        )

        config = cls(rpc=rpc, stream=stream, logging=logging_config)
        config.validate()
        return config

    def validate(self) -> None:
        if not self.rpc.endpoint_url:
            raise ConfigError("RPC endpoint URL must not be empty")
        if not self.rpc.endpoint_url.startswith(("http://", "https://")):
            raise ConfigError(f"RPC endpoint must be an HTTP(S) URL: {self.rpc.endpoint_url}")
        if self.rpc.timeout <= 0:
            raise ConfigError("RPC timeout must be positive")
        if self.stream.poll_interval <= 0:
            raise ConfigError("Poll interval must be positive")
        if self.stream.max_catchup_blocks < 1:
            raise ConfigError("Max catch-up blocks must be at least 1")
        if self.logging.log_level not in LOG_LEVELS:
            raise ConfigError(f"Unknown log level: {self.logging.log_level}")
        if self.logging.file_enabled and self.logging.log_dir is None:
            raise ConfigError("File logging requires BLOCKWATCH_LOG_DIR")
