# blockwatch/__init__.py

import logging
from typing import Mapping, Optional

from .core.config import WatcherConfig
from .core.container import WatcherContainer
from .core.logging import WatcherLogger, log_with_context
from .clients.rpc_client import NodeRpcClient
from .stream.notifier import PollingBlockNotifier
from .watcher.block_watcher import BlockWatcher
from .watcher.output import OutputSink

__version__ = "0.1.0"


def create_watcher(env_vars: Optional[Mapping[str, str]] = None,
                   output: Optional[OutputSink] = None,
                   configure_logging: bool = True,
                   **overrides) -> WatcherContainer:
    """
    Build a container holding the configured connection handle, notifier and
    watcher. Services are created lazily; the RPC connection is opened the
    first time NodeRpcClient is requested and closed by container.shutdown().
    """
    config = WatcherConfig.from_env(env_vars, **overrides)
    if configure_logging:
        _configure_logging(config)

    logger = WatcherLogger.get_logger('core.init')
    log_with_context(logger, logging.DEBUG, "Creating watcher",
                     endpoint=config.rpc.endpoint_url)

    container = WatcherContainer(config)
    container.register_instance(WatcherConfig, config)
    container.register_factory(NodeRpcClient, _create_rpc_client)
    container.register_factory(BlockWatcher, lambda c: BlockWatcher(c.get(NodeRpcClient), output))
    container.register_factory(PollingBlockNotifier, _create_notifier)
    return container


def _configure_logging(config: WatcherConfig) -> None:
    WatcherLogger.configure(
        log_dir=config.logging.log_dir,
        log_level=config.logging.log_level,
        console_enabled=True,
        file_enabled=config.logging.file_enabled,
        structured_format=config.logging.structured_format,
        force=True,
    )


def _create_rpc_client(container: WatcherContainer) -> NodeRpcClient:
    return NodeRpcClient(container.config.rpc).open()


def _create_notifier(container: WatcherContainer) -> PollingBlockNotifier:
    notifier = PollingBlockNotifier(container.get(NodeRpcClient), container.config.stream)
    notifier.register_listener(container.get(BlockWatcher))
    return notifier


__all__ = [
    "create_watcher",
    "WatcherConfig",
    "WatcherContainer",
    "NodeRpcClient",
    "PollingBlockNotifier",
    "BlockWatcher",
]
