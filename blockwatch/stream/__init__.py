from .interfaces import BlockListener, BlockNotifierInterface
from .notifier import PollingBlockNotifier

__all__ = ["BlockListener", "BlockNotifierInterface", "PollingBlockNotifier"]
