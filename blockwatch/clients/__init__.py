from .interfaces import RPCClientInterface
from .rpc_client import NodeRpcClient

__all__ = ["RPCClientInterface", "NodeRpcClient"]
