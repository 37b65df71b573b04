# blockwatch/clients/rpc_client.py

from typing import Optional

from web3 import Web3

from .interfaces import RPCClientInterface
from ..core.errors import NodeConnectionError
from ..core.logging import LoggingMixin
from ..types import Block, RpcConfig


class NodeRpcClient(RPCClientInterface, LoggingMixin):
    """
    Connection handle for a JSON-RPC node.

    The handle is opened once at startup and passed explicitly to whatever
    needs node access. Use it as a context manager, or call open()/close().
    """

    def __init__(self, config: RpcConfig, web3_factory=None):
        self.config = config
        self._web3_factory = web3_factory or self._default_web3
        self._w3: Optional[Web3] = None

    @property
    def endpoint_url(self) -> str:
        return self.config.endpoint_url

    @property
    def is_open(self) -> bool:
        return self._w3 is not None

    @property
    def w3(self) -> Web3:
        if self._w3 is None:
            raise NodeConnectionError("RPC connection is not open", endpoint=self.endpoint_url)
        return self._w3

    def _default_web3(self, config: RpcConfig) -> Web3:
        return Web3(Web3.HTTPProvider(
            config.endpoint_url,
            request_kwargs={'timeout': config.timeout},
        ))

    def open(self) -> 'NodeRpcClient':
        if self._w3 is not None:
            return self

        w3 = self._web3_factory(self.config)
        if not w3.is_connected():
            self.log_error("Failed to connect to RPC endpoint", endpoint=self.endpoint_url)
            raise NodeConnectionError(
                f"Failed to connect to RPC endpoint {self.endpoint_url}",
                endpoint=self.endpoint_url,
            )

        self._w3 = w3
        self.log_info("Connected to RPC endpoint", endpoint=self.endpoint_url)
        return self

    def close(self) -> None:
        if self._w3 is None:
            return
        self._w3 = None
        self.log_info("Closed RPC connection", endpoint=self.endpoint_url)

    def __enter__(self) -> 'NodeRpcClient':
        return self.open()

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def get_block_number(self) -> int:
        return self.w3.eth.block_number

    def get_chain_id(self) -> int:
        return self.w3.eth.chain_id

    def get_block(self, block_number: int) -> Block:
        """
        Get a block using block_number, with full transaction objects.
        """
        raw = self.w3.eth.get_block(block_number, full_transactions=True)
        block = Block.from_rpc(raw)
        self.log_debug("Fetched block",
                       block_number=block.block_number,
                       tx_count=len(block.transactions))
        return block
