# tests/conftest.py
"""
pytest configuration and fixtures for block watcher testing
"""

from typing import Dict, List, Optional

import pytest

from blockwatch.clients.interfaces import RPCClientInterface
from blockwatch.core.logging import WatcherLogger
from blockwatch.types import Block, Transaction

ALICE = "0x1111111111111111111111111111111111111111"
BOB = "0x2222222222222222222222222222222222222222"
CAROL = "0x3333333333333333333333333333333333333333"

ONE_ETHER = 10 ** 18


class FakeRpcClient(RPCClientInterface):
    """In-memory node: scripted head numbers and prebuilt blocks"""

    def __init__(self, heads: Optional[List[int]] = None,
                 blocks: Optional[Dict[int, Block]] = None,
                 failures: Optional[Dict[int, Exception]] = None,
                 chain_id: int = 31337):
        self.heads = list(heads or [0])
        self.blocks = blocks or {}
        self.failures = failures or {}
        self.chain_id = chain_id
        self.endpoint_url = "http://fake-node:8545"
        self.block_requests: List[int] = []
        self.head_requests = 0
        self.closed = False

    def get_block_number(self) -> int:
        self.head_requests += 1
        if len(self.heads) > 1:
            return self.heads.pop(0)
        return self.heads[0]

    def get_chain_id(self) -> int:
        return self.chain_id

    def get_block(self, block_number: int) -> Block:
        self.block_requests.append(block_number)
        if block_number in self.failures:
            raise self.failures[block_number]
        return self.blocks.get(block_number, Block(block_number=block_number, transactions=[]))

    def close(self) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def reset_logging():
    """Each test starts and ends with an unconfigured blockwatch logger"""
    WatcherLogger.reset()
    yield
    WatcherLogger.reset()


@pytest.fixture
def two_tx_block():
    """Block 101 with a plain transfer followed by a contract creation"""
    return Block(
        block_number=101,
        transactions=[
            Transaction(sender=ALICE, recipient=BOB, value=ONE_ETHER, tx_hash="0xaa"),
            Transaction(sender=BOB, recipient=None, value=ONE_ETHER // 2, tx_hash="0xbb"),
        ],
    )


@pytest.fixture
def fake_rpc(two_tx_block):
    """Fake node at head 100 that serves block 101"""
    return FakeRpcClient(heads=[100], blocks={101: two_tx_block})


@pytest.fixture
def output_lines():
    """List-backed output sink"""
    lines: List[str] = []
    return lines


@pytest.fixture
def rpc_factory():
    """Build FakeRpcClient instances with custom heads, blocks and failures"""
    return FakeRpcClient
