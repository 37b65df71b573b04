# tests/test_rpc_client.py

import pytest
from web3.datastructures import AttributeDict

from blockwatch.clients import NodeRpcClient
from blockwatch.core.errors import NodeConnectionError
from blockwatch.types import RpcConfig

from conftest import ALICE, BOB, ONE_ETHER


class StubEth:
    def __init__(self):
        self.block_number = 900
        self.chain_id = 43114
        self.requests = []

    def get_block(self, block_identifier, full_transactions=False):
        self.requests.append((block_identifier, full_transactions))
        return AttributeDict({
            'number': block_identifier,
            'hash': bytes(32),
            'timestamp': 1,
            'transactions': [AttributeDict({'from': ALICE, 'to': BOB, 'value': ONE_ETHER, 'hash': bytes(32)})],
        })


class StubWeb3:
    def __init__(self, connected=True):
        self.connected = connected
        self.eth = StubEth()

    def is_connected(self):
        return self.connected


@pytest.fixture
def rpc_config():
    return RpcConfig(endpoint_url="http://127.0.0.1:8545", timeout=5)


def test_open_and_query(rpc_config):
    stub = StubWeb3()
    client = NodeRpcClient(rpc_config, web3_factory=lambda config: stub)

    with client as rpc:
        assert rpc.is_open
        assert rpc.get_block_number() == 900
        assert rpc.get_chain_id() == 43114

        block = rpc.get_block(901)

    assert stub.eth.requests == [(901, True)]
    assert block.block_number == 901
    assert block.transactions[0].value == ONE_ETHER
    assert not client.is_open


def test_unreachable_node_raises(rpc_config):
    client = NodeRpcClient(rpc_config, web3_factory=lambda config: StubWeb3(connected=False))

    with pytest.raises(NodeConnectionError) as excinfo:
        client.open()

    assert excinfo.value.endpoint == rpc_config.endpoint_url
    assert isinstance(excinfo.value, ConnectionError)
    assert not client.is_open


def test_closed_handle_rejects_calls(rpc_config):
    client = NodeRpcClient(rpc_config, web3_factory=lambda config: StubWeb3())

    with pytest.raises(NodeConnectionError):
        client.get_block_number()

    client.open()
    client.close()

    with pytest.raises(NodeConnectionError):
        client.get_block(1)


def test_open_is_idempotent(rpc_config):
    created = []

    def factory(config):
        created.append(config)
        return StubWeb3()

    client = NodeRpcClient(rpc_config, web3_factory=factory)
    client.open()
    client.open()

    assert created == [rpc_config]


def test_default_factory_uses_http_provider(rpc_config):
    w3 = NodeRpcClient(rpc_config)._default_web3(rpc_config)

    assert w3.provider.endpoint_uri == rpc_config.endpoint_url
