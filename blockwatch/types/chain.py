# blockwatch/types/chain.py

from typing import Optional, Any, Mapping

from msgspec import Struct
from web3 import Web3


def _to_hex(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return Web3.to_hex(value)


def _to_int(value: Any) -> Optional[int]:
    """Quantities arrive as ints from web3 and as 0x-prefixed hex in raw JSON"""
    if value is None:
        return None
    if isinstance(value, str):
        return int(value, 16) if value.startswith('0x') else int(value)
    return int(value)


class Transaction(Struct, frozen=True):
    sender: str
    recipient: Optional[str]  # None for contract creation
    value: int  # wei
    tx_hash: Optional[str] = None

    @classmethod
    def from_rpc(cls, tx: Mapping[str, Any]) -> 'Transaction':
        """Build from a full transaction object as returned by eth_getBlockByNumber"""
        return cls(
            sender=tx['from'],
            recipient=tx.get('to'),
            value=_to_int(tx.get('value', 0)),
            tx_hash=_to_hex(tx.get('hash')),
        )


class Block(Struct, frozen=True):
    block_number: int
    transactions: list[Transaction]
    block_hash: Optional[str] = None
    timestamp: Optional[int] = None

    @classmethod
    def from_rpc(cls, block: Mapping[str, Any]) -> 'Block':
        """
        Build from a block fetched with full_transactions=True.

        Raises:
            ValueError: If the block carries transaction hashes instead of objects
        """
        transactions = []
        for tx in block.get('transactions', []):
            if not isinstance(tx, Mapping):
                raise ValueError("Block was fetched without full transaction objects")
            transactions.append(Transaction.from_rpc(tx))

        return cls(
            block_number=_to_int(block['number']),
            transactions=transactions,
            block_hash=_to_hex(block.get('hash')),
            timestamp=_to_int(block.get('timestamp')),
        )
