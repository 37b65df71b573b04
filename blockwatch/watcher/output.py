# blockwatch/watcher/output.py

from typing import Callable

import click

from ..types import Block, Transaction
from ..utils.units import format_ether

CONTRACT_CREATION = "<contract creation>"

OutputSink = Callable[[str], None]


def console_output(line: str) -> None:
    click.echo(line)


def format_transaction(tx: Transaction) -> str:
    recipient = tx.recipient if tx.recipient is not None else CONTRACT_CREATION
    return f"from={tx.sender} to={recipient} value={format_ether(tx.value)}"


def format_block(block: Block) -> list[str]:
    """One line per transaction, in block order"""
    return [format_transaction(tx) for tx in block.transactions]
