# blockwatch/utils/units.py
"""
Native currency unit conversion for display
"""

from decimal import Decimal
from typing import Union

from web3 import Web3


def format_units(amount: Union[int, str], unit: str = 'ether') -> str:
    """
    Convert an amount in wei to `unit` as a plain decimal string.

    Always keeps at least one fractional digit and trims trailing zeros,
    so 10**18 wei renders as "1.0" and 1500000000000000000 as "1.5".
    """
    if isinstance(amount, str):
        amount = int(amount, 16) if amount.startswith('0x') else int(amount)
    if amount < 0:
        raise ValueError(f"Amount must be non-negative: {amount}")

    value = Decimal(Web3.from_wei(amount, unit))
    text = format(value, 'f')

    if '.' not in text:
        return f"{text}.0"

    whole, fraction = text.split('.', 1)
    fraction = fraction.rstrip('0') or '0'
    return f"{whole}.{fraction}"


def format_ether(amount: Union[int, str]) -> str:
    return format_units(amount, 'ether')
