from .units import format_ether, format_units

__all__ = ["format_ether", "format_units"]
