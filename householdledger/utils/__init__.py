"""Mini README: Shared helpers (amount formatting)."""

from .amounts import extract_numbers, format_amount, parse_amount_input

__all__ = ["extract_numbers", "format_amount", "parse_amount_input"]
