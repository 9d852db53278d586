"""
Utility helpers shared across pgenum packages.
"""

from .logging import configure_logging, get_correlation_id, get_logger, set_correlation_id
from .validation import ensure_mapping, ensure_symbol, ensure_symbols, symbol_text

__all__ = [
    "configure_logging",
    "ensure_mapping",
    "ensure_symbol",
    "ensure_symbols",
    "get_correlation_id",
    "get_logger",
    "set_correlation_id",
    "symbol_text",
]
