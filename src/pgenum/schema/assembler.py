"""
Joins ordered SQL fragments into a single statement.
"""

from __future__ import annotations

from typing import Iterable, Optional

TERMINATOR = ";"


def assemble(tokens: Iterable[Optional[str]]) -> str:
    """
    Join ``tokens`` with single spaces and terminate with a semicolon.

    ``None`` and empty fragments are skipped. Token order is preserved as
    given; no SQL validation or reordering happens here.
    """

    body = " ".join(token for token in tokens if token)
    return f"{body}{TERMINATOR}"
