"""
Error hierarchy for pgenum.
"""

from __future__ import annotations

from typing import Dict, List, Mapping


class PgEnumError(Exception):
    """Base error for pgenum failures."""


class ArgumentContractError(PgEnumError, TypeError):
    """
    Raised before any SQL is built when an argument has the wrong shape.

    Stores an argument-to-messages mapping so callers can inspect every
    offending argument at once.
    """

    def __init__(self, errors: Mapping[str, List[str]]) -> None:
        self.errors: Dict[str, List[str]] = {
            key: list(messages) for key, messages in errors.items()
        }
        message = self._format_message()
        super().__init__(message)

    def _format_message(self) -> str:
        segments = []
        for argument, messages in self.errors.items():
            combined = "; ".join(messages)
            segments.append(f"{argument}: {combined}")
        return "; ".join(segments)


class IrreversibleOperationError(PgEnumError, RuntimeError):
    """Raised when a reverse statement is requested for a step that has none."""

    def __init__(self, operation: str, forward: str) -> None:
        self.operation = operation
        self.forward = forward
        super().__init__(
            f"Operation '{operation}' is not reversible; supply a manual down step for: {forward}"
        )
