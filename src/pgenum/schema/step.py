"""
Forward/reverse statement pair produced by every enum operation.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import IrreversibleOperationError


@dataclass(frozen=True)
class MigrationStep:
    operation: str
    forward: str
    reverse: str | None = None
    destructive: bool = False
    transactional: bool = True

    @property
    def reversible(self) -> bool:
        return self.reverse is not None

    def rollback_sql(self) -> str:
        if self.reverse is None:
            raise IrreversibleOperationError(self.operation, self.forward)
        return self.reverse

    def describe(self) -> str:
        flags = []
        if not self.reversible:
            flags.append("irreversible")
        if self.destructive:
            flags.append("destructive")
        if not self.transactional:
            flags.append("non-transactional")
        suffix = f" [{', '.join(flags)}]" if flags else ""
        return f"{self.operation}: {self.forward}{suffix}"
