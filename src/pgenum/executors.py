"""
Executor implementations for handing enum DDL to a migration runner.
"""

from __future__ import annotations

from typing import Any, List

from .schema.step import MigrationStep
from .utils import get_logger


class RecordingExecutor:
    """
    In-memory executor that records every statement pair it receives.

    Useful for previewing a migration or for feeding another runner.
    """

    def __init__(self) -> None:
        self.steps: List[MigrationStep] = []
        self.logger = get_logger("executors.recording")

    def execute(self, sql: str, reverse_sql: str | None = None) -> None:
        self.logger.debug("Recording statement: %s", sql)
        self.steps.append(MigrationStep(operation="execute", forward=sql, reverse=reverse_sql))

    def statements(self) -> List[str]:
        return [step.forward for step in self.steps]

    def rollback_statements(self) -> List[str]:
        """
        Reverse SQL in undo order.

        Raises :class:`~pgenum.errors.IrreversibleOperationError` on the first
        recorded step without a reverse.
        """

        return [step.rollback_sql() for step in reversed(self.steps)]

    def clear(self) -> None:
        self.steps.clear()


class ConnectionExecutor:
    """
    Runs forward SQL on an already-open DB-API connection.

    The connection's lifecycle and transaction mode belong to the caller;
    reverse SQL is kept on :attr:`reverse_statements` for the caller's
    rollback bookkeeping. Driver errors propagate unchanged.
    """

    def __init__(self, connection: Any) -> None:
        self.connection = connection
        self.reverse_statements: List[str | None] = []
        self.logger = get_logger("executors.connection")

    def execute(self, sql: str, reverse_sql: str | None = None) -> None:
        self.logger.debug("Executing: %s", sql)
        cursor = self.connection.cursor()
        try:
            cursor.execute(sql)
        finally:
            cursor.close()
        self.reverse_statements.append(reverse_sql)
