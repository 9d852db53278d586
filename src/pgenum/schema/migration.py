"""
Hands generated enum DDL to a migration executor.
"""

from __future__ import annotations

import uuid
from typing import Any, Protocol

from ..utils import get_logger, set_correlation_id
from .builder import EnumSchemaBuilder
from .step import MigrationStep


class Executor(Protocol):
    """
    Collaborator that runs forward SQL and keeps the optional reverse for rollback.
    """

    def execute(self, sql: str, reverse_sql: str | None = None) -> Any: ...


class EnumMigration:
    """
    Builds enum-type DDL and passes each statement pair to an executor.

    Each call validates its arguments, builds exactly one step and invokes
    ``executor.execute`` once. Executor errors propagate unchanged.

    ``add_value_to_type`` cannot run inside a transaction block; the runner
    behind the executor is responsible for disabling it.

    Every statement is logged under the migration's correlation id, generated
    unless one is supplied.
    """

    def __init__(
        self,
        executor: Executor,
        builder: EnumSchemaBuilder | None = None,
        *,
        correlation_id: str | None = None,
    ) -> None:
        self.executor = executor
        self.builder = builder or EnumSchemaBuilder()
        self.correlation_id = correlation_id or str(uuid.uuid4())
        self.logger = get_logger("schema.migration")

    def create_type(self, name: Any, values: Any, opts: Any = None, **options: Any) -> MigrationStep:
        return self._run(self.builder.create_type(name, values, opts, **options))

    def drop_type(self, name: Any, opts: Any = None, **options: Any) -> MigrationStep:
        return self._run(self.builder.drop_type(name, opts, **options))

    def rename_type(
        self, old_name: Any, new_name: Any, opts: Any = None, **options: Any
    ) -> MigrationStep:
        return self._run(self.builder.rename_type(old_name, new_name, opts, **options))

    def add_value_to_type(
        self, name: Any, value: Any, opts: Any = None, **options: Any
    ) -> MigrationStep:
        return self._run(self.builder.add_value_to_type(name, value, opts, **options))

    def rename_value(
        self, type_name: Any, old_value: Any, new_value: Any, opts: Any = None, **options: Any
    ) -> MigrationStep:
        return self._run(
            self.builder.rename_value(type_name, old_value, new_value, opts, **options)
        )

    def _run(self, step: MigrationStep) -> MigrationStep:
        set_correlation_id(self.correlation_id)
        self.logger.info("Executing %s", step.describe())
        if step.reverse is None:
            self.executor.execute(step.forward)
        else:
            self.executor.execute(step.forward, step.reverse)
        return step
