"""
pgenum public package initialization.

Forward/reverse DDL generation for PostgreSQL enum types, for use inside
schema-migration frameworks.
"""

from .errors import ArgumentContractError, IrreversibleOperationError, PgEnumError  # noqa: F401
from .schema import (
    EnumMigration,
    EnumOptions,
    EnumSchemaBuilder,
    Executor,
    MigrationStep,
)  # noqa: F401
from .dialects import PostgresDialect, TypeIdentifier  # noqa: F401
from .executors import ConnectionExecutor, RecordingExecutor  # noqa: F401

__all__ = [
    "ArgumentContractError",
    "ConnectionExecutor",
    "EnumMigration",
    "EnumOptions",
    "EnumSchemaBuilder",
    "Executor",
    "IrreversibleOperationError",
    "MigrationStep",
    "PgEnumError",
    "PostgresDialect",
    "RecordingExecutor",
    "TypeIdentifier",
]
