"""
Enum-type statement generation and migration helpers.
"""

from .assembler import assemble
from .builder import EnumSchemaBuilder
from .migration import EnumMigration, Executor
from .options import DEFAULT_SCHEMA, EnumOptions, resolve_default_schema
from .step import MigrationStep

__all__ = [
    "DEFAULT_SCHEMA",
    "EnumMigration",
    "EnumOptions",
    "EnumSchemaBuilder",
    "Executor",
    "MigrationStep",
    "assemble",
    "resolve_default_schema",
]
