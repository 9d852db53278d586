"""
Optional clause fragments for enum DDL.

Each builder returns ``None`` when its option is absent so the assembler can
drop it from the token list.
"""

from __future__ import annotations

from ..dialects.postgres import PostgresDialect
from .options import EnumOptions


def exists_guard(options: EnumOptions) -> str | None:
    return "IF EXISTS" if options.if_exists else None


def not_exists_guard(options: EnumOptions) -> str | None:
    return "IF NOT EXISTS" if options.if_not_exists else None


def placement_clause(options: EnumOptions, dialect: PostgresDialect) -> str | None:
    # before wins when both are supplied
    if options.before:
        return f"BEFORE {dialect.resolve_value(options.before)}"
    if options.after:
        return f"AFTER {dialect.resolve_value(options.after)}"
    return None
