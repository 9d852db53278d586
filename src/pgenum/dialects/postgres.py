"""
PostgreSQL naming rules for enum types and their values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, Iterable

if TYPE_CHECKING:
    from ..schema.options import EnumOptions


@dataclass(frozen=True)
class TypeIdentifier:
    """
    Schema-qualified enum type name, rendered as ``schema.name``.
    """

    schema: str
    name: str

    def render(self) -> str:
        return f"{self.schema}.{self.name}"

    def __str__(self) -> str:
        return self.render()


class PostgresDialect:
    """
    Resolves type identifiers and value literals for PostgreSQL enum DDL.

    Identifiers are emitted unquoted and values are wrapped in single quotes
    verbatim, so ``it's`` yields ``'it's'``. Callers that need embedded quotes
    must escape them before passing the value in.
    """

    name: Final[str] = "postgresql"

    def resolve_type(self, name: str, options: EnumOptions) -> TypeIdentifier:
        return TypeIdentifier(schema=options.resolved_schema(), name=name)

    def resolve_value(self, value: str) -> str:
        return f"'{value}'"

    def render_value_list(self, values: Iterable[str]) -> str:
        return ", ".join(self.resolve_value(value) for value in values)


def get_postgres_dialect() -> PostgresDialect:
    return PostgresDialect()
