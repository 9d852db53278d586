"""
Statement builder converting enum-type operations into migration steps.
"""

from __future__ import annotations

from typing import Any

from ..dialects.postgres import PostgresDialect, get_postgres_dialect
from ..utils import ensure_symbol, ensure_symbols, get_logger
from .assembler import assemble
from .clauses import exists_guard, not_exists_guard, placement_clause
from .options import EnumOptions
from .step import MigrationStep


class EnumSchemaBuilder:
    """
    Produces forward and reverse DDL for PostgreSQL enum types.

    Every method validates its arguments before any SQL is built and returns
    a :class:`MigrationStep`. Options may be passed as a mapping, an
    :class:`EnumOptions` instance, keyword arguments, or a mix; keywords win.
    """

    def __init__(self, dialect: PostgresDialect | None = None) -> None:
        self.dialect = dialect or get_postgres_dialect()
        self.logger = get_logger("schema.builder")

    def create_type(self, name: Any, values: Any, opts: Any = None, **options: Any) -> MigrationStep:
        type_name = ensure_symbol("name", name)
        labels = ensure_symbols("values", values)
        resolved = EnumOptions.coerce(opts, **options)

        identifier = self.dialect.resolve_type(type_name, resolved)
        forward = assemble(
            [
                "CREATE TYPE",
                identifier.render(),
                "AS ENUM",
                f"({self.dialect.render_value_list(labels)})",
            ]
        )
        reverse = assemble(["DROP TYPE", identifier.render()])
        return self._step("create_type", forward, reverse)

    def drop_type(self, name: Any, opts: Any = None, **options: Any) -> MigrationStep:
        """
        Drop an enum type. Not reversible: pair it with a manual down step.
        """

        type_name = ensure_symbol("name", name)
        resolved = EnumOptions.coerce(opts, **options)

        identifier = self.dialect.resolve_type(type_name, resolved)
        forward = assemble(["DROP TYPE", exists_guard(resolved), identifier.render()])
        self.logger.warning(
            "DROP TYPE generated for %s; the operation is destructive and has no reverse.",
            identifier,
        )
        return self._step("drop_type", forward, None, destructive=True)

    def rename_type(
        self, old_name: Any, new_name: Any, opts: Any = None, **options: Any
    ) -> MigrationStep:
        before = ensure_symbol("old_name", old_name)
        after = ensure_symbol("new_name", new_name)
        resolved = EnumOptions.coerce(opts, **options)

        before_identifier = self.dialect.resolve_type(before, resolved)
        after_identifier = self.dialect.resolve_type(after, resolved)
        forward = assemble(["ALTER TYPE", before_identifier.render(), "RENAME TO", after])
        reverse = assemble(["ALTER TYPE", after_identifier.render(), "RENAME TO", before])
        return self._step("rename_type", forward, reverse)

    def add_value_to_type(
        self, name: Any, value: Any, opts: Any = None, **options: Any
    ) -> MigrationStep:
        """
        Add a value to an existing enum type.

        PostgreSQL cannot remove enum values, so no reverse is produced. The
        statement must run outside a transaction block; the returned step is
        flagged ``transactional=False`` for the runner to honor. Without
        ``before``/``after`` the value is appended after the existing ones.
        """

        type_name = ensure_symbol("name", name)
        label = ensure_symbol("value", value)
        resolved = EnumOptions.coerce(opts, **options)

        identifier = self.dialect.resolve_type(type_name, resolved)
        forward = assemble(
            [
                "ALTER TYPE",
                identifier.render(),
                "ADD VALUE",
                not_exists_guard(resolved),
                self.dialect.resolve_value(label),
                placement_clause(resolved, self.dialect),
            ]
        )
        self.logger.info(
            "ADD VALUE generated for %s; run it with the migration transaction disabled.",
            identifier,
        )
        return self._step("add_value_to_type", forward, None, transactional=False)

    def rename_value(
        self, type_name: Any, old_value: Any, new_value: Any, opts: Any = None, **options: Any
    ) -> MigrationStep:
        """
        Rename an enum value (PostgreSQL 10+).
        """

        name = ensure_symbol("type_name", type_name)
        before = self.dialect.resolve_value(ensure_symbol("old_value", old_value))
        after = self.dialect.resolve_value(ensure_symbol("new_value", new_value))
        resolved = EnumOptions.coerce(opts, **options)

        identifier = self.dialect.resolve_type(name, resolved).render()
        forward = assemble(["ALTER TYPE", identifier, "RENAME VALUE", before, "TO", after])
        reverse = assemble(["ALTER TYPE", identifier, "RENAME VALUE", after, "TO", before])
        return self._step("rename_value", forward, reverse)

    def _step(
        self,
        operation: str,
        forward: str,
        reverse: str | None,
        *,
        destructive: bool = False,
        transactional: bool = True,
    ) -> MigrationStep:
        self.logger.debug(
            "%s %s forward=%s reverse=%s", self.dialect.name, operation, forward, reverse
        )
        return MigrationStep(
            operation=operation,
            forward=forward,
            reverse=reverse,
            destructive=destructive,
            transactional=transactional,
        )
