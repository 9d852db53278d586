"""
Dialect support for enum-type DDL.
"""

from .postgres import PostgresDialect, TypeIdentifier, get_postgres_dialect

__all__ = ["PostgresDialect", "TypeIdentifier", "get_postgres_dialect"]
