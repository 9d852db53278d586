"""
Typed option set shared by every enum-type operation.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping

from ..errors import ArgumentContractError
from ..utils import ensure_mapping, get_logger, symbol_text
from ..utils.validation import is_symbol

DEFAULT_SCHEMA = "public"
DEFAULT_SCHEMA_ENV = "PGENUM_DEFAULT_SCHEMA"

logger = get_logger("schema.options")


def resolve_default_schema() -> str:
    """
    Return the schema used when an operation does not name one.
    """

    value = os.getenv(DEFAULT_SCHEMA_ENV)
    if value and value.strip():
        return value.strip()
    return DEFAULT_SCHEMA


@dataclass(frozen=True)
class EnumOptions:
    """
    Recognized options for enum-type operations.

    ``if_exists`` applies to ``drop_type``; ``if_not_exists``, ``before`` and
    ``after`` apply to ``add_value_to_type``. Other operations read only
    ``schema``.
    """

    schema: str | None = None
    if_exists: bool = False
    if_not_exists: bool = False
    before: str | None = None
    after: str | None = None

    def __post_init__(self) -> None:
        errors: dict[str, list[str]] = {}
        for key in ("if_exists", "if_not_exists"):
            object.__setattr__(self, key, bool(getattr(self, key)))
        for key in _SYMBOLIC_KEYS:
            value = getattr(self, key)
            # false counts as absent
            if value is None or value is False:
                object.__setattr__(self, key, None)
            elif is_symbol(value):
                object.__setattr__(self, key, symbol_text(value))
            else:
                errors[key] = [f"expected a symbolic value, got {type(value).__name__}"]
        if errors:
            raise ArgumentContractError(errors)

    @classmethod
    def coerce(cls, opts: Any = None, **overrides: Any) -> "EnumOptions":
        if isinstance(opts, EnumOptions):
            base = opts
        else:
            base = cls.from_mapping(ensure_mapping("opts", opts))
        if not overrides:
            return base
        changes = {key: value for key, value in overrides.items() if key in _KNOWN_KEYS}
        return replace(base, **changes)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "EnumOptions":
        kwargs: dict[str, Any] = {}
        for key, value in values.items():
            if key not in _KNOWN_KEYS:
                logger.debug("Ignoring unrecognized enum option %r", key)
                continue
            kwargs[key] = value
        return cls(**kwargs)

    def resolved_schema(self) -> str:
        return self.schema or resolve_default_schema()


_SYMBOLIC_KEYS = ("schema", "before", "after")
_KNOWN_KEYS = frozenset(f.name for f in fields(EnumOptions))
