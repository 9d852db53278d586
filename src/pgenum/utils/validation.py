"""
Argument contract checks applied before statement construction.
"""

from __future__ import annotations

import enum
from typing import Any, Iterable, List, Mapping

from ..errors import ArgumentContractError


def is_symbol(value: Any) -> bool:
    if isinstance(value, enum.Enum):
        value = value.value
    return isinstance(value, str) and bool(value)


def _describe(value: Any) -> str:
    return type(value).__name__


def symbol_text(value: Any) -> str:
    """
    Return the text of a symbolic scalar.

    Enum members contribute their value so ``Status.ACTIVE`` with value
    ``"active"`` renders as ``active``.
    """

    if isinstance(value, enum.Enum):
        return str(value.value)
    return str(value)


def ensure_symbol(argument: str, value: Any) -> str:
    if not is_symbol(value):
        raise ArgumentContractError(
            {argument: [f"expected a symbolic name, got {_describe(value)}"]}
        )
    return symbol_text(value)


def ensure_symbols(argument: str, values: Any) -> List[str]:
    """
    Validate an ordered collection of symbolic values.

    Accepts a list or tuple of symbols, or an ``enum.Enum`` subclass whose
    members are taken in definition order.
    """

    items: Iterable[Any]
    if isinstance(values, type) and issubclass(values, enum.Enum):
        items = list(values)
    elif isinstance(values, (list, tuple)):
        items = values
    else:
        raise ArgumentContractError(
            {argument: [f"expected a list of symbolic values, got {_describe(values)}"]}
        )

    messages: List[str] = []
    rendered: List[str] = []
    for position, item in enumerate(items):
        if is_symbol(item):
            rendered.append(symbol_text(item))
        else:
            messages.append(f"item {position} is not a symbolic value ({_describe(item)})")
    if messages:
        raise ArgumentContractError({argument: messages})
    return rendered


def ensure_mapping(argument: str, value: Any) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ArgumentContractError(
            {argument: [f"expected a mapping of options, got {_describe(value)}"]}
        )
    return value
