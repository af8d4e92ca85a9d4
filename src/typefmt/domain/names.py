"""Type name resolution — short, qualified, fully qualified, repr-style.

Two modules are ambient and never prefixed in the fully qualified form:
``builtins`` and ``__main__``. The repr-style form only drops ``builtins``,
so a class defined in a script still displays as ``__main__.MyType``.

All functions are pure and accept a :class:`TypeDescriptor` or a live class.

Examples:
    >>> import datetime
    >>> fully_qualified_name(datetime.timedelta)
    'datetime.timedelta'
    >>> fully_qualified_name(int)
    'int'
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from typefmt.domain.descriptor import (
    AMBIENT_MODULES,
    BUILTINS_MODULE,
    TypeDescriptor,
    describe,
)


class NameStyle(StrEnum):
    """Ways to render a type name."""

    SHORT = "short"
    QUALIFIED = "qualified"
    FULL = "full"
    REPR = "repr"


def short_name(obj: TypeDescriptor | Any) -> str:
    """The unqualified identifier."""
    return describe(obj).short_name


def qualified_name(obj: TypeDescriptor | Any) -> str:
    """The identifier with enclosing scopes, without module."""
    return describe(obj).qualified_name


def module_name(obj: TypeDescriptor | Any) -> str | None:
    return describe(obj).module_name


def fully_qualified_name(obj: TypeDescriptor | Any) -> str:
    """``module.qualname``, or just ``qualname`` for ambient or absent modules."""
    desc = describe(obj)
    module = desc.module_name
    if isinstance(module, str) and module not in AMBIENT_MODULES:
        return f"{module}.{desc.qualified_name}"
    return desc.qualified_name


def repr_style_name(obj: TypeDescriptor | Any) -> str:
    """Like :func:`fully_qualified_name` but keeps ``__main__``."""
    desc = describe(obj)
    module = desc.module_name
    if isinstance(module, str) and module != BUILTINS_MODULE:
        return f"{module}.{desc.qualified_name}"
    return desc.qualified_name


_RESOLVERS = {
    NameStyle.SHORT: short_name,
    NameStyle.QUALIFIED: qualified_name,
    NameStyle.FULL: fully_qualified_name,
    NameStyle.REPR: repr_style_name,
}


def resolve_name(obj: TypeDescriptor | Any, style: NameStyle | str) -> str:
    """Render *obj* in the given *style*.

    Raises:
        ValueError: *style* is not a :class:`NameStyle` value.
    """
    return _RESOLVERS[NameStyle(style)](obj)


def all_names(obj: TypeDescriptor | Any) -> dict[str, str | None]:
    """Every name style plus the module, keyed by style value."""
    desc = describe(obj)
    names: dict[str, str | None] = {style.value: fn(desc) for style, fn in _RESOLVERS.items()}
    names["module"] = desc.module_name
    return names
