"""TypeDescriptor — the read-only naming record of a type.

A descriptor is a snapshot of three attributes: ``__name__``,
``__qualname__`` and ``__module__``. Everything in the resolver works
on descriptors, so live classes and hand-built records format the same way.

INVARIANT: A non-string module name is treated as absent (``None``).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, field_validator

BUILTINS_MODULE = "builtins"
MAIN_MODULE = "__main__"
AMBIENT_MODULES: frozenset[str] = frozenset({BUILTINS_MODULE, MAIN_MODULE})


class TypeDescriptor(BaseModel):
    """Short name, qualified name and defining module of a type.

    Attributes:
        short_name: The unqualified identifier (``__name__``).
        qualified_name: Identifier with enclosing scopes (``__qualname__``).
        module_name: Defining module, or None when absent.
    """

    model_config = {"frozen": True}

    short_name: str
    qualified_name: str
    module_name: str | None = None

    @field_validator("module_name", mode="before")
    @classmethod
    def module_absent_unless_str(cls, value: Any) -> str | None:
        return value if isinstance(value, str) else None

    @property
    def fully_qualified_name(self) -> str:
        """Module-prefixed qualified name, ambient modules omitted."""
        from typefmt.domain.names import fully_qualified_name

        return fully_qualified_name(self)

    def __format__(self, format_spec: str) -> str:
        if format_spec == "N":
            return self.fully_qualified_name
        if format_spec == "#N":
            return self.short_name
        if not format_spec:
            return str(self)
        msg = f"Invalid format specifier {format_spec!r} for TypeDescriptor"
        raise ValueError(msg)


def describe(obj: Any) -> TypeDescriptor:
    """Build a descriptor for *obj*, a class or other type-like object.

    Existing descriptors pass through unchanged. ``__qualname__`` falls
    back to ``__name__`` when missing or not a string.

    Raises:
        TypeError: *obj* has no string ``__name__``.
    """
    if isinstance(obj, TypeDescriptor):
        return obj
    name = getattr(obj, "__name__", None)
    if not isinstance(name, str):
        msg = f"expected a type, not {type(obj).__name__}"
        raise TypeError(msg)
    qualname = getattr(obj, "__qualname__", None)
    if not isinstance(qualname, str):
        qualname = name
    return TypeDescriptor(
        short_name=name,
        qualified_name=qualname,
        module_name=getattr(obj, "__module__", None),
    )


def describe_value(value: Any) -> TypeDescriptor:
    """Describe the runtime type of *value* (``type(value)``, not ``__class__``)."""
    return describe(type(value))


def is_type(obj: Any) -> bool:
    """True for classes and descriptors, the arguments ``%N`` accepts."""
    return isinstance(obj, (type, TypeDescriptor))
