"""typefmt — consistent type names and a %T / %N formatting mini-language."""

from __future__ import annotations

from typefmt.domain.descriptor import TypeDescriptor, describe, describe_value
from typefmt.domain.formatting import TypeFormatError, format_type_message
from typefmt.domain.names import (
    NameStyle,
    fully_qualified_name,
    repr_style_name,
    short_name,
)

__version__ = "0.1.0"

__all__ = [
    "NameStyle",
    "TypeDescriptor",
    "TypeFormatError",
    "__version__",
    "describe",
    "describe_value",
    "format_type_message",
    "fully_qualified_name",
    "repr_style_name",
    "short_name",
]
