"""printf-style format mini-language with type name directives.

Directive grammar: ``%[flags][width][.precision]conversion``

Type directives:

- ``%T``  fully qualified name of ``type(arg)``
- ``%#T`` short name of ``type(arg)``
- ``%N``  fully qualified name of *arg*, which must be a type or descriptor
- ``%#N`` short name of *arg*

Ordinary conversions: ``s r a d i u x X o c %``.

INVARIANT: Each type argument is described once, when consumed, and no
reference to it outlives the call.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from typefmt.domain.descriptor import TypeDescriptor, describe, describe_value, is_type
from typefmt.domain.names import fully_qualified_name

TOKENS: dict[str, str] = {
    "%T": "fully qualified name of the runtime type of a value",
    "%#T": "short name of the runtime type of a value",
    "%N": "fully qualified name of a type",
    "%#N": "short name of a type",
}

TYPE_CONVERSIONS = frozenset("TN")
TEXT_CONVERSIONS = frozenset("sra") | TYPE_CONVERSIONS
INT_CONVERSIONS = frozenset("diuxXo")
CONVERSIONS = TEXT_CONVERSIONS | INT_CONVERSIONS | {"c", "%"}

_DIRECTIVE_RE = re.compile(
    r"%(?P<flags>[-0#]*)(?P<width>\d+)?(?:\.(?P<precision>\d+))?(?P<conversion>.?)",
    re.DOTALL,
)


class TypeFormatError(ValueError):
    """Malformed format string or argument count mismatch."""

    def __init__(self, message: str, *, position: int | None = None) -> None:
        super().__init__(message)
        self.position = position


@dataclass(frozen=True)
class Directive:
    """One parsed ``%`` placeholder."""

    conversion: str
    position: int
    alternate: bool = False
    left: bool = False
    zero: bool = False
    width: int | None = None
    precision: int | None = None

    @property
    def consumes_argument(self) -> bool:
        return self.conversion != "%"

    @property
    def is_type_directive(self) -> bool:
        return self.conversion in TYPE_CONVERSIONS

    @property
    def token(self) -> str:
        """Normalized token, e.g. ``%#N`` or ``%s`` (width and precision dropped)."""
        alt = "#" if self.alternate and self.is_type_directive else ""
        return f"%{alt}{self.conversion}"


def parse_format(fmt: str) -> list[str | Directive]:
    """Split *fmt* into literal text and :class:`Directive` segments.

    Adjacent literal text is merged into one string.

    Raises:
        TypeFormatError: A directive is truncated or uses an unknown conversion.
    """
    segments: list[str | Directive] = []
    literal: list[str] = []
    pos = 0
    while True:
        start = fmt.find("%", pos)
        if start < 0:
            literal.append(fmt[pos:])
            break
        literal.append(fmt[pos:start])
        match = _DIRECTIVE_RE.match(fmt, start)
        assert match is not None  # the pattern always matches at a "%"
        conversion = match.group("conversion")
        if not conversion:
            raise TypeFormatError("incomplete format directive", position=start)
        if conversion not in CONVERSIONS:
            msg = f"unsupported format character {conversion!r} at index {match.end() - 1}"
            raise TypeFormatError(msg, position=start)
        flags = match.group("flags")
        width = match.group("width")
        precision = match.group("precision")
        directive = Directive(
            conversion=conversion,
            position=start,
            alternate="#" in flags,
            left="-" in flags,
            zero="0" in flags,
            width=int(width) if width else None,
            precision=int(precision) if precision is not None else None,
        )
        if directive.consumes_argument:
            if literal:
                segments.append("".join(literal))
                literal = []
            segments.append(directive)
        else:
            literal.append("%")
        pos = match.end()
    tail = "".join(literal)
    if tail:
        segments.append(tail)
    return [seg for seg in segments if seg != ""]


def argument_directives(fmt: str) -> list[Directive]:
    """The directives of *fmt* that consume an argument, in order."""
    return [seg for seg in parse_format(fmt) if isinstance(seg, Directive)]


def format_type_message(fmt: str, *args: Any) -> str:
    """Substitute *args* into *fmt*.

    Example:
        >>> format_type_message("expected str, got %T", 3)
        'expected str, got int'

    Raises:
        TypeFormatError: Bad directive, numeric width or precision out of range,
            or too few / too many arguments.
        TypeError: ``%N`` given a non-type, or an integer conversion a non-int.
    """
    out: list[str] = []
    consumed = 0
    for seg in parse_format(fmt):
        if isinstance(seg, str):
            out.append(seg)
            continue
        if consumed >= len(args):
            raise TypeFormatError("not enough arguments for format string", position=seg.position)
        out.append(render_directive(seg, args[consumed]))
        consumed += 1
    if consumed < len(args):
        msg = f"not all arguments converted: format uses {consumed}, got {len(args)}"
        raise TypeFormatError(msg)
    return "".join(out)


def render_directive(directive: Directive, arg: Any) -> str:
    """Render a single argument-consuming directive."""
    conversion = directive.conversion
    if conversion == "T":
        text = _type_text(describe_value(arg), alternate=directive.alternate)
    elif conversion == "N":
        if not is_type(arg):
            msg = f"%N argument must be a type, not {type(arg).__name__}"
            raise TypeError(msg)
        text = _type_text(describe(arg), alternate=directive.alternate)
    elif conversion == "s":
        text = str(arg)
    elif conversion == "r":
        text = repr(arg)
    elif conversion == "a":
        text = ascii(arg)
    else:
        return _format_number(directive, arg)
    return _pad(directive, text)


def _type_text(desc: TypeDescriptor, *, alternate: bool) -> str:
    return desc.short_name if alternate else fully_qualified_name(desc)


def _pad(directive: Directive, text: str) -> str:
    if directive.precision is not None:
        text = text[: directive.precision]
    if directive.width:
        text = text.ljust(directive.width) if directive.left else text.rjust(directive.width)
    return text


def _format_number(directive: Directive, arg: Any) -> str:
    conversion = directive.conversion
    if conversion in INT_CONVERSIONS and not isinstance(arg, int):
        msg = f"%{conversion} format requires an integer, not {type(arg).__name__}"
        raise TypeError(msg)
    spec = "%"
    if directive.left:
        spec += "-"
    if directive.zero:
        spec += "0"
    if directive.width is not None:
        spec += str(directive.width)
    if directive.precision is not None:
        spec += f".{directive.precision}"
    spec += "d" if conversion == "u" else conversion
    try:
        return spec % (arg,)
    except ValueError as exc:
        raise TypeFormatError(str(exc), position=directive.position) from exc
