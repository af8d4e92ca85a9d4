"""NameService — describe types and render type-aware messages.

Bridges the CLI (dotted paths and literal strings) to the pure domain
functions. Expected failures become ``ServiceResult(ok=False)``; the
domain layer's exceptions never reach the caller.
"""

from __future__ import annotations

import logging
from typing import Any

from typefmt.domain.descriptor import describe, is_type
from typefmt.domain.formatting import (
    TOKENS,
    TypeFormatError,
    argument_directives,
    format_type_message,
)
from typefmt.domain.names import NameStyle, all_names, resolve_name
from typefmt.infrastructure.loader import TargetNotFoundError, parse_literal, resolve_target
from typefmt.services.result import ServiceResult, failure

logger = logging.getLogger(__name__)

ALL_STYLES = "all"


class NameService:
    """Type-name operations for the CLI and library callers.

    Args:
        default_style: Style used by :meth:`describe_type` when none is
            given. A :class:`NameStyle` value or ``"all"``.
    """

    def __init__(self, *, default_style: str = ALL_STYLES) -> None:
        self._default_style = default_style

    def _load_type(self, op: str, target: str) -> Any | ServiceResult:
        """Resolve *target* to a class, or a failed result explaining why."""
        try:
            obj = resolve_target(target)
        except TargetNotFoundError as exc:
            return failure(op, "NOT_FOUND", str(exc), target=target)
        except ImportError as exc:
            logger.debug("Import failed for %s", target, exc_info=True)
            return failure(op, "IMPORT_FAILED", f"Cannot import {target!r}: {exc}", target=target)
        if not is_type(obj):
            msg = f"{target!r} is not a type (got {type(obj).__name__})"
            return failure(op, "NOT_A_TYPE", msg, target=target)
        return obj

    def describe_type(self, target: str, *, style: str | None = None) -> ServiceResult:
        """Resolve *target* and render its name in *style* (or every style)."""
        op = "describe_type"
        style = style or self._default_style
        if style != ALL_STYLES and style not in {s.value for s in NameStyle}:
            choices = ", ".join([*NameStyle, ALL_STYLES])
            return failure(op, "INVALID_STYLE", f"Unknown style {style!r} (choose from {choices})")

        loaded = self._load_type(op, target)
        if isinstance(loaded, ServiceResult):
            return loaded

        desc = describe(loaded)
        data: dict[str, Any] = {"target": target}
        if style == ALL_STYLES:
            data.update(all_names(desc))
        else:
            data["style"] = style
            data["name"] = resolve_name(desc, style)
        return ServiceResult(ok=True, op=op, data=data)

    def format_message(self, fmt: str, raw_args: list[str]) -> ServiceResult:
        """Apply *fmt* to CLI arguments.

        Arguments in ``%N`` / ``%#N`` positions are dotted import paths;
        all others are parsed as Python literals.
        """
        op = "format_message"
        try:
            directives = argument_directives(fmt)
        except TypeFormatError as exc:
            return failure(op, "FORMAT_ERROR", str(exc), position=exc.position)

        args: list[Any] = []
        for i, raw in enumerate(raw_args):
            if i < len(directives) and directives[i].conversion == "N":
                loaded = self._load_type(op, raw)
                if isinstance(loaded, ServiceResult):
                    return loaded
                args.append(loaded)
            else:
                args.append(parse_literal(raw))

        try:
            message = format_type_message(fmt, *args)
        except TypeFormatError as exc:
            return failure(op, "FORMAT_ERROR", str(exc), position=exc.position)
        except (TypeError, OverflowError) as exc:
            return failure(op, "FORMAT_ERROR", str(exc))

        logger.debug("Formatted %d argument(s) with %r", len(args), fmt)
        return ServiceResult(
            ok=True,
            op=op,
            data={"format": fmt, "message": message},
            meta={"directives": [d.token for d in directives]},
        )

    def list_tokens(self) -> ServiceResult:
        """The type-name directives and what they render."""
        items = [{"token": token, "meaning": meaning} for token, meaning in TOKENS.items()]
        return ServiceResult(ok=True, op="list_tokens", data={"items": items})
