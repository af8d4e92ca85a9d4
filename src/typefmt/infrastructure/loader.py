"""Resolve dotted import paths and CLI argument literals to live objects.

``datetime.timedelta`` imports ``datetime`` and reads ``timedelta`` from it.
Nested attributes work too (``collections.abc.Mapping``,
``email.message.EmailMessage``). A bare name with no importable module
(``int``, ``ValueError``) is looked up in ``builtins``.
"""

from __future__ import annotations

import ast
import builtins
import importlib
import logging
from types import ModuleType
from typing import Any

logger = logging.getLogger(__name__)


class TargetNotFoundError(LookupError):
    """No object exists at the requested dotted path."""

    def __init__(self, target: str) -> None:
        super().__init__(f"Cannot resolve {target!r}")
        self.target = target


def _import_longest_prefix(parts: list[str]) -> tuple[ModuleType | None, list[str]]:
    """Import the longest importable module prefix of *parts*.

    Returns ``(module, remaining_attribute_parts)``, or ``(None, parts)``
    when no prefix is importable. Errors raised by a module that *was*
    found (including its own missing dependencies) propagate.
    """
    for i in range(len(parts), 0, -1):
        candidate = ".".join(parts[:i])
        try:
            module = importlib.import_module(candidate)
        except ModuleNotFoundError as exc:
            if exc.name and not (candidate + ".").startswith(exc.name + "."):
                raise
            continue
        return module, parts[i:]
    return None, parts


def resolve_target(target: str) -> Any:
    """Return the object named by the dotted path *target*.

    Raises:
        TargetNotFoundError: Nothing importable or no such attribute.
        ImportError: A module on the path failed to import.
    """
    parts = [p for p in target.strip().split(".") if p]
    if not parts:
        raise TargetNotFoundError(target)

    module, attrs = _import_longest_prefix(parts)
    obj: Any
    if module is None:
        if not hasattr(builtins, parts[0]):
            raise TargetNotFoundError(target)
        obj = getattr(builtins, parts[0])
        attrs = parts[1:]
    else:
        obj = module

    for attr in attrs:
        try:
            obj = getattr(obj, attr)
        except AttributeError as exc:
            raise TargetNotFoundError(target) from exc
    logger.debug("Resolved %s to %r", target, obj)
    return obj


def parse_literal(text: str) -> Any:
    """Parse a Python literal (``42``, ``'x'``, ``[1, 2]``, ``None``).

    Anything that is not a valid literal comes back as the raw string.
    """
    try:
        return ast.literal_eval(text)
    except (ValueError, TypeError, SyntaxError):
        return text
