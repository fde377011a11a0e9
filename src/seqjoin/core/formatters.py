# topmark:header:start
#
#   project      : SeqJoin
#   file         : formatters.py
#   file_relpath : src/seqjoin/core/formatters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Element formatting rules.

Every element is converted to text by exactly one formatter. A formatter is any
callable taking the element and returning a ``str``; `resolve_formatter`
turns the user-facing spellings (``None``, ``"repr"``, ``".2f"``, ``"<{}>"``)
into such a callable.

Failures raised *by* a formatter while converting an element are never caught
here: they propagate to the caller of the printer.
"""

from __future__ import annotations

from typing import Any, Callable

from seqjoin.config.logging import get_logger
from seqjoin.core.errors import InvalidArgumentError

logger = get_logger(__name__)

ElementFormatter = Callable[[Any], str]

# Named formatters accepted in configuration files and on the command line.
NAMED_FORMATTERS: dict[str, ElementFormatter] = {
    "str": str,
    "repr": repr,
}


def _template_formatter(template: str) -> ElementFormatter:
    def _format(value: Any) -> str:
        return template.format(value)

    return _format


def _spec_formatter(spec: str) -> ElementFormatter:
    def _format(value: Any) -> str:
        return format(value, spec)

    return _format


def resolve_formatter(spec: ElementFormatter | str | None) -> ElementFormatter:
    """Return the element formatter described by ``spec``.

    Args:
        spec (ElementFormatter | str | None): One of:
            - ``None`` or ``""``: the type default (``str``).
            - a registered name (``"str"``, ``"repr"``).
            - a callable: returned unchanged.
            - a template containing ``{`` (e.g. ``"{:.2f}"``): rendered with
              ``template.format(value)``.
            - any other string: a format spec for ``format(value, spec)``.

    Returns:
        ElementFormatter: A callable converting one element to text.

    Raises:
        InvalidArgumentError: If ``spec`` is neither ``None``, a string nor a callable.
    """
    if spec is None or spec == "":
        return str
    if isinstance(spec, str):
        named: ElementFormatter | None = NAMED_FORMATTERS.get(spec)
        if named is not None:
            return named
        if "{" in spec:
            logger.trace("Using template formatter %r", spec)
            return _template_formatter(spec)
        logger.trace("Using format-spec formatter %r", spec)
        return _spec_formatter(spec)
    if callable(spec):
        return spec
    raise InvalidArgumentError(f"Unsupported element formatter: {spec!r}")
