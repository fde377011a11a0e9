# topmark:header:start
#
#   project      : SeqJoin
#   file         : cli_types.py
#   file_relpath : src/seqjoin/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared Click parameter types for the SeqJoin CLI."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Generic, NoReturn, Protocol, TypeVar, cast

import click

if TYPE_CHECKING:
    from collections.abc import Iterable

    from click.shell_completion import CompletionItem as ClickCompletionItem

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    ParamTypeBase = click.ParamType  # type: ignore[assignment]

E = TypeVar("E", bound=Enum)


class EnumChoiceParam(ParamTypeBase, Generic[E]):
    """Click parameter type mapping a choice string onto a string-valued Enum member.

    Matching is case-insensitive on the member values, and ``_`` is read as
    ``-``, so ``--strategy peel_first`` selects ``JoinStrategy.PEEL_FIRST``.

    Args:
        enum_cls (type[E]): Enum whose member values are the accepted choices.
    """

    enum_cls: type[E]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = enum_cls.__name__.lower()
        members: list[E] = list(cast("Iterable[E]", enum_cls))
        self.choices = [str(m.value) for m in members]
        self._by_key: dict[str, E] = {self._normalize(str(m.value)): m for m in members}

    @staticmethod
    def _normalize(text: str) -> str:
        return text.strip().lower().replace("_", "-")

    def convert(
        self,
        value: str | E | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Return the Enum member named by ``value`` (members pass through).

        Raises:
            click.BadParameter: If ``value`` matches no choice.
        """
        if value is None or isinstance(value, self.enum_cls):
            return value
        member: E | None = self._by_key.get(self._normalize(str(value)))
        if member is None:
            self._reject(value, param, ctx)
        return member

    def _reject(
        self,
        value: object,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        raise click.BadParameter(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param=param,
            ctx=ctx,
        )

    def shell_complete(
        self,
        ctx: click.Context,  # pylint: disable=unused-argument
        param: click.Parameter,  # pylint: disable=unused-argument
        incomplete: str,
    ) -> list[ClickCompletionItem]:
        """Offer the choices that start with ``incomplete``.

        Bash: `eval "$(_SEQJOIN_COMPLETE=bash_source seqjoin)"`
        """
        from click.shell_completion import CompletionItem as RuntimeCompletionItem

        prefix: str = self._normalize(incomplete or "")
        return [RuntimeCompletionItem(c) for c in self.choices if c.startswith(prefix)]

    def __repr__(self) -> str:
        """Return a string representation."""
        return f"EnumChoiceParam({self.enum_cls.__name__})"
