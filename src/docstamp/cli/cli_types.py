# docstamp:header:start
#
#   project      : Docstamp
#   file         : cli_types.py
#   file_relpath : src/docstamp/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docstamp:header:end

"""Shared Click parameter types for the Docstamp CLI."""

from __future__ import annotations

import re
from datetime import date
from enum import Enum
from typing import TYPE_CHECKING, Generic, Protocol, TypeVar

import click

if TYPE_CHECKING:

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    # At runtime, subclass the real Click type
    ParamTypeBase = click.ParamType  # type: ignore[assignment]

E = TypeVar("E", bound=Enum)

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class EnumChoiceParam(ParamTypeBase, Generic[E]):
    """Case-insensitive choice between the string values of an Enum.

    Backs the ``--format`` options; the converted value is the Enum member.
    """

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls: type[E] = enum_cls
        self.name: str = enum_cls.__name__.lower()
        self.by_value: dict[str, E] = {str(m.value).lower(): m for m in enum_cls}

    def convert(
        self,
        value: str | E | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Return the member whose value matches ``value`` (ignoring case)."""
        if value is None or isinstance(value, self.enum_cls):
            return value
        member: E | None = self.by_value.get(str(value).strip().lower())
        if member is None:
            raise click.BadParameter(
                f"Invalid value '{value}'. Must be one of: {', '.join(self.by_value)}",
                param=param,
                ctx=ctx,
            )
        return member

    def __repr__(self) -> str:
        """Return a string representation."""
        return f"EnumChoiceParam({self.enum_cls.__name__})"


class DateParam(ParamTypeBase):
    """A Click parameter type accepting a calendar date written ``YYYY-MM-DD``.

    The value is validated and passed on as the original string.
    """

    name = "date"

    def convert(
        self,
        value: str | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> str | None:
        """Validate ``value`` as an ISO calendar date."""
        if value is None:
            return None
        text = str(value).strip()
        try:
            if not _ISO_DATE.match(text):
                raise ValueError(text)
            date.fromisoformat(text)
        except ValueError:
            raise click.BadParameter(
                f"Invalid date '{value}'. Expected YYYY-MM-DD.", param=param, ctx=ctx
            ) from None
        return text

    def __repr__(self) -> str:
        """Return a string representation."""
        return "DateParam()"
