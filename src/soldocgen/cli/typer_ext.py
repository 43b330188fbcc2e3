# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typer command class that lists ``soldocgen`` options alphabetically in ``--help``."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import typer
from click.core import Context, Parameter
from click.formatting import HelpFormatter
from typer.core import TyperCommand

CommandCallback = TypeVar("CommandCallback", bound=Callable[..., Any])


def option_sort_key(param: Parameter) -> str:
    """Return the long flag of ``param`` without dashes, e.g. ``skip-empty``."""

    flags = [*getattr(param, "opts", ()), *getattr(param, "secondary_opts", ())]
    long_flags = [flag for flag in flags if flag.startswith("--")]
    chosen = long_flags[0] if long_flags else (flags[0] if flags else param.name or "")
    return chosen.lstrip("-").lower()


class SortedTyperCommand(TyperCommand):
    """Command whose help output lists options by long flag name."""

    def format_options(self, ctx: Context, formatter: HelpFormatter) -> None:
        records = [
            (option_sort_key(param), record)
            for param in self.get_params(ctx)
            if (record := param.get_help_record(ctx)) is not None
        ]
        if records:
            with formatter.section("Options"):
                formatter.write_dl([record for _, record in sorted(records, key=lambda item: item[0])])


class SortedTyper(typer.Typer):
    """Typer application registering :class:`SortedTyperCommand` commands."""

    def command(
        self,
        name: str | None = None,
        *,
        cls: type[TyperCommand] | None = None,
        **kwargs: Any,
    ) -> Callable[[CommandCallback], CommandCallback]:
        return super().command(name, cls=cls or SortedTyperCommand, **kwargs)


def create_typer(**kwargs: Any) -> SortedTyper:
    """Return a :class:`SortedTyper` built with ``kwargs``."""

    return SortedTyper(**kwargs)


__all__ = ["SortedTyper", "SortedTyperCommand", "create_typer", "option_sort_key"]
