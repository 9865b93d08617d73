"""Describe how each character of a string is classified and restyled."""

from __future__ import annotations

from typing import Annotated

from rich import box
from rich.table import Table
import typer

from unimath.core.engine import style_char
from unimath.core.substitutions import tables_for

from .._options import (
    BoldStyleOption,
    DebugOption,
    MathStyleOption,
    NablaOption,
    NormalStyleOption,
    PartialOption,
    SansStyleOption,
    VerboseOption,
    build_policy,
)
from ..state import set_cli_state


def inspect(
    ctx: typer.Context,
    text: Annotated[str, typer.Argument(help="Characters to inspect.")],
    math_style: MathStyleOption = "tex",
    normal_style: NormalStyleOption = None,
    bold_style: BoldStyleOption = None,
    sans_style: SansStyleOption = None,
    partial: PartialOption = None,
    nabla: NablaOption = None,
    verbose: VerboseOption = 0,
    debug: DebugOption = False,
) -> None:
    """Print a table describing every character of TEXT."""
    state = set_cli_state(ctx=ctx, verbosity=verbose, debug=debug)
    tables = tables_for(
        build_policy(math_style, normal_style, bold_style, sans_style, partial, nabla)
    )

    table = Table(box=box.SQUARE, show_edge=True, header_style="bold cyan")
    table.add_column("Glyph")
    table.add_column("Code point", style="green")
    table.add_column("Alphabet", style="magenta")
    table.add_column("Style", style="magenta")
    table.add_column("Name")
    table.add_column("Restyled")

    for char in text:
        descriptor = tables.registry.descriptor_for(char)
        if descriptor is None:
            table.add_row(char, f"U+{ord(char):04X}", "-", "-", "-", char)
            continue
        table.add_row(
            char,
            descriptor.codepoint,
            descriptor.alphabet.value,
            descriptor.style.value,
            descriptor.name,
            style_char(char, tables),
        )

    state.console.print(table)


__all__ = ["inspect"]
