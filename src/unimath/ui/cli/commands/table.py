"""Print the substitution rows of one alphabet."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated

from rich import box
from rich.table import Table
import typer

from unimath.core.styles import Alphabet
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


def _format_row(row: Mapping[object, object]) -> str:
    if not row:
        return "-"
    return ", ".join(f"{token}→{style}" for token, style in row.items())


def table(
    ctx: typer.Context,
    alphabet: Annotated[
        Alphabet,
        typer.Argument(help="Alphabet whose transitions are printed."),
    ],
    math_style: MathStyleOption = "tex",
    normal_style: NormalStyleOption = None,
    bold_style: BoldStyleOption = None,
    sans_style: SansStyleOption = None,
    partial: PartialOption = None,
    nabla: NablaOption = None,
    verbose: VerboseOption = 0,
    debug: DebugOption = False,
) -> None:
    """Print how glyphs of ALPHABET move between styles under the policy."""
    state = set_cli_state(ctx=ctx, verbosity=verbose, debug=debug)
    tables = tables_for(
        build_policy(math_style, normal_style, bold_style, sans_style, partial, nabla)
    )

    output = Table(
        title=f"Transitions for '{alphabet.value}'",
        box=box.SQUARE,
        show_edge=True,
        header_style="bold cyan",
    )
    output.add_column("Current", style="magenta")
    output.add_column("Requested → resolved")
    for current, row in tables.substitutions[alphabet].items():
        output.add_row(current.value, _format_row(row))
    state.console.print(output)

    aliases = tables.aliases.get(alphabet)
    if aliases:
        state.console.print(f"Aliases: {_format_row(aliases)}", markup=False, highlight=False)


__all__ = ["table"]
