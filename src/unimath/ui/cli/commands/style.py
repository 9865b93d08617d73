"""Style text from the command line."""

from __future__ import annotations

from typing import Annotated

import typer

from unimath.core.engine import apply_style
from unimath.core.styles import parse_token

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


def style(
    ctx: typer.Context,
    text: Annotated[str, typer.Argument(help="Text to style.")],
    target: Annotated[
        str | None,
        typer.Option(
            "--style",
            "-s",
            help=(
                "Target style (up, it, bfup, bfit, bf, sf, bfsf, tt, bb, bbit, cal, frak, ...). "
                "Without it every character is restyled by the policy."
            ),
        ),
    ] = None,
    math_style: MathStyleOption = "tex",
    normal_style: NormalStyleOption = None,
    bold_style: BoldStyleOption = None,
    sans_style: SansStyleOption = None,
    partial: PartialOption = None,
    nabla: NablaOption = None,
    verbose: VerboseOption = 0,
    debug: DebugOption = False,
) -> None:
    """Print TEXT rendered in a mathematical style."""
    set_cli_state(ctx=ctx, verbosity=verbose, debug=debug)
    policy = build_policy(math_style, normal_style, bold_style, sans_style, partial, nabla)
    token = parse_token(target) if target is not None else None
    typer.echo(apply_style(text, token, policy))


__all__ = ["style"]
