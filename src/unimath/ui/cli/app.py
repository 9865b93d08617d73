"""Typer application wiring for the unimath CLI."""

from __future__ import annotations

from typing import Annotated

import typer

from unimath import __version__
from unimath.core.exceptions import exception_hint

from .commands import inspect, style, table
from .state import debug_enabled, emit_error, get_cli_state


app = typer.Typer(
    help="Render text in Unicode mathematical alphabets.",
    context_settings={"help_option_names": ["--help"]},
    no_args_is_help=True,
)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback()
def _root(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_print_version,
            is_eager=True,
            help="Show the unimath version and exit.",
        ),
    ] = False,
) -> None:
    """Render text in Unicode mathematical alphabets."""


app.command()(style)
app.command()(inspect)
app.command()(table)


def _report_crash(exc: BaseException) -> None:
    state = get_cli_state()
    if not state.show_tracebacks:
        emit_error(exception_hint(exc) or type(exc).__name__, exception=exc)
        return
    from rich.traceback import Traceback

    state.err_console.print(
        Traceback.from_exception(
            type(exc), exc, exc.__traceback__, show_locals=state.verbosity >= 2
        )
    )


def main() -> None:
    """Entry point of the ``unimath`` console script."""
    try:
        app()
    except (typer.Exit, SystemExit):
        raise
    except KeyboardInterrupt as exc:
        if debug_enabled():
            raise
        emit_error("Interrupted.", exception=exc)
        raise typer.Exit(code=130) from exc
    except Exception as exc:  # pragma: no cover - unexpected failures only
        _report_crash(exc)
        raise typer.Exit(code=1) from exc


__all__ = ["app", "main"]
