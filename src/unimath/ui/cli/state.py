"""Console and diagnostic state shared by the unimath commands.

Each invocation keeps one :class:`CLIState` on the Typer context object. The
state is mirrored into a context variable so helpers called outside a click
context (warnings raised while building a policy, the ``main`` wrapper) reach
the same consoles and verbosity.
"""

from __future__ import annotations

from contextvars import ContextVar
from dataclasses import dataclass, field
import sys
from typing import TYPE_CHECKING

import click


if TYPE_CHECKING:
    from rich.console import Console

__all__ = [
    "CLIState",
    "debug_enabled",
    "emit_error",
    "emit_warning",
    "get_cli_state",
    "render_message",
    "set_cli_state",
]

_LEVEL_STYLES = {"warning": "yellow", "error": "red"}


@dataclass(slots=True)
class CLIState:
    """Verbosity, traceback flag and the Rich consoles of one invocation."""

    verbosity: int = 0
    show_tracebacks: bool = False
    _consoles: dict[str, Console] = field(default_factory=dict, init=False, repr=False)

    def _console_for(self, stream_name: str) -> Console:
        from rich.console import Console

        stream = getattr(sys, stream_name)
        console = self._consoles.get(stream_name)
        # CliRunner swaps the standard streams between invocations.
        if console is None or console.file is not stream:
            console = Console(file=stream, highlight=stream_name == "stdout")
            self._consoles[stream_name] = console
        return console

    @property
    def console(self) -> Console:
        """Console bound to the current standard output."""
        return self._console_for("stdout")

    @property
    def err_console(self) -> Console:
        """Console bound to the current standard error."""
        return self._console_for("stderr")


_STATE_VAR: ContextVar[CLIState | None] = ContextVar("unimath_cli_state", default=None)


def _state_from_context(ctx: click.Context | None) -> CLIState | None:
    while ctx is not None:
        if isinstance(ctx.obj, CLIState):
            return ctx.obj
        ctx = ctx.parent
    return None


def get_cli_state(ctx: click.Context | None = None, *, create: bool = True) -> CLIState:
    """Return the state of the running command, creating it on first use."""
    if ctx is None:
        ctx = click.get_current_context(silent=True)

    state = _state_from_context(ctx) or _STATE_VAR.get()
    if state is None:
        if not create:
            raise RuntimeError("CLI state is not initialised for this context.")
        state = CLIState()
    if ctx is not None and ctx.obj is None:
        ctx.obj = state
    _STATE_VAR.set(state)
    return state


def set_cli_state(
    *,
    ctx: click.Context | None = None,
    verbosity: int | None = None,
    debug: bool | None = None,
) -> CLIState:
    """Apply the diagnostic options of a command and return the state."""
    state = get_cli_state(ctx)
    if verbosity is not None:
        state.verbosity = max(0, verbosity)
    if debug is not None:
        state.show_tracebacks = debug
    return state


def _detail_lines(exception: BaseException, message: str, verbosity: int) -> list[str]:
    lines: list[str] = []
    detail = str(exception).strip()
    if detail and detail not in message:
        lines.append(detail)
    lines.append(f"type: {type(exception).__name__}")
    if verbosity >= 2:
        from unimath.core.exceptions import exception_messages

        causes = exception_messages(exception)[1:]
        if causes:
            lines.append("caused by:")
            lines.extend(f"  {cause}" for cause in causes)
    if verbosity >= 3:
        lines.append(f"repr: {exception!r}")
    return lines


def render_message(
    level: str,
    message: str,
    *,
    exception: BaseException | None = None,
) -> None:
    """Print a labelled diagnostic on stderr, with details when verbose."""
    from rich.text import Text

    state = get_cli_state()
    style = _LEVEL_STYLES.get(level, "cyan")
    text = Text.assemble((f"{level}: ", f"bold {style}"), (message, style))
    if exception is not None and state.verbosity >= 1:
        text.append("\n")
        text.append("\n".join(_detail_lines(exception, message, state.verbosity)), style=style)
    state.err_console.print(text)


def emit_warning(message: str, *, exception: BaseException | None = None) -> None:
    """Report a recoverable problem on stderr."""
    render_message("warning", message, exception=exception)


def emit_error(message: str, *, exception: BaseException | None = None) -> None:
    """Report a failure on stderr."""
    render_message("error", message, exception=exception)


def debug_enabled() -> bool:
    """Return whether full tracebacks were requested."""
    try:
        return get_cli_state(create=False).show_tracebacks
    except RuntimeError:
        return False
