"""Shared Typer option definitions for CLI commands."""

from __future__ import annotations

from typing import Annotated

import typer

from unimath.core.config import PerAlphabetStyle, StylePolicy
from unimath.core.exceptions import PolicyError
from unimath.core.styles import MathStyleSpec, ShapePreference

from .state import emit_warning


POLICY_PANEL = "Style Policy"
DIAGNOSTICS_PANEL = "Diagnostics"

MathStyleOption = Annotated[
    str,
    typer.Option(
        "--math-style",
        "-m",
        help="Top-level convention: tex, iso, french, upright or literal.",
        rich_help_panel=POLICY_PANEL,
    ),
]

NormalStyleOption = Annotated[
    str | None,
    typer.Option(
        "--normal-style",
        help=(
            "Normal weight letters: a named convention (iso, tex, french, upright, literal) "
            "or 'Greek=upright,greek=italic,Latin=italic,latin=italic'."
        ),
        rich_help_panel=POLICY_PANEL,
    ),
]

BoldStyleOption = Annotated[
    str | None,
    typer.Option(
        "--bold-style",
        help=(
            "Bold letters: a named convention (iso, tex, upright, literal) "
            "or a per-alphabet list like --normal-style."
        ),
        rich_help_panel=POLICY_PANEL,
    ),
]

SansStyleOption = Annotated[
    ShapePreference | None,
    typer.Option(
        "--sans-style",
        help="Shape of sans-serif letters.",
        rich_help_panel=POLICY_PANEL,
    ),
]

PartialOption = Annotated[
    ShapePreference | None,
    typer.Option(
        "--partial",
        help="Shape of the partial differential symbol.",
        rich_help_panel=POLICY_PANEL,
    ),
]

NablaOption = Annotated[
    ShapePreference | None,
    typer.Option(
        "--nabla",
        help="Shape of the nabla symbol.",
        rich_help_panel=POLICY_PANEL,
    ),
]

VerboseOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase CLI verbosity. Combine multiple times for additional diagnostics.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

DebugOption = Annotated[
    bool,
    typer.Option(
        "--debug",
        help="Show full tracebacks when an unexpected error occurs.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]


def _letter_spec(value: str | None, option: str) -> str | PerAlphabetStyle | None:
    if value is None or "=" not in value:
        return value
    try:
        return PerAlphabetStyle.parse(value)
    except PolicyError as exc:
        raise typer.BadParameter(str(exc), param_hint=f"'{option}'") from exc


def build_policy(
    math_style: str = "tex",
    normal_style: str | None = None,
    bold_style: str | None = None,
    sans_style: ShapePreference | None = None,
    partial: ShapePreference | None = None,
    nabla: ShapePreference | None = None,
) -> StylePolicy:
    """Translate command-line policy options into a :class:`StylePolicy`."""
    known = {spec.value for spec in MathStyleSpec}
    if math_style not in known:
        emit_warning(f"Unknown math style '{math_style}', falling back to literal shapes.")
    return StylePolicy(
        math_style_spec=math_style,
        normal_style_spec=_letter_spec(normal_style, "--normal-style"),
        bold_style_spec=_letter_spec(bold_style, "--bold-style"),
        sans_style=sans_style,
        partial=partial,
        nabla=nabla,
    )


__all__ = [
    "DIAGNOSTICS_PANEL",
    "POLICY_PANEL",
    "BoldStyleOption",
    "DebugOption",
    "MathStyleOption",
    "NablaOption",
    "NormalStyleOption",
    "PartialOption",
    "SansStyleOption",
    "VerboseOption",
    "build_policy",
]
