"""CLI command implementations exposed via `unimath.ui.cli`."""

from __future__ import annotations

from .inspect import inspect
from .style import style
from .table import table


__all__ = ["inspect", "style", "table"]
