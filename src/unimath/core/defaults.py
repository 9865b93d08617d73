"""Default styling configuration and the ``sym*`` shorthand functions.

A :class:`StyleContext` owns one immutable :class:`StyleTables` snapshot.
Reconfiguring builds a complete new snapshot before swapping the reference,
so concurrent readers see either the old tables or the new ones.

The process default lives in a module-level context. ``use_context`` installs
a temporary context for the current thread or task without touching it.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
import logging
from threading import Lock
from typing import TYPE_CHECKING, Any

from .config import StylePolicy
from .engine import apply_style
from .styles import BaseStyle, CompositeStyle, StyleToken
from .substitutions import StyleTables, tables_for


if TYPE_CHECKING:  # pragma: no cover - typing only
    from unimath.registry import CharacterRegistry


logger = logging.getLogger(__name__)


class StyleContext:
    """Holder of an atomically replaceable table snapshot."""

    def __init__(
        self,
        policy: StylePolicy | None = None,
        *,
        registry: CharacterRegistry | None = None,
        **options: Any,
    ) -> None:
        self._lock = Lock()
        self._registry = registry
        self._tables = tables_for(policy, registry=registry, **options)

    @property
    def tables(self) -> StyleTables:
        """Return the current snapshot."""
        return self._tables

    def configure(self, policy: StylePolicy | None = None, **options: Any) -> StyleTables:
        """Replace the snapshot with the tables of a new policy and return them."""
        tables = tables_for(policy, registry=self._registry, **options)
        with self._lock:
            previous, self._tables = self._tables, tables
        if previous.config != tables.config:
            logger.debug("Style context reconfigured: %r", tables.config)
        return tables

    def style(self, text: str, target: StyleToken | None = None) -> str:
        """Style ``text`` with the current snapshot."""
        return apply_style(text, target, tables=self._tables)


_DEFAULT_CONTEXT: StyleContext | None = None
_DEFAULT_LOCK = Lock()
_CONTEXT_VAR: ContextVar[StyleContext | None] = ContextVar("unimath_style_context", default=None)


def _default_context() -> StyleContext:
    global _DEFAULT_CONTEXT
    with _DEFAULT_LOCK:
        if _DEFAULT_CONTEXT is None:
            _DEFAULT_CONTEXT = StyleContext()
        return _DEFAULT_CONTEXT


def get_default_context() -> StyleContext:
    """Return the context active for the caller (scoped one first)."""
    scoped = _CONTEXT_VAR.get()
    if scoped is not None:
        return scoped
    return _default_context()


def set_default(policy: StylePolicy | None = None, **options: Any) -> StyleTables:
    """Reconfigure the process-wide default used by :func:`sym` and friends."""
    return _default_context().configure(policy, **options)


@contextmanager
def use_context(
    policy: StylePolicy | StyleContext | None = None, **options: Any
) -> Iterator[StyleContext]:
    """Temporarily style with another policy in the current execution context."""
    if isinstance(policy, StyleContext):
        if options:
            raise TypeError("Options cannot be combined with an existing StyleContext.")
        context = policy
    else:
        context = StyleContext(policy, **options)
    token = _CONTEXT_VAR.set(context)
    try:
        yield context
    finally:
        _CONTEXT_VAR.reset(token)


def sym(text: str, target: StyleToken | None = None) -> str:
    """Style ``text`` according to the active default configuration."""
    return get_default_context().style(text, target)


def _shorthand(style: BaseStyle | CompositeStyle) -> Callable[[str], str]:
    def styled(text: str) -> str:
        return sym(text, style)

    styled.__name__ = styled.__qualname__ = f"sym{style.value}"
    styled.__doc__ = f"Style ``text`` as ``{style.value}`` with the default configuration."
    return styled


symup = _shorthand(BaseStyle.UP)
symit = _shorthand(BaseStyle.IT)
symbfup = _shorthand(BaseStyle.BFUP)
symbfit = _shorthand(BaseStyle.BFIT)
symsfup = _shorthand(BaseStyle.SFUP)
symsfit = _shorthand(BaseStyle.SFIT)
symbfsfup = _shorthand(BaseStyle.BFSFUP)
symbfsfit = _shorthand(BaseStyle.BFSFIT)
symtt = _shorthand(BaseStyle.TT)
symbb = _shorthand(BaseStyle.BB)
symbbit = _shorthand(BaseStyle.BBIT)
symcal = _shorthand(BaseStyle.CAL)
symbfcal = _shorthand(BaseStyle.BFCAL)
symfrak = _shorthand(BaseStyle.FRAK)
symbffrak = _shorthand(BaseStyle.BFFRAK)
symbf = _shorthand(CompositeStyle.BF)
symsf = _shorthand(CompositeStyle.SF)
symbfsf = _shorthand(CompositeStyle.BFSF)


__all__ = [
    "StyleContext",
    "get_default_context",
    "set_default",
    "sym",
    "symbb",
    "symbbit",
    "symbf",
    "symbfcal",
    "symbffrak",
    "symbfit",
    "symbfsf",
    "symbfsfit",
    "symbfsfup",
    "symbfup",
    "symcal",
    "symfrak",
    "symit",
    "symsf",
    "symsfit",
    "symsfup",
    "symtt",
    "symup",
    "use_context",
]
