"""Primary public API for unimath."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as _pkg_version

from unimath.core.config import (
    PerAlphabetStyle,
    ResolvedConfig,
    StylePolicy,
    expand_bold,
    expand_normal,
    resolve,
)
from unimath.core.defaults import (
    StyleContext,
    get_default_context,
    set_default,
    sym,
    symbb,
    symbbit,
    symbf,
    symbfcal,
    symbffrak,
    symbfit,
    symbfsf,
    symbfsfit,
    symbfsfup,
    symbfup,
    symcal,
    symfrak,
    symit,
    symsf,
    symsfit,
    symsfup,
    symtt,
    symup,
    use_context,
)
from unimath.core.engine import StyledText, apply_style, iter_styled, style_char
from unimath.core.exceptions import PolicyError, UnimathError
from unimath.core.styles import (
    Alphabet,
    BaseStyle,
    CompositeStyle,
    MetaStyle,
    ShapePreference,
)
from unimath.core.substitutions import (
    StyleTables,
    build_aliases,
    build_substitutions,
    build_tables,
    tables_for,
)
from unimath.registry import CharacterDescriptor, CharacterRegistry, get_registry


try:
    __version__ = _pkg_version("unimath")
except PackageNotFoundError:  # pragma: no cover - running from a source tree
    __version__ = "0.0.0"

__all__ = [
    "Alphabet",
    "BaseStyle",
    "CharacterDescriptor",
    "CharacterRegistry",
    "CompositeStyle",
    "MetaStyle",
    "PerAlphabetStyle",
    "PolicyError",
    "ResolvedConfig",
    "ShapePreference",
    "StyleContext",
    "StylePolicy",
    "StyleTables",
    "StyledText",
    "UnimathError",
    "__version__",
    "apply_style",
    "build_aliases",
    "build_substitutions",
    "build_tables",
    "expand_bold",
    "expand_normal",
    "get_default_context",
    "get_registry",
    "iter_styled",
    "resolve",
    "set_default",
    "style_char",
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
    "tables_for",
    "use_context",
]
