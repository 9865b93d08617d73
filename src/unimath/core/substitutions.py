"""Style-transition tables derived from a resolved configuration.

A substitution table answers, per alphabet: "a glyph currently in style S1 is
asked for style token S2, which base style should be looked up?". Rows are
declared with ``@transition_row`` for every base style except those listed in
``ROWLESS_STYLES``; any other missing row is an import error.

All lookups are sparse. :func:`lookup_substitution` and :func:`lookup_alias`
return ``None`` when the alphabet, the current style, or the token is absent
and the caller keeps the requested token unchanged.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from functools import lru_cache
import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from .config import (
    ResolvedConfig,
    StylePolicy,
    coerce_policy,
    expand_bold,
    expand_normal,
    resolve,
)
from .styles import (
    LETTER_ALPHABETS,
    Alphabet,
    BaseStyle,
    CompositeStyle,
    MetaStyle,
    ShapePreference,
    StyleToken,
)


if TYPE_CHECKING:  # pragma: no cover - typing only
    from unimath.registry import CharacterRegistry


logger = logging.getLogger(__name__)

TransitionRow = Mapping[StyleToken, BaseStyle]
AlphabetTable = Mapping[BaseStyle, TransitionRow]
SubstitutionTable = Mapping[Alphabet, AlphabetTable]
AliasTable = Mapping[Alphabet, Mapping[StyleToken, BaseStyle]]

_UP = ShapePreference.UPRIGHT
_IT = ShapePreference.ITALIC

S = BaseStyle


@dataclass(frozen=True, slots=True)
class ShapePreferences:
    """Normal, bold and sans-serif shape preferences of one alphabet."""

    normal: ShapePreference
    bold: ShapePreference
    sans: ShapePreference


RowBuilder = Callable[[ShapePreferences], dict[StyleToken, BaseStyle]]

_ROW_BUILDERS: dict[BaseStyle, RowBuilder] = {}


def transition_row(style: BaseStyle) -> Callable[[RowBuilder], RowBuilder]:
    """Register the builder of the row used for glyphs currently in ``style``."""

    def decorator(func: RowBuilder) -> RowBuilder:
        if style in _ROW_BUILDERS:
            raise ValueError(f"Transition row for '{style}' is already registered.")
        _ROW_BUILDERS[style] = func
        return func

    return decorator


def _shape(preference: ShapePreference, upright: S, italic: S, default: S) -> S:
    if preference == _UP:
        return upright
    if preference == _IT:
        return italic
    return default


@transition_row(S.UP)
def _upright_row(prefs: ShapePreferences) -> dict[StyleToken, BaseStyle]:
    row: dict[StyleToken, BaseStyle] = {style: style for style in BaseStyle}
    row[MetaStyle.UP] = _shape(prefs.normal, S.UP, S.IT, S.UP)
    # An upright glyph keeps its shape when the bold preference is literal.
    row[CompositeStyle.BF] = _shape(prefs.bold, S.BFUP, S.BFIT, S.BFUP)
    row[CompositeStyle.SF] = _shape(prefs.sans, S.SFUP, S.SFIT, S.SFUP)
    row[CompositeStyle.BFSF] = _shape(prefs.sans, S.BFSFUP, S.BFSFIT, S.BFSFUP)
    return row


@transition_row(S.IT)
def _italic_row(prefs: ShapePreferences) -> dict[StyleToken, BaseStyle]:
    row: dict[StyleToken, BaseStyle] = {style: style for style in BaseStyle}
    row[MetaStyle.IT] = _shape(prefs.normal, S.UP, S.IT, S.IT)
    row[CompositeStyle.BF] = _shape(prefs.bold, S.BFUP, S.BFIT, S.BFIT)
    row[CompositeStyle.SF] = _shape(prefs.sans, S.SFUP, S.SFIT, S.SFIT)
    row[CompositeStyle.BFSF] = _shape(prefs.sans, S.BFSFUP, S.BFSFIT, S.BFSFIT)
    return row


@transition_row(S.BFUP)
def _bold_upright_row(prefs: ShapePreferences) -> dict[StyleToken, BaseStyle]:
    bold_sans = _shape(prefs.sans, S.BFSFUP, S.BFSFIT, S.BFSFUP)
    return {
        S.UP: S.BFUP,
        S.BFUP: S.BFUP,
        CompositeStyle.BF: S.BFUP,
        S.IT: S.BFIT,
        S.BFIT: S.BFIT,
        S.SFUP: S.BFSFUP,
        S.BFSFUP: S.BFSFUP,
        S.SFIT: S.BFSFIT,
        S.BFSFIT: S.BFSFIT,
        S.CAL: S.BFCAL,
        S.FRAK: S.BFFRAK,
        MetaStyle.BFUP: _shape(prefs.bold, S.BFUP, S.BFIT, S.BFUP),
        CompositeStyle.SF: bold_sans,
        CompositeStyle.BFSF: bold_sans,
    }


@transition_row(S.BFIT)
def _bold_italic_row(prefs: ShapePreferences) -> dict[StyleToken, BaseStyle]:
    bold_sans = _shape(prefs.sans, S.BFSFUP, S.BFSFIT, S.BFSFIT)
    return {
        CompositeStyle.BF: S.BFIT,
        S.BFIT: S.BFIT,
        S.IT: S.BFIT,
        S.UP: S.BFUP,
        S.BFUP: S.BFUP,
        S.SFIT: S.BFSFIT,
        S.BFSFIT: S.BFSFIT,
        S.SFUP: S.BFSFUP,
        S.BFSFUP: S.BFSFUP,
        MetaStyle.BFIT: _shape(prefs.bold, S.BFUP, S.BFIT, S.BFIT),
        CompositeStyle.SF: bold_sans,
        CompositeStyle.BFSF: bold_sans,
    }


@transition_row(S.SFUP)
def _sans_upright_row(prefs: ShapePreferences) -> dict[StyleToken, BaseStyle]:
    bold_sans = _shape(prefs.sans, S.BFSFUP, S.BFSFIT, S.BFSFUP)
    return {
        CompositeStyle.SF: S.SFUP,
        S.SFUP: S.SFUP,
        S.UP: S.SFUP,
        S.IT: S.SFIT,
        S.SFIT: S.SFIT,
        S.BFUP: S.BFSFUP,
        S.BFSFUP: S.BFSFUP,
        S.BFIT: S.BFSFIT,
        S.BFSFIT: S.BFSFIT,
        MetaStyle.SFUP: _shape(prefs.sans, S.SFUP, S.SFIT, S.SFUP),
        CompositeStyle.BF: bold_sans,
        CompositeStyle.BFSF: bold_sans,
    }


@transition_row(S.SFIT)
def _sans_italic_row(prefs: ShapePreferences) -> dict[StyleToken, BaseStyle]:
    bold_sans = _shape(prefs.sans, S.BFSFUP, S.BFSFIT, S.BFSFIT)
    return {
        CompositeStyle.SF: S.SFIT,
        S.SFIT: S.SFIT,
        S.IT: S.SFIT,
        S.UP: S.SFUP,
        S.SFUP: S.SFUP,
        S.BFIT: S.BFSFIT,
        S.BFSFIT: S.BFSFIT,
        S.BFUP: S.BFSFUP,
        S.BFSFUP: S.BFSFUP,
        MetaStyle.SFIT: _shape(prefs.sans, S.SFUP, S.SFIT, S.SFIT),
        CompositeStyle.BF: bold_sans,
        CompositeStyle.BFSF: bold_sans,
    }


@transition_row(S.BFSFUP)
def _bold_sans_upright_row(prefs: ShapePreferences) -> dict[StyleToken, BaseStyle]:
    row: dict[StyleToken, BaseStyle] = dict.fromkeys(
        (S.UP, CompositeStyle.BF, CompositeStyle.SF, S.BFUP, S.SFUP, S.BFSFUP), S.BFSFUP
    )
    row.update(dict.fromkeys((S.IT, S.SFIT, S.BFSFIT), S.BFSFIT))
    row[MetaStyle.BFSFUP] = _shape(prefs.sans, S.BFSFUP, S.BFSFIT, S.BFSFUP)
    return row


@transition_row(S.BFSFIT)
def _bold_sans_italic_row(prefs: ShapePreferences) -> dict[StyleToken, BaseStyle]:
    row: dict[StyleToken, BaseStyle] = dict.fromkeys(
        (S.IT, CompositeStyle.BF, CompositeStyle.SF, S.BFIT, S.SFIT, S.BFSFIT), S.BFSFIT
    )
    row.update(dict.fromkeys((S.UP, S.SFUP, S.BFSFUP), S.BFSFUP))
    row[MetaStyle.BFSFIT] = _shape(prefs.sans, S.BFSFUP, S.BFSFIT, S.BFSFIT)
    return row


@transition_row(S.TT)
def _monospace_row(_prefs: ShapePreferences) -> dict[StyleToken, BaseStyle]:
    return {S.TT: S.TT, S.UP: S.TT}


@transition_row(S.BB)
def _double_struck_row(_prefs: ShapePreferences) -> dict[StyleToken, BaseStyle]:
    return {S.BB: S.BB, S.UP: S.BB, S.IT: S.BBIT}


@transition_row(S.BBIT)
def _double_struck_italic_row(_prefs: ShapePreferences) -> dict[StyleToken, BaseStyle]:
    return {S.BB: S.BBIT, S.IT: S.BBIT, S.UP: S.BB}


@transition_row(S.CAL)
def _script_row(_prefs: ShapePreferences) -> dict[StyleToken, BaseStyle]:
    return {S.CAL: S.CAL, S.UP: S.CAL, CompositeStyle.BF: S.BFCAL}


@transition_row(S.FRAK)
def _fraktur_row(_prefs: ShapePreferences) -> dict[StyleToken, BaseStyle]:
    return {S.FRAK: S.FRAK, S.UP: S.FRAK, CompositeStyle.BF: S.BFFRAK}


@transition_row(S.BFFRAK)
def _bold_fraktur_row(_prefs: ShapePreferences) -> dict[StyleToken, BaseStyle]:
    return {S.FRAK: S.BFFRAK, S.UP: S.BFFRAK, CompositeStyle.BF: S.BFFRAK}


# Bold script glyphs have no row: every request on them keeps the token as is.
ROWLESS_STYLES = frozenset({S.BFCAL})

_MISSING_ROWS = set(BaseStyle) - ROWLESS_STYLES - set(_ROW_BUILDERS)
if _MISSING_ROWS:  # pragma: no cover - guarded by tests
    raise RuntimeError(
        "Missing transition rows for: " + ", ".join(sorted(map(str, _MISSING_ROWS)))
    )


def alphabet_table(prefs: ShapePreferences) -> AlphabetTable:
    """Build the read-only transition rows of one alphabet."""
    return MappingProxyType(
        {style: MappingProxyType(build(prefs)) for style, build in _ROW_BUILDERS.items()}
    )


def alphabet_preferences(cfg: ResolvedConfig) -> dict[Alphabet, ShapePreferences]:
    """Return the shape preferences driving each alphabet with its own table."""
    normal = expand_normal(cfg.normal_style_spec)
    bold = expand_bold(cfg.bold_style_spec)
    prefs = {Alphabet.NUM: ShapePreferences(_UP, _UP, _UP)}
    for alphabet in LETTER_ALPHABETS:
        prefs[alphabet] = ShapePreferences(
            normal.for_alphabet(alphabet), bold.for_alphabet(alphabet), cfg.sans_style
        )
    prefs[Alphabet.PARTIAL] = ShapePreferences(cfg.partial, cfg.partial, cfg.partial)
    prefs[Alphabet.NABLA] = ShapePreferences(cfg.nabla, cfg.nabla, cfg.nabla)
    return prefs


def build_substitutions(cfg: ResolvedConfig) -> SubstitutionTable:
    """Build the per-alphabet transition tables for ``cfg``."""
    tables: dict[Alphabet, AlphabetTable] = {
        alphabet: alphabet_table(prefs)
        for alphabet, prefs in alphabet_preferences(cfg).items()
    }
    tables[Alphabet.DOTLESS] = tables[Alphabet.LATIN_LOWER]
    return MappingProxyType(tables)


_NUM_ALIASES: Mapping[StyleToken, BaseStyle] = MappingProxyType(
    {
        S.IT: S.UP,
        CompositeStyle.BF: S.BFUP,
        S.BFIT: S.BFUP,
        CompositeStyle.SF: S.SFUP,
        S.SFIT: S.SFUP,
        CompositeStyle.BFSF: S.BFSFUP,
        S.BFSFIT: S.BFSFUP,
        # There are no double-struck italic digits.
        S.BBIT: S.BB,
    }
)


def build_aliases(_cfg: ResolvedConfig | None = None) -> AliasTable:
    """Build the alias table; digits fold styles they have no glyphs for."""
    return MappingProxyType({Alphabet.NUM: _NUM_ALIASES})


def lookup_substitution(
    table: SubstitutionTable, alphabet: Any, style: Any, token: Any
) -> BaseStyle | None:
    """Return the substituted style or ``None`` when any level is absent."""
    rows = table.get(alphabet)
    if rows is None:
        return None
    row = rows.get(style)
    if row is None:
        return None
    return row.get(token)


def lookup_alias(aliases: AliasTable, alphabet: Any, token: Any) -> BaseStyle | None:
    """Return the aliased style or ``None`` when no alias applies."""
    entries = aliases.get(alphabet)
    if entries is None:
        return None
    return entries.get(token)


@dataclass(frozen=True, slots=True)
class StyleTables:
    """Immutable snapshot pairing substitution and alias tables with a registry."""

    config: ResolvedConfig
    substitutions: SubstitutionTable
    aliases: AliasTable
    registry: CharacterRegistry

    def resolve_style(self, alphabet: Any, style: Any, target: StyleToken) -> StyleToken:
        """Run the substitution and alias lookups for one character."""
        substituted = lookup_substitution(self.substitutions, alphabet, style, target)
        resolved: StyleToken = target if substituted is None else substituted
        aliased = lookup_alias(self.aliases, alphabet, resolved)
        return resolved if aliased is None else aliased


@lru_cache(maxsize=64)
def _cached_tables(cfg: ResolvedConfig, registry: CharacterRegistry) -> StyleTables:
    logger.debug("Building style tables for %r", cfg)
    return StyleTables(
        config=cfg,
        substitutions=build_substitutions(cfg),
        aliases=build_aliases(cfg),
        registry=registry,
    )


def build_tables(
    cfg: ResolvedConfig, registry: CharacterRegistry | None = None
) -> StyleTables:
    """Return the table snapshot for ``cfg``, memoised per configuration."""
    if registry is None:
        from unimath.registry import get_registry

        registry = get_registry()
    return _cached_tables(cfg, registry)


def tables_for(
    policy: StylePolicy | None = None,
    *,
    registry: CharacterRegistry | None = None,
    **options: Any,
) -> StyleTables:
    """Resolve a policy (or inline fields) and return its table snapshot."""
    return build_tables(resolve(coerce_policy(policy, **options)), registry)


__all__ = [
    "ROWLESS_STYLES",
    "AliasTable",
    "ShapePreferences",
    "StyleTables",
    "SubstitutionTable",
    "alphabet_preferences",
    "alphabet_table",
    "build_aliases",
    "build_substitutions",
    "build_tables",
    "lookup_alias",
    "lookup_substitution",
    "tables_for",
    "transition_row",
]
