"""Closed vocabularies naming alphabets, styles and shape preferences.

Every enumeration mixes in ``str`` so members compare and hash like their
tag. Callers may pass plain strings such as ``"bf"`` wherever a style token is
expected and table lookups still hit.

Alphabet

: Class of abstract characters sharing one substitution table. ``dotless``
  (dotless i/j) reuses the ``latin`` table.

BaseStyle

: Concrete rendering variant with registered glyphs.

MetaStyle

: "Same weight/slant family as the current glyph, let the policy decide the
  shape". Produced when a character is restyled without an explicit target.

CompositeStyle

: Ambiguous shorthand (``bf``, ``sf``, ``bfsf``) resolved to a base style by
  the policy at lookup time.
"""

from __future__ import annotations

from enum import Enum


class Alphabet(str, Enum):
    """Character classes with their own substitution table."""

    NUM = "num"
    GREEK_UPPER = "Greek"
    GREEK_LOWER = "greek"
    LATIN_UPPER = "Latin"
    LATIN_LOWER = "latin"
    DOTLESS = "dotless"
    PARTIAL = "partial"
    NABLA = "Nabla"

    def __str__(self) -> str:
        return self.value


class BaseStyle(str, Enum):
    """Concrete styles with directly registered glyphs."""

    UP = "up"
    IT = "it"
    BFUP = "bfup"
    BFIT = "bfit"
    SFUP = "sfup"
    SFIT = "sfit"
    BFSFUP = "bfsfup"
    BFSFIT = "bfsfit"
    TT = "tt"
    BB = "bb"
    BBIT = "bbit"
    CAL = "cal"
    BFCAL = "bfcal"
    FRAK = "frak"
    BFFRAK = "bffrak"

    def __str__(self) -> str:
        return self.value


class MetaStyle(str, Enum):
    """Same-class markers resolved by the shape preferences of a policy."""

    UP = "UP"
    IT = "IT"
    BFUP = "BFUP"
    BFIT = "BFIT"
    SFUP = "SFUP"
    SFIT = "SFIT"
    BFSFUP = "BFSFUP"
    BFSFIT = "BFSFIT"

    def __str__(self) -> str:
        return self.value


class CompositeStyle(str, Enum):
    """Shorthands whose shape (upright or italic) comes from the policy."""

    BF = "bf"
    SF = "sf"
    BFSF = "bfsf"

    def __str__(self) -> str:
        return self.value


class ShapePreference(str, Enum):
    """Whether a style family forces a shape or keeps the glyph's own."""

    UPRIGHT = "upright"
    ITALIC = "italic"
    LITERAL = "literal"

    def __str__(self) -> str:
        return self.value


class MathStyleSpec(str, Enum):
    """Top-level conventions understood by the config resolver."""

    TEX = "tex"
    ISO = "iso"
    FRENCH = "french"
    UPRIGHT = "upright"
    LITERAL = "literal"

    def __str__(self) -> str:
        return self.value


class NormalStyleSpec(str, Enum):
    """Named per-alphabet conventions for normal weight glyphs."""

    ISO = "iso"
    TEX = "tex"
    FRENCH = "french"
    UPRIGHT = "upright"
    LITERAL = "literal"

    def __str__(self) -> str:
        return self.value


class BoldStyleSpec(str, Enum):
    """Named per-alphabet conventions for bold glyphs (no French variant)."""

    ISO = "iso"
    TEX = "tex"
    UPRIGHT = "upright"
    LITERAL = "literal"

    def __str__(self) -> str:
        return self.value


StyleToken = BaseStyle | MetaStyle | CompositeStyle | str
"""Anything that may be requested as a target style."""

# Alphabets whose preferences come from the per-alphabet style specs.
LETTER_ALPHABETS: tuple[Alphabet, ...] = (
    Alphabet.GREEK_UPPER,
    Alphabet.GREEK_LOWER,
    Alphabet.LATIN_UPPER,
    Alphabet.LATIN_LOWER,
)

ALL_STYLES: tuple[BaseStyle | CompositeStyle, ...] = (*BaseStyle, *CompositeStyle)

_META_BY_BASE: dict[BaseStyle, MetaStyle] = {
    BaseStyle.UP: MetaStyle.UP,
    BaseStyle.IT: MetaStyle.IT,
    BaseStyle.BFUP: MetaStyle.BFUP,
    BaseStyle.BFIT: MetaStyle.BFIT,
    BaseStyle.SFUP: MetaStyle.SFUP,
    BaseStyle.SFIT: MetaStyle.SFIT,
    BaseStyle.BFSFUP: MetaStyle.BFSFUP,
    BaseStyle.BFSFIT: MetaStyle.BFSFIT,
}


def meta_style(style: BaseStyle) -> MetaStyle | BaseStyle:
    """Return the meta-token of ``style``, or ``style`` itself when it has none."""
    return _META_BY_BASE.get(style, style)


def parse_token(value: str) -> StyleToken:
    """Return the enum member spelled ``value``, or ``value`` when unknown."""
    if isinstance(value, Enum):
        return value
    for family in (BaseStyle, CompositeStyle, MetaStyle):
        try:
            return family(value)
        except ValueError:
            continue
    return value


__all__ = [
    "ALL_STYLES",
    "LETTER_ALPHABETS",
    "Alphabet",
    "BaseStyle",
    "BoldStyleSpec",
    "CompositeStyle",
    "MathStyleSpec",
    "MetaStyle",
    "NormalStyleSpec",
    "ShapePreference",
    "StyleToken",
    "meta_style",
    "parse_token",
]
