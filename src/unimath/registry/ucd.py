"""Derive the character registry from the Unicode character database.

Styled variants live in the Mathematical Alphanumeric Symbols block whose
character names encode the style (``MATHEMATICAL BOLD ITALIC SMALL A``). The
reserved holes of that block are covered by older Letterlike Symbols, listed
explicitly in ``_LETTERLIKE``.
"""

from __future__ import annotations

from collections.abc import Iterator
import logging
import string
import unicodedata

from unimath.core.styles import Alphabet, BaseStyle

from .characters import CharacterDescriptor


logger = logging.getLogger(__name__)

MATH_ALPHANUMERIC_RANGE = (0x1D400, 0x1D7FF)

# Checked in order, so longer prefixes come first.
_STYLE_PREFIXES: tuple[tuple[str, BaseStyle], ...] = (
    ("MATHEMATICAL SANS-SERIF BOLD ITALIC ", BaseStyle.BFSFIT),
    ("MATHEMATICAL SANS-SERIF BOLD ", BaseStyle.BFSFUP),
    ("MATHEMATICAL SANS-SERIF ITALIC ", BaseStyle.SFIT),
    ("MATHEMATICAL SANS-SERIF ", BaseStyle.SFUP),
    ("MATHEMATICAL BOLD ITALIC ", BaseStyle.BFIT),
    ("MATHEMATICAL BOLD SCRIPT ", BaseStyle.BFCAL),
    ("MATHEMATICAL BOLD FRAKTUR ", BaseStyle.BFFRAK),
    ("MATHEMATICAL BOLD ", BaseStyle.BFUP),
    ("MATHEMATICAL ITALIC ", BaseStyle.IT),
    ("MATHEMATICAL SCRIPT ", BaseStyle.CAL),
    ("MATHEMATICAL FRAKTUR ", BaseStyle.FRAK),
    ("MATHEMATICAL DOUBLE-STRUCK ", BaseStyle.BB),
    ("MATHEMATICAL MONOSPACE ", BaseStyle.TT),
)

_DIGIT_WORDS = ("ZERO", "ONE", "TWO", "THREE", "FOUR", "FIVE", "SIX", "SEVEN", "EIGHT", "NINE")

_SPECIAL_NAMES: dict[str, tuple[Alphabet, str]] = {
    "NABLA": (Alphabet.NABLA, "nabla"),
    "PARTIAL DIFFERENTIAL": (Alphabet.PARTIAL, "partial"),
    "SMALL DOTLESS I": (Alphabet.DOTLESS, "i"),
    "SMALL DOTLESS J": (Alphabet.DOTLESS, "j"),
    "SMALL FINAL SIGMA": (Alphabet.GREEK_LOWER, "varsigma"),
    "EPSILON SYMBOL": (Alphabet.GREEK_LOWER, "varepsilon"),
    "LUNATE EPSILON SYMBOL": (Alphabet.GREEK_LOWER, "varepsilon"),
    "THETA SYMBOL": (Alphabet.GREEK_LOWER, "vartheta"),
    "KAPPA SYMBOL": (Alphabet.GREEK_LOWER, "varkappa"),
    "PHI SYMBOL": (Alphabet.GREEK_LOWER, "varphi"),
    "RHO SYMBOL": (Alphabet.GREEK_LOWER, "varrho"),
    "PI SYMBOL": (Alphabet.GREEK_LOWER, "varpi"),
    "CAPITAL THETA SYMBOL": (Alphabet.GREEK_UPPER, "varTheta"),
}

# Upright characters outside ASCII.
_UPRIGHT_CODEPOINTS: tuple[int, ...] = (
    *range(0x0391, 0x03AA),
    *range(0x03B1, 0x03CA),
    0x03D1,
    0x03D5,
    0x03D6,
    0x03F0,
    0x03F1,
    0x03F4,
    0x03F5,
    0x0131,
    0x0237,
    0x2202,
    0x2207,
)

_LETTERLIKE: tuple[tuple[str, Alphabet, BaseStyle, str], ...] = (
    ("\N{PLANCK CONSTANT}", Alphabet.LATIN_LOWER, BaseStyle.IT, "h"),
    ("\N{SCRIPT CAPITAL B}", Alphabet.LATIN_UPPER, BaseStyle.CAL, "B"),
    ("\N{SCRIPT CAPITAL E}", Alphabet.LATIN_UPPER, BaseStyle.CAL, "E"),
    ("\N{SCRIPT CAPITAL F}", Alphabet.LATIN_UPPER, BaseStyle.CAL, "F"),
    ("\N{SCRIPT CAPITAL H}", Alphabet.LATIN_UPPER, BaseStyle.CAL, "H"),
    ("\N{SCRIPT CAPITAL I}", Alphabet.LATIN_UPPER, BaseStyle.CAL, "I"),
    ("\N{SCRIPT CAPITAL L}", Alphabet.LATIN_UPPER, BaseStyle.CAL, "L"),
    ("\N{SCRIPT CAPITAL M}", Alphabet.LATIN_UPPER, BaseStyle.CAL, "M"),
    ("\N{SCRIPT CAPITAL R}", Alphabet.LATIN_UPPER, BaseStyle.CAL, "R"),
    ("\N{SCRIPT SMALL E}", Alphabet.LATIN_LOWER, BaseStyle.CAL, "e"),
    ("\N{SCRIPT SMALL G}", Alphabet.LATIN_LOWER, BaseStyle.CAL, "g"),
    ("\N{SCRIPT SMALL O}", Alphabet.LATIN_LOWER, BaseStyle.CAL, "o"),
    ("\N{BLACK-LETTER CAPITAL C}", Alphabet.LATIN_UPPER, BaseStyle.FRAK, "C"),
    ("\N{BLACK-LETTER CAPITAL H}", Alphabet.LATIN_UPPER, BaseStyle.FRAK, "H"),
    ("\N{BLACK-LETTER CAPITAL I}", Alphabet.LATIN_UPPER, BaseStyle.FRAK, "I"),
    ("\N{BLACK-LETTER CAPITAL R}", Alphabet.LATIN_UPPER, BaseStyle.FRAK, "R"),
    ("\N{BLACK-LETTER CAPITAL Z}", Alphabet.LATIN_UPPER, BaseStyle.FRAK, "Z"),
    ("\N{DOUBLE-STRUCK CAPITAL C}", Alphabet.LATIN_UPPER, BaseStyle.BB, "C"),
    ("\N{DOUBLE-STRUCK CAPITAL H}", Alphabet.LATIN_UPPER, BaseStyle.BB, "H"),
    ("\N{DOUBLE-STRUCK CAPITAL N}", Alphabet.LATIN_UPPER, BaseStyle.BB, "N"),
    ("\N{DOUBLE-STRUCK CAPITAL P}", Alphabet.LATIN_UPPER, BaseStyle.BB, "P"),
    ("\N{DOUBLE-STRUCK CAPITAL Q}", Alphabet.LATIN_UPPER, BaseStyle.BB, "Q"),
    ("\N{DOUBLE-STRUCK CAPITAL R}", Alphabet.LATIN_UPPER, BaseStyle.BB, "R"),
    ("\N{DOUBLE-STRUCK CAPITAL Z}", Alphabet.LATIN_UPPER, BaseStyle.BB, "Z"),
    ("\N{DOUBLE-STRUCK ITALIC CAPITAL D}", Alphabet.LATIN_UPPER, BaseStyle.BBIT, "D"),
    ("\N{DOUBLE-STRUCK ITALIC SMALL D}", Alphabet.LATIN_LOWER, BaseStyle.BBIT, "d"),
    ("\N{DOUBLE-STRUCK ITALIC SMALL E}", Alphabet.LATIN_LOWER, BaseStyle.BBIT, "e"),
    ("\N{DOUBLE-STRUCK ITALIC SMALL I}", Alphabet.LATIN_LOWER, BaseStyle.BBIT, "i"),
    ("\N{DOUBLE-STRUCK ITALIC SMALL J}", Alphabet.LATIN_LOWER, BaseStyle.BBIT, "j"),
    ("\N{DOUBLE-STRUCK CAPITAL GAMMA}", Alphabet.GREEK_UPPER, BaseStyle.BB, "Gamma"),
    ("\N{DOUBLE-STRUCK CAPITAL PI}", Alphabet.GREEK_UPPER, BaseStyle.BB, "Pi"),
    ("\N{DOUBLE-STRUCK SMALL GAMMA}", Alphabet.GREEK_LOWER, BaseStyle.BB, "gamma"),
    ("\N{DOUBLE-STRUCK SMALL PI}", Alphabet.GREEK_LOWER, BaseStyle.BB, "pi"),
)


def classify_name(rest: str) -> tuple[Alphabet, str] | None:
    """Map a style-less character name (``SMALL ALPHA``) to alphabet and name."""
    special = _SPECIAL_NAMES.get(rest)
    if special is not None:
        return special
    kind, _, word = rest.partition(" ")
    if kind == "DIGIT" and word in _DIGIT_WORDS:
        return Alphabet.NUM, str(_DIGIT_WORDS.index(word))
    if kind not in {"CAPITAL", "SMALL"} or not word or " " in word:
        return None
    if len(word) == 1:
        if kind == "CAPITAL":
            return Alphabet.LATIN_UPPER, word
        return Alphabet.LATIN_LOWER, word.lower()
    if kind == "CAPITAL":
        return Alphabet.GREEK_UPPER, word.title()
    return Alphabet.GREEK_LOWER, word.lower()


def parse_math_name(name: str) -> tuple[Alphabet, BaseStyle, str] | None:
    """Split a Mathematical Alphanumeric Symbols name into its parts."""
    for prefix, style in _STYLE_PREFIXES:
        if name.startswith(prefix):
            classified = classify_name(name[len(prefix) :])
            if classified is None:
                return None
            alphabet, char_name = classified
            return alphabet, style, char_name
    return None


def _upright_rest(name: str) -> str:
    for prefix in ("GREEK ", "LATIN "):
        if name.startswith(prefix):
            name = name[len(prefix) :]
            break
    return name.replace("LETTER ", "", 1)


def iter_upright() -> Iterator[CharacterDescriptor]:
    """Yield the upright characters every styled variant derives from."""
    for char in string.ascii_uppercase:
        yield CharacterDescriptor(char, Alphabet.LATIN_UPPER, BaseStyle.UP, char)
    for char in string.ascii_lowercase:
        yield CharacterDescriptor(char, Alphabet.LATIN_LOWER, BaseStyle.UP, char)
    for char in string.digits:
        yield CharacterDescriptor(char, Alphabet.NUM, BaseStyle.UP, char)
    for codepoint in _UPRIGHT_CODEPOINTS:
        glyph = chr(codepoint)
        name = unicodedata.name(glyph, None)
        if name is None:
            continue
        classified = classify_name(_upright_rest(name))
        if classified is None:
            logger.debug("Skipping upright character %s (%s)", f"U+{codepoint:04X}", name)
            continue
        alphabet, char_name = classified
        yield CharacterDescriptor(char_name, alphabet, BaseStyle.UP, glyph)


def iter_math_alphanumerics() -> Iterator[CharacterDescriptor]:
    """Yield every named character of the Mathematical Alphanumeric Symbols block."""
    start, end = MATH_ALPHANUMERIC_RANGE
    for codepoint in range(start, end + 1):
        glyph = chr(codepoint)
        name = unicodedata.name(glyph, None)
        if name is None:
            continue
        parsed = parse_math_name(name)
        if parsed is None:
            logger.debug("Skipping mathematical character %s (%s)", f"U+{codepoint:04X}", name)
            continue
        alphabet, style, char_name = parsed
        yield CharacterDescriptor(char_name, alphabet, style, glyph)


def iter_letterlike() -> Iterator[CharacterDescriptor]:
    """Yield the Letterlike Symbols filling the holes of the mathematical block."""
    for glyph, alphabet, style, name in _LETTERLIKE:
        yield CharacterDescriptor(name, alphabet, style, glyph)


def iter_descriptors() -> Iterator[CharacterDescriptor]:
    """Yield every descriptor of the default registry."""
    yield from iter_upright()
    yield from iter_math_alphanumerics()
    yield from iter_letterlike()


__all__ = [
    "MATH_ALPHANUMERIC_RANGE",
    "classify_name",
    "iter_descriptors",
    "iter_letterlike",
    "iter_math_alphanumerics",
    "iter_upright",
    "parse_math_name",
]
