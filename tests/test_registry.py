from __future__ import annotations

import pytest

from unimath.core.styles import Alphabet, BaseStyle
from unimath.registry import CharacterDescriptor, CharacterRegistry, get_registry
from unimath.registry.ucd import classify_name, parse_math_name


@pytest.fixture(scope="module")
def registry() -> CharacterRegistry:
    return get_registry()


def test_registry_is_shared(registry: CharacterRegistry) -> None:
    assert get_registry() is registry
    assert len(registry) > 1000


@pytest.mark.parametrize(
    ("glyph", "alphabet", "style", "name"),
    [
        ("a", Alphabet.LATIN_LOWER, BaseStyle.UP, "a"),
        ("7", Alphabet.NUM, BaseStyle.UP, "7"),
        ("\N{GREEK CAPITAL LETTER GAMMA}", Alphabet.GREEK_UPPER, BaseStyle.UP, "Gamma"),
        ("\N{GREEK SMALL LETTER FINAL SIGMA}", Alphabet.GREEK_LOWER, BaseStyle.UP, "varsigma"),
        ("\N{GREEK LUNATE EPSILON SYMBOL}", Alphabet.GREEK_LOWER, BaseStyle.UP, "varepsilon"),
        ("\N{GREEK CAPITAL THETA SYMBOL}", Alphabet.GREEK_UPPER, BaseStyle.UP, "varTheta"),
        ("\N{LATIN SMALL LETTER DOTLESS I}", Alphabet.DOTLESS, BaseStyle.UP, "i"),
        ("\N{PARTIAL DIFFERENTIAL}", Alphabet.PARTIAL, BaseStyle.UP, "partial"),
        ("\N{NABLA}", Alphabet.NABLA, BaseStyle.UP, "nabla"),
        ("\N{MATHEMATICAL ITALIC SMALL A}", Alphabet.LATIN_LOWER, BaseStyle.IT, "a"),
        ("\N{MATHEMATICAL BOLD ITALIC CAPITAL Z}", Alphabet.LATIN_UPPER, BaseStyle.BFIT, "Z"),
        ("\N{MATHEMATICAL SANS-SERIF BOLD SMALL ALPHA}", Alphabet.GREEK_LOWER, BaseStyle.BFSFUP, "alpha"),
        ("\N{MATHEMATICAL DOUBLE-STRUCK DIGIT ONE}", Alphabet.NUM, BaseStyle.BB, "1"),
        ("\N{MATHEMATICAL BOLD SCRIPT CAPITAL A}", Alphabet.LATIN_UPPER, BaseStyle.BFCAL, "A"),
        ("\N{MATHEMATICAL ITALIC SMALL DOTLESS J}", Alphabet.DOTLESS, BaseStyle.IT, "j"),
        ("\N{MATHEMATICAL BOLD ITALIC PARTIAL DIFFERENTIAL}", Alphabet.PARTIAL, BaseStyle.BFIT, "partial"),
        ("\N{MATHEMATICAL ITALIC NABLA}", Alphabet.NABLA, BaseStyle.IT, "nabla"),
        ("\N{PLANCK CONSTANT}", Alphabet.LATIN_LOWER, BaseStyle.IT, "h"),
        ("\N{SCRIPT CAPITAL B}", Alphabet.LATIN_UPPER, BaseStyle.CAL, "B"),
        ("\N{DOUBLE-STRUCK CAPITAL R}", Alphabet.LATIN_UPPER, BaseStyle.BB, "R"),
        ("\N{DOUBLE-STRUCK ITALIC SMALL D}", Alphabet.LATIN_LOWER, BaseStyle.BBIT, "d"),
        ("\N{DOUBLE-STRUCK SMALL PI}", Alphabet.GREEK_LOWER, BaseStyle.BB, "pi"),
    ],
)
def test_descriptor_for_glyph(
    registry: CharacterRegistry, glyph: str, alphabet: Alphabet, style: BaseStyle, name: str
) -> None:
    descriptor = registry.descriptor_for(glyph)

    assert descriptor == CharacterDescriptor(name, alphabet, style, glyph)
    assert registry.glyph_for(alphabet, style, name) == glyph
    assert glyph in registry


@pytest.mark.parametrize("glyph", ["+", " ", "é", "\N{GRINNING FACE}", "\N{CYRILLIC SMALL LETTER A}"])
def test_unregistered_glyphs(registry: CharacterRegistry, glyph: str) -> None:
    assert registry.descriptor_for(glyph) is None
    assert glyph not in registry


def test_reserved_holes_are_not_registered(registry: CharacterRegistry) -> None:
    assert registry.glyph_for(Alphabet.LATIN_LOWER, BaseStyle.IT, "h") == "\N{PLANCK CONSTANT}"
    assert registry.descriptor_for(chr(0x1D455)) is None
    assert registry.glyph_for(Alphabet.GREEK_LOWER, BaseStyle.FRAK, "alpha") is None


def test_styles_for(registry: CharacterRegistry) -> None:
    digit_styles = registry.styles_for(Alphabet.NUM, "1")

    assert BaseStyle.BB in digit_styles
    assert BaseStyle.BFSFUP in digit_styles
    assert BaseStyle.IT not in digit_styles
    assert BaseStyle.BBIT not in digit_styles
    assert len(registry.styles_for(Alphabet.LATIN_UPPER, "A")) == 14


def test_descriptor_serialisation() -> None:
    descriptor = get_registry().descriptor_for("\N{MATHEMATICAL BOLD SMALL A}")

    assert descriptor is not None
    assert descriptor.codepoint == "U+1D41A"
    assert descriptor.to_dict() == {
        "name": "a",
        "alphabet": "latin",
        "style": "bfup",
        "glyph": "\N{MATHEMATICAL BOLD SMALL A}",
        "codepoint": "U+1D41A",
    }


def test_registry_rejects_conflicting_entries() -> None:
    first = CharacterDescriptor("a", Alphabet.LATIN_LOWER, BaseStyle.UP, "a")

    with pytest.raises(ValueError):
        CharacterRegistry([first, CharacterDescriptor("a", Alphabet.LATIN_LOWER, BaseStyle.UP, "b")])
    with pytest.raises(ValueError):
        CharacterRegistry([first, CharacterDescriptor("b", Alphabet.LATIN_LOWER, BaseStyle.UP, "a")])
    with pytest.raises(ValueError):
        CharacterRegistry([CharacterDescriptor("ab", Alphabet.LATIN_LOWER, BaseStyle.UP, "ab")])


def test_custom_registry_lookups() -> None:
    registry = CharacterRegistry(
        [
            CharacterDescriptor("x", Alphabet.LATIN_LOWER, BaseStyle.UP, "x"),
            CharacterDescriptor("x", Alphabet.LATIN_LOWER, BaseStyle.IT, "\N{MATHEMATICAL ITALIC SMALL X}"),
        ]
    )

    assert len(registry) == 2
    assert [d.style for d in registry] == [BaseStyle.UP, BaseStyle.IT]
    assert registry.lookup(Alphabet.LATIN_LOWER, "it", "x") is not None
    assert registry.glyph_for(Alphabet.LATIN_LOWER, BaseStyle.BFUP, "x") is None


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("MATHEMATICAL BOLD CAPITAL A", (Alphabet.LATIN_UPPER, BaseStyle.BFUP, "A")),
        ("MATHEMATICAL SANS-SERIF BOLD ITALIC SMALL OMEGA", (Alphabet.GREEK_LOWER, BaseStyle.BFSFIT, "omega")),
        ("MATHEMATICAL MONOSPACE DIGIT NINE", (Alphabet.NUM, BaseStyle.TT, "9")),
        ("MATHEMATICAL BOLD FRAKTUR SMALL Q", (Alphabet.LATIN_LOWER, BaseStyle.BFFRAK, "q")),
        ("MATHEMATICAL BOLD KAPPA SYMBOL", (Alphabet.GREEK_LOWER, BaseStyle.BFUP, "varkappa")),
        ("MATHEMATICAL ITALIC CAPITAL THETA SYMBOL", (Alphabet.GREEK_UPPER, BaseStyle.IT, "varTheta")),
        ("LATIN CAPITAL LETTER A", None),
        ("MATHEMATICAL BOLD N-ARY SUMMATION", None),
    ],
)
def test_parse_math_name(name: str, expected) -> None:
    assert parse_math_name(name) == expected


def test_classify_name() -> None:
    assert classify_name("CAPITAL OMEGA") == (Alphabet.GREEK_UPPER, "Omega")
    assert classify_name("DIGIT ZERO") == (Alphabet.NUM, "0")
    assert classify_name("SMALL DOTLESS I") == (Alphabet.DOTLESS, "i")
    assert classify_name("ALEF SYMBOL") is None
