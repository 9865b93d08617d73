from __future__ import annotations

import pytest

from unimath.core.styles import (
    ALL_STYLES,
    Alphabet,
    BaseStyle,
    CompositeStyle,
    MetaStyle,
    meta_style,
    parse_token,
)


def test_enums_compare_like_their_tags() -> None:
    assert BaseStyle.BFIT == "bfit"
    assert Alphabet.GREEK_UPPER == "Greek"
    assert str(CompositeStyle.BFSF) == "bfsf"
    assert f"{MetaStyle.SFIT}" == "SFIT"
    assert {BaseStyle.TT: 1}["tt"] == 1


def test_meta_and_base_tokens_are_distinct() -> None:
    assert BaseStyle.UP != MetaStyle.UP
    assert len(ALL_STYLES) == len(set(ALL_STYLES)) == 18


@pytest.mark.parametrize(
    ("style", "expected"),
    [
        (BaseStyle.UP, MetaStyle.UP),
        (BaseStyle.IT, MetaStyle.IT),
        (BaseStyle.BFUP, MetaStyle.BFUP),
        (BaseStyle.BFIT, MetaStyle.BFIT),
        (BaseStyle.SFUP, MetaStyle.SFUP),
        (BaseStyle.SFIT, MetaStyle.SFIT),
        (BaseStyle.BFSFUP, MetaStyle.BFSFUP),
        (BaseStyle.BFSFIT, MetaStyle.BFSFIT),
        (BaseStyle.TT, BaseStyle.TT),
        (BaseStyle.BBIT, BaseStyle.BBIT),
        (BaseStyle.BFFRAK, BaseStyle.BFFRAK),
    ],
)
def test_meta_style(style: BaseStyle, expected) -> None:
    assert meta_style(style) is expected


def test_parse_token() -> None:
    assert parse_token("bf") is CompositeStyle.BF
    assert parse_token("cal") is BaseStyle.CAL
    assert parse_token("UP") is MetaStyle.UP
    assert parse_token(BaseStyle.IT) is BaseStyle.IT
    assert parse_token("smallcaps") == "smallcaps"
