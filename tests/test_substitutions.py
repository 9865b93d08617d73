from __future__ import annotations

import pytest

from unimath import StylePolicy, build_aliases, build_substitutions, resolve, tables_for
from unimath.core.styles import Alphabet, BaseStyle, CompositeStyle, MetaStyle
from unimath.core.substitutions import (
    ROWLESS_STYLES,
    alphabet_preferences,
    lookup_alias,
    lookup_substitution,
    transition_row,
)


S = BaseStyle


@pytest.fixture
def tex_table():
    return build_substitutions(resolve())


def test_every_alphabet_has_a_row_for_every_base_style(tex_table) -> None:
    assert set(tex_table) == set(Alphabet)
    for alphabet, rows in tex_table.items():
        assert set(rows) == set(BaseStyle) - ROWLESS_STYLES, alphabet


def test_bold_script_has_no_row(tex_table) -> None:
    assert ROWLESS_STYLES == {S.BFCAL}
    assert lookup_substitution(tex_table, Alphabet.LATIN_UPPER, S.BFCAL, S.UP) is None
    assert lookup_substitution(tex_table, Alphabet.LATIN_UPPER, S.BFCAL, S.CAL) is None


def test_dotless_shares_the_lowercase_latin_table(tex_table) -> None:
    assert tex_table[Alphabet.DOTLESS] is tex_table[Alphabet.LATIN_LOWER]


def test_tables_are_read_only(tex_table) -> None:
    with pytest.raises(TypeError):
        tex_table[Alphabet.NUM] = {}  # type: ignore[index]
    with pytest.raises(TypeError):
        tex_table[Alphabet.NUM][S.UP][S.IT] = S.UP  # type: ignore[index]
    with pytest.raises(TypeError):
        build_aliases()[Alphabet.NUM][S.IT] = S.IT  # type: ignore[index]


def test_duplicate_row_registration_is_rejected() -> None:
    with pytest.raises(ValueError):

        @transition_row(S.UP)
        def _again(_prefs):
            return {}


def test_upright_row_follows_tex_preferences(tex_table) -> None:
    latin = tex_table[Alphabet.LATIN_LOWER][S.UP]
    greek_upper = tex_table[Alphabet.GREEK_UPPER][S.UP]

    assert latin[MetaStyle.UP] is S.IT
    assert latin[CompositeStyle.BF] is S.BFUP
    assert latin[CompositeStyle.SF] is S.SFUP
    assert greek_upper[MetaStyle.UP] is S.UP
    assert tex_table[Alphabet.GREEK_LOWER][S.UP][CompositeStyle.BF] is S.BFIT
    assert all(latin[style] is style for style in BaseStyle)


def test_italic_row_under_iso(tex_table) -> None:
    iso = build_substitutions(resolve(StylePolicy(math_style_spec="iso")))
    row = iso[Alphabet.GREEK_UPPER][S.IT]

    assert row[MetaStyle.IT] is S.IT
    assert row[CompositeStyle.BF] is S.BFIT
    assert row[CompositeStyle.SF] is S.SFIT
    assert row[CompositeStyle.BFSF] is S.BFSFIT
    assert tex_table[Alphabet.GREEK_UPPER][S.IT][MetaStyle.IT] is S.UP


def test_literal_preferences_keep_the_current_shape() -> None:
    table = build_substitutions(resolve(StylePolicy(math_style_spec="literal")))
    latin = table[Alphabet.LATIN_LOWER]

    assert latin[S.UP][MetaStyle.UP] is S.UP
    assert latin[S.IT][MetaStyle.IT] is S.IT
    assert latin[S.UP][CompositeStyle.BF] is S.BFUP
    assert latin[S.IT][CompositeStyle.BF] is S.BFIT
    assert latin[S.IT][CompositeStyle.SF] is S.SFIT
    assert latin[S.BFIT][MetaStyle.BFIT] is S.BFIT
    assert latin[S.SFIT][CompositeStyle.BF] is S.BFSFIT


def test_bold_rows(tex_table) -> None:
    bfup = tex_table[Alphabet.GREEK_LOWER][S.BFUP]
    bfit = tex_table[Alphabet.GREEK_UPPER][S.BFIT]

    assert bfup[MetaStyle.BFUP] is S.BFIT
    assert bfup[S.IT] is S.BFIT
    assert bfup[S.CAL] is S.BFCAL
    assert bfup[CompositeStyle.SF] is S.BFSFUP
    assert bfit[MetaStyle.BFIT] is S.BFUP
    assert bfit[S.UP] is S.BFUP
    assert bfit[CompositeStyle.BF] is S.BFIT


def test_sans_rows_follow_the_sans_preference() -> None:
    tex = build_substitutions(resolve())[Alphabet.LATIN_UPPER]
    iso = build_substitutions(resolve(StylePolicy(math_style_spec="iso")))[Alphabet.LATIN_UPPER]

    assert tex[S.SFIT][MetaStyle.SFIT] is S.SFUP
    assert iso[S.SFUP][MetaStyle.SFUP] is S.SFIT
    assert iso[S.SFUP][CompositeStyle.BF] is S.BFSFIT
    assert tex[S.BFSFIT][MetaStyle.BFSFIT] is S.BFSFUP
    assert tex[S.BFSFUP][S.IT] is S.BFSFIT


def test_fixed_family_rows(tex_table) -> None:
    latin = tex_table[Alphabet.LATIN_UPPER]

    assert dict(latin[S.TT]) == {S.TT: S.TT, S.UP: S.TT}
    assert dict(latin[S.BB]) == {S.BB: S.BB, S.UP: S.BB, S.IT: S.BBIT}
    assert dict(latin[S.BBIT]) == {S.BB: S.BBIT, S.IT: S.BBIT, S.UP: S.BB}
    assert latin[S.CAL][CompositeStyle.BF] is S.BFCAL
    assert latin[S.FRAK][CompositeStyle.BF] is S.BFFRAK
    assert latin[S.BFFRAK][S.FRAK] is S.BFFRAK


def test_partial_and_nabla_use_their_own_preference() -> None:
    prefs = alphabet_preferences(resolve(StylePolicy(partial="upright", nabla="italic")))

    assert prefs[Alphabet.PARTIAL].normal == "upright"
    assert prefs[Alphabet.PARTIAL].bold == "upright"
    assert prefs[Alphabet.NABLA].sans == "italic"
    assert prefs[Alphabet.NUM].normal == "upright"


def test_sparse_lookups_report_absence(tex_table) -> None:
    assert lookup_substitution(tex_table, "klingon", S.UP, S.IT) is None
    assert lookup_substitution(tex_table, Alphabet.NUM, "smallcaps", S.IT) is None
    assert lookup_substitution(tex_table, Alphabet.LATIN_LOWER, S.TT, CompositeStyle.BF) is None
    assert lookup_substitution(tex_table, Alphabet.LATIN_LOWER, S.UP, "bf") is S.BFUP


def test_aliases_fold_missing_digit_styles() -> None:
    aliases = build_aliases()

    assert set(aliases) == {Alphabet.NUM}
    assert lookup_alias(aliases, Alphabet.NUM, S.BBIT) is S.BB
    assert lookup_alias(aliases, Alphabet.NUM, S.BFIT) is S.BFUP
    assert lookup_alias(aliases, Alphabet.NUM, S.BB) is None
    assert lookup_alias(aliases, Alphabet.LATIN_LOWER, S.IT) is None


def test_resolve_style_chains_substitution_and_alias() -> None:
    tables = tables_for()

    assert tables.resolve_style(Alphabet.LATIN_LOWER, S.UP, MetaStyle.UP) is S.IT
    assert tables.resolve_style(Alphabet.NUM, S.UP, S.BBIT) is S.BB
    assert tables.resolve_style(Alphabet.NUM, S.UP, MetaStyle.UP) is S.UP
    assert tables.resolve_style(Alphabet.LATIN_LOWER, S.TT, "bogus") == "bogus"


def test_tables_are_memoised_per_configuration() -> None:
    assert tables_for() is tables_for(StylePolicy(math_style_spec="tex"))
    assert tables_for() is not tables_for(math_style_spec="iso")
