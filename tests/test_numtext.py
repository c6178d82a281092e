"""
Test suite for the conversion engine: lexicon, renderer, tokenizer, parser.

Every expected string below is exact, whitespace included — rendered phrases
keep the spacing their pieces were joined with.

Run: pytest tests/ -v
"""

from __future__ import annotations

import pytest

from numtext.exceptions import (
    MalformedInputError,
    UnknownWordError,
    UnsupportedMagnitudeError,
)
from numtext.lexicon import DEFAULT_LEXICON, Lexicon
from numtext.parser import parse
from numtext.renderer import render, render_int
from numtext.tokenizer import tokenize


# ═══════════════════════════════════════════════════════════════════════
# LEXICON
# ═══════════════════════════════════════════════════════════════════════


class TestLexicon:
    def test_fundamental_count(self):
        # 0-20 plus the seven tens from thirty to ninety
        assert len(DEFAULT_LEXICON.words) == 28

    def test_word_for_fundamental(self):
        assert DEFAULT_LEXICON.word_for(0) == "zero"
        assert DEFAULT_LEXICON.word_for(13) == "thirteen"
        assert DEFAULT_LEXICON.word_for(40) == "forty"

    def test_is_fundamental(self):
        assert DEFAULT_LEXICON.is_fundamental(19)
        assert DEFAULT_LEXICON.is_fundamental(70)
        assert not DEFAULT_LEXICON.is_fundamental(71)

    def test_word_for_composite_is_none(self):
        assert DEFAULT_LEXICON.word_for(25) is None
        assert DEFAULT_LEXICON.word_for(100) is None

    def test_value_for_is_exact_match(self):
        assert DEFAULT_LEXICON.value_for("ninety") == 90
        assert DEFAULT_LEXICON.value_for("Ninety") is None

    def test_legacy_spelling_accepted(self):
        assert DEFAULT_LEXICON.value_for("fourty") == 40

    def test_width_labels_derived_from_powers(self):
        assert dict(DEFAULT_LEXICON.width_labels) == {
            6: "thousand",
            9: "million",
            12: "billion",
            15: "trillion",
            18: "quadrillion",
        }

    def test_powers_increase(self):
        exponents = list(DEFAULT_LEXICON.powers.values())
        assert exponents == sorted(exponents)

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_LEXICON.words[5] = "fiv"  # type: ignore[index]

    def test_known_words(self):
        lexicon = Lexicon()
        assert lexicon.is_known("and")
        assert lexicon.is_known("quadrillion")
        assert lexicon.is_known("seven")
        assert not lexicon.is_known("banana")

    def test_unknown_width_raises(self):
        with pytest.raises(UnsupportedMagnitudeError):
            DEFAULT_LEXICON.label_for_width("0" * 21)


# ═══════════════════════════════════════════════════════════════════════
# RENDERER
# ═══════════════════════════════════════════════════════════════════════


class TestRenderFundamentals:
    def test_zero(self):
        assert render("0") == "zero"

    def test_twenty(self):
        assert render("20") == "twenty"

    def test_ninety(self):
        assert render("90") == "ninety"

    def test_forty_uses_modern_spelling(self):
        assert render("40") == "forty"


class TestRenderHyphenation:
    def test_twenty_one(self):
        assert render("21") == "twenty-one"

    def test_ninety_nine(self):
        assert render("99") == "ninety-nine"


class TestRenderHundreds:
    def test_exact_hundred_keeps_trailing_space(self):
        assert render("100") == "one hundred "

    def test_hundred_and_one(self):
        assert render("101") == "one hundred and one"

    def test_hundred_and_five(self):
        assert "one hundred and five" in render("105")

    def test_hundred_and_compound(self):
        assert render("342") == "three hundred and forty-two"


class TestRenderDenominations:
    def test_one_thousand(self):
        assert render("1000") == "one thousand "

    def test_one_million(self):
        assert render("1000000") == "one million "

    def test_comma_before_large_remainder(self):
        result = render("1234")
        assert "one thousand" in result
        assert ", two hundred and thirty-four" in result
        assert result == "one thousand , two hundred and thirty-four"

    def test_and_before_small_remainder(self):
        assert render("1001") == "one thousand and one"

    def test_remainder_skips_zero_groups(self):
        assert render("2000005") == "two million and five"

    def test_hundred_thousand(self):
        assert render("100000") == "one hundred  thousand "

    def test_largest_supported(self):
        result = render("9" * 18)
        assert result.startswith("nine hundred and ninety-nine quadrillion , ")
        assert result.endswith("nine hundred and ninety-nine")

    def test_leading_zeros_ignored(self):
        assert render("0042") == "forty-two"
        assert render("0001000") == "one thousand "


class TestRenderErrors:
    def test_nineteen_digits_unsupported(self):
        with pytest.raises(UnsupportedMagnitudeError) as exc:
            render("1" + "0" * 18)
        assert exc.value.code == "UNSUPPORTED_MAGNITUDE"
        assert exc.value.details["max_digits"] == 18

    def test_zero_padded_past_eighteen_digits_unsupported(self):
        with pytest.raises(UnsupportedMagnitudeError) as exc:
            render("0" * 18 + "25")
        assert exc.value.details["digits"] == "0" * 18 + "25"

    def test_eighteen_digits_with_leading_zeros_allowed(self):
        assert render("0" * 16 + "25") == "twenty-five"

    def test_empty_is_malformed(self):
        with pytest.raises(MalformedInputError):
            render("")

    def test_non_digits_malformed(self):
        with pytest.raises(MalformedInputError):
            render("12a")

    def test_negative_int_malformed(self):
        with pytest.raises(MalformedInputError):
            render_int(-1)

    def test_render_int(self):
        assert render_int(45) == "forty-five"


# ═══════════════════════════════════════════════════════════════════════
# TOKENIZER
# ═══════════════════════════════════════════════════════════════════════


class TestTokenizer:
    def test_hyphen_splits(self):
        assert tokenize("twenty-one") == ["twenty", "one"]

    def test_commas_and_extra_spaces_dropped(self):
        assert tokenize("one  thousand, five") == ["one", "thousand", "five"]

    def test_embedded_numeral_expanded(self):
        assert tokenize("20 thousand") == ["twenty", "thousand"]

    def test_multi_word_numeral_expanded(self):
        assert tokenize("1234") == [
            "one", "thousand", "two", "hundred", "and", "thirty", "four",
        ]

    def test_unknown_words_kept_verbatim(self):
        assert tokenize("banana 5") == ["banana", "five"]

    def test_separators_only(self):
        assert tokenize(" , - ") == []

    def test_oversized_numeral_raises(self):
        with pytest.raises(UnsupportedMagnitudeError):
            tokenize("1" + "0" * 18 + " apples")


# ═══════════════════════════════════════════════════════════════════════
# PARSER
# ═══════════════════════════════════════════════════════════════════════


class TestParser:
    def test_single_fundamental(self):
        assert parse("seventeen") == 17

    def test_surrounding_whitespace(self):
        assert parse("  seven  ") == 7

    def test_hyphenated(self):
        assert parse("forty-two") == 42

    def test_nested_hundreds_and_thousands(self):
        assert parse("one hundred and two thousand three hundred and four") == 102304

    def test_separator_and_after_scaled_hundreds(self):
        assert parse("one hundred and two thousand and three") == 102003

    def test_split_compound_before_label(self):
        assert parse("twenty five thousand") == 25000

    def test_embedded_numeral(self):
        assert parse("20 thousand") == 20000

    def test_double_label(self):
        assert parse("one hundred thousand") == 100000
        assert parse("one thousand million") == 1_000_000_000

    def test_separator_and(self):
        assert parse("two million and five") == 2000005

    def test_comma_grouping(self):
        assert parse("one thousand , two hundred and thirty-four") == 1234

    def test_legacy_spelling(self):
        assert parse("fourty-two") == 42

    def test_bare_label_means_one(self):
        assert parse("thousand") == 1000

    def test_leading_connector_counts_as_nothing(self):
        assert parse("and one") == 1


class TestParserErrors:
    def test_unknown_word(self):
        with pytest.raises(UnknownWordError) as exc:
            parse("one hundred and banana")
        assert exc.value.word == "banana"
        assert exc.value.code == "UNKNOWN_WORD"
        assert exc.value.details["phrase"] == "one hundred and banana"

    def test_case_sensitive(self):
        with pytest.raises(UnknownWordError):
            parse("Forty Two")

    def test_empty(self):
        with pytest.raises(MalformedInputError, match="Empty"):
            parse("")

    def test_whitespace_only(self):
        with pytest.raises(MalformedInputError, match="Empty"):
            parse("   ")

    def test_separators_only(self):
        with pytest.raises(MalformedInputError, match="No number words"):
            parse(", -")


# ═══════════════════════════════════════════════════════════════════════
# ROUND TRIP
# ═══════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize(
    "n",
    [
        0, 1, 9, 10, 11, 19, 20, 21, 30, 99, 100, 101, 110, 999, 1000, 1001,
        100000, 999999, 1000000, 123456789, 999999999999999999,
    ],
)
def test_parse_inverts_render(n: int) -> None:
    assert parse(render(str(n))) == n
