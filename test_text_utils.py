"""
Tests for text normalization and the banded scorer.
"""
from locale_engine.utils.text_utils import (
    expand_abbreviations,
    extract_text_query,
    normalize_text,
    split_words,
)
from locale_engine.utils.matching_utils import (
    banded_score,
    levenshtein_normalized,
    token_sort_ratio,
)


# === Normalization ===

def test_normalize_lowercases_trims_and_expands():
    assert normalize_text("  Mt Pleasant, SC ") == "mount pleasant, sc"


def test_normalize_expands_every_abbreviation_once():
    assert normalize_text("12 Mt Pleasant St") == "12 mount pleasant street"
    assert normalize_text("Rifle Range Rd") == "rifle range road"
    assert normalize_text("Folly Blvd") == "folly boulevard"


def test_abbreviations_respect_word_boundaries():
    assert normalize_text("Stone Ave") == "stone avenue"
    assert normalize_text("Mountain Dr") == "mountain drive"


def test_abbreviations_are_case_insensitive():
    assert expand_abbreviations("MT PLEASANT") == "mount PLEASANT"


def test_normalize_is_total():
    assert normalize_text("") == ""
    assert normalize_text(None) == ""
    assert normalize_text("   ") == ""


def test_extract_text_query_strips_house_number():
    assert extract_text_query("123 King") == "King"
    assert extract_text_query("42") == ""
    assert extract_text_query("42   ") == ""
    assert extract_text_query("King 123") == "King 123"
    assert extract_text_query("") == ""


def test_split_words():
    assert split_words("james  island, sc") == ("james", "island,", "sc")
    assert split_words("") == ()


# === Banded scorer ===

def test_exact_match_scores_100():
    assert banded_score("folly beach, sc", "folly beach, sc") == 100


def test_prefix_scores_90():
    assert banded_score("downtown charleston, sc", "dow") == 90


def test_empty_query_is_a_prefix_of_everything():
    assert banded_score("goose creek, sc", "") == 90


def test_all_words_with_first_word_hit_scores_80():
    assert banded_score("james island, sc", "james isl") == 90
    # second query word hits the entry's first word: still earns the bonus
    assert banded_score("james island, sc", "isl james") == 80


def test_all_words_without_first_word_scores_70():
    assert banded_score("old village mount pleasant, sc", "mount pleasant") == 70
    assert banded_score("downtown charleston, sc", "char") == 70


def test_two_partial_hits_add_up_to_a_full_word():
    # "ar" is inside both "harleston" and "charleston,": 0.5 + 0.5
    assert banded_score("harleston village charleston, sc", "ar") == 70


def test_most_words_scores_60():
    # 3 of 4 query words credited (75% >= 70%)
    assert banded_score("james island, sc", "james island sc zzz") == 60


def test_raw_substring_scores_50():
    assert banded_score("i'on mount pleasant, sc", "on") == 50


def test_no_match_scores_0():
    assert banded_score("folly beach, sc", "zzz") == 0


# === Similarity ===

def test_levenshtein_normalized():
    assert levenshtein_normalized("IOP", "iop") == 1.0
    assert levenshtein_normalized("", "iop") == 0.0
    assert 0.9 < levenshtein_normalized("sullivans island", "sullivan's island") < 1.0


def test_token_sort_ratio_ignores_word_order():
    assert token_sort_ratio("island james", "James Island") == 100
    assert token_sort_ratio("", "James Island") == 0.0
