# tests/unit/test_ingredients.py
import pytest

from morizo_web.core.ingredients import (
    IngredientMatcher,
    get_missing_ingredients,
    katakana_to_hiragana,
    normalize_ingredient_name,
)


@pytest.fixture
def english():
    return IngredientMatcher(excluded=("salt", "ginger"))


# ---- normalization -----------------------------------------------------------

def test_normalize_trims_lowercases_and_folds_katakana():
    assert normalize_ingredient_name("  トマト ") == "とまと"
    assert normalize_ingredient_name(" Pork Belly\t") == "pork belly"
    assert normalize_ingredient_name("ＢＰ") == "ｂｐ"


def test_normalize_empty_string():
    assert normalize_ingredient_name("") == ""
    assert normalize_ingredient_name("   ") == ""


def test_katakana_range_edges():
    assert katakana_to_hiragana("ァ") == "ぁ"
    assert katakana_to_hiragana("ヴ") == "ゔ"
    assert katakana_to_hiragana("ヶ") == "ゖ"
    # outside ァ..ヶ: prolonged sound mark and ヷ stay as they are
    assert katakana_to_hiragana("ー") == "ー"
    assert katakana_to_hiragana("ヷ") == "ヷ"
    assert katakana_to_hiragana("豚バラ肉") == "豚ばら肉"


@pytest.mark.parametrize("name", ["  ブラックペッパー ", "Egg", "豚バラ肉", "", "ＢＰ", "ｶﾀｶﾅ", "Straße"])
def test_normalize_is_idempotent(name):
    once = normalize_ingredient_name(name)
    assert normalize_ingredient_name(once) == once


# ---- excluded staples --------------------------------------------------------

def test_excluded_terms_are_lowercased_not_folded():
    m = IngredientMatcher(excluded=["ショウガ", "しょうが", "Salt", "ＢＰ"])
    assert m.excluded == frozenset({"ショウガ", "しょうが", "salt", "ｂｐ"})


def test_default_staples_absorb_folded_spellings():
    m = IngredientMatcher()
    assert m.is_excluded(m.normalize("おろしショウガ"))
    assert m.is_excluded(m.normalize("ニンニク"))
    assert m.is_excluded(m.normalize("サラダ油"))
    assert m.is_excluded(m.normalize("ＢＰ"))


def test_exclusion_is_bidirectional(english):
    assert english.is_excluded("fresh grated ginger")  # contains a term
    assert english.is_excluded("gin")                  # contained in a term
    assert not english.is_excluded("egg")


# ---- matching ---------------------------------------------------------------

def test_empty_or_absent_inventory_declines_to_judge(english):
    assert english.missing(["egg", "truffle oil"], []) == []
    assert english.missing(["egg", "truffle oil"], None) == []
    assert get_missing_ingredients(["にんじん"], []) == []


def test_empty_recipe_has_nothing_missing(english):
    assert english.missing([], ["egg"]) == []


def test_exact_match_and_staple_suppressed(english):
    assert english.missing(["salt", "egg"], ["egg"]) == []


def test_substring_match_either_direction(english):
    assert english.missing(["pork belly meat"], ["pork belly"]) == []
    assert english.missing(["pork belly"], ["pork belly meat"]) == []


def test_true_miss_is_reported(english):
    assert english.missing(["truffle oil", "egg"], ["egg"]) == ["truffle oil"]


def test_staple_never_reported_regardless_of_inventory(english):
    assert english.missing(["fresh grated ginger", "Salt"], ["rice"]) == []


def test_case_insensitive(english):
    assert english.missing(["Egg", "Milk"], ["EGG"]) == ["Milk"]


def test_output_keeps_original_spelling_order_and_duplicates(english):
    recipe = ["  Carrot ", "onion", "Carrot"]
    assert english.missing(recipe, ["egg"]) == ["  Carrot ", "onion", "Carrot"]


def test_output_is_deterministic(english):
    recipe = ["carrot", "pork belly meat", "salt", "onion"]
    available = ["Pork Belly", "rice"]
    assert english.missing(recipe, available) == english.missing(recipe, available) == ["carrot", "onion"]


def test_single_character_name_is_absorbed_by_containment(english):
    # no length threshold: "a" sits inside "salt"
    assert english.missing(["a"], ["egg"]) == []


def test_inventory_duplicates_collapse(english):
    assert english.missing(["egg", "leek"], ["egg", "EGG", " egg "]) == ["leek"]


def test_pluggable_normalizer():
    case_sensitive = IngredientMatcher(excluded=(), normalize=str.strip)
    assert case_sensitive.missing(["Egg"], ["egg"]) == ["Egg"]


# ---- default (Japanese) configuration ---------------------------------------

def test_default_matcher_japanese_recipe():
    recipe = ["豚バラ肉", "キャベツ", "醤油", "おろしにんにく", "水"]
    available = ["豚バラ", "たまご"]
    assert get_missing_ingredients(recipe, available) == ["キャベツ"]


def test_katakana_and_hiragana_spellings_match():
    assert get_missing_ingredients(["ニンジン"], ["にんじん"]) == []
    assert get_missing_ingredients(["にんじん"], ["ニンジン"]) == []


def test_default_matcher_reports_true_miss():
    assert get_missing_ingredients(["にんじん", "玉ねぎ"], ["たまご"]) == ["にんじん", "玉ねぎ"]


def test_long_katakana_staples_do_not_hide_main_ingredients():
    assert get_missing_ingredients(["ネギ", "チーズ"], ["たまご"]) == ["ネギ", "チーズ"]
    recipe = ["ネギ", "チーズ", "コーン", "オリーブ", "オイスター", "カレー", "ソース"]
    assert get_missing_ingredients(recipe, ["たまご"]) == recipe


def test_katakana_staple_absorbed_through_hiragana_entry():
    assert get_missing_ingredients(["ショウガ", "おろしニンニク"], ["たまご"]) == []
