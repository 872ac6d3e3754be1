# morizo_web/core/ingredients.py
from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Sequence

# Katakana ァ (U+30A1) .. ヶ (U+30F6) sit exactly 0x60 above their hiragana.
_KATAKANA_START = 0x30A1
_KATAKANA_END = 0x30F6
_KANA_OFFSET = 0x60

_KATAKANA_TO_HIRAGANA = {
    cp: cp - _KANA_OFFSET for cp in range(_KATAKANA_START, _KATAKANA_END + 1)
}


def katakana_to_hiragana(text: str) -> str:
    """Map katakana to hiragana; every other character is left as-is."""
    return text.translate(_KATAKANA_TO_HIRAGANA)


def normalize_ingredient_name(name: str) -> str:
    """
    Canonical comparable form of an ingredient name:
    trimmed, lower-cased, katakana folded into hiragana.
    """
    return katakana_to_hiragana(name.strip().lower())


# Common seasonings, staples and water. Never reported as missing.
DEFAULT_EXCLUDED_INGREDIENTS = (
    "水",
    "はちみつ",
    "ハチミツ",
    "塩",
    "こしょう",
    "胡椒",
    "コショウ",
    "醤油",
    "しょうゆ",
    "味噌",
    "みそ",
    "砂糖",
    "みりん",
    "酒",
    "料理酒",
    "酢",
    "油",
    "サラダ油",
    "オリーブオイル",
    "ごま油",
    "バター",
    "マヨネーズ",
    "ケチャップ",
    "ウスターソース",
    "オイスターソース",
    "豆板醤",
    "甜麺醤",
    "味の素",
    "だし",
    "だしの素",
    "コンソメ",
    "顆粒だし",
    "チューブ生姜",
    "チューブにんにく",
    "ネギ分",
    "ブラックペッパー",
    "ブラックペッパ",
    "ペッパー",
    "ガーリックパウダー",
    "ガーリックパウダ",
    "にんにくパウダー",
    "にんにくパウダ",
    "パルメザンチーズ",
    "パルメザン",
    "パルメザンチーズ粉",
    "めんつゆ",
    "メンツユ",
    "栗粉",
    "くりこ",
    "片栗粉",
    "かたくりこ",
    "スープ",
    "生姜",
    "しょうが",
    "ショウガ",
    "おろし生姜",
    "おろししょうが",
    "おろしショウガ",
    "にんにく",
    "ニンニク",
    "おろしにんにく",
    "おろしニンニク",
    "ガラスープの素",
    "がらスープの素",
    "鶏がらスープの素",
    "鶏ガラスープの素",
    "ＢＰ",
    "bp",
    "ベーキングパウダー",
    "ベーキングパウダ",
    "カレールー",
    "カレー粉",
    "米粉",
    "こめこ",
    "クレージーソルト",
    "コーンスターチ",
)


class IngredientMatcher:
    """
    Decides which recipe ingredients the user does not have on hand.

    A recipe ingredient counts as available when its normalized name equals
    an available one, or when either name contains the other ("豚バラ肉" vs
    "豚バラ"). Anything matching the excluded list (bidirectional containment
    as well) is never reported.

    Both the excluded terms and the normalizer are injectable so callers can
    target another locale or swap the staples list in tests. Excluded terms
    are only lower-cased, never kana-folded, so a katakana entry such as
    "パルメザンチーズ" cannot absorb a folded "ちーず".
    """

    def __init__(
        self,
        excluded: Iterable[str] = DEFAULT_EXCLUDED_INGREDIENTS,
        normalize: Callable[[str], str] = normalize_ingredient_name,
    ) -> None:
        self._normalize = normalize
        self._excluded = frozenset(term.lower() for term in excluded)

    @property
    def excluded(self) -> frozenset[str]:
        return self._excluded

    def normalize(self, name: str) -> str:
        return self._normalize(name)

    def is_excluded(self, normalized: str) -> bool:
        return any(term in normalized or normalized in term for term in self._excluded)

    def missing(
        self,
        recipe_ingredients: Sequence[str],
        available_ingredients: Optional[Sequence[str]],
    ) -> List[str]:
        # No inventory data: decline to judge rather than flag everything.
        if not available_ingredients:
            return []

        available = {self._normalize(a) for a in available_ingredients}

        out: List[str] = []
        for ingredient in recipe_ingredients:
            n = self._normalize(ingredient)
            if self.is_excluded(n):
                continue
            if n in available:
                continue
            if any(n in a or a in n for a in available):
                continue
            out.append(ingredient)
        return out


_default_matcher = IngredientMatcher()


def get_missing_ingredients(
    recipe_ingredients: Sequence[str],
    available_ingredients: Optional[Sequence[str]],
) -> List[str]:
    """Missing ingredients using the default staples list and normalizer."""
    return _default_matcher.missing(recipe_ingredients, available_ingredients)
