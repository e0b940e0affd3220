"""Token-level similarity between individual name parts."""

from __future__ import annotations

import jellyfish

from app.verification.rules import VariationRuleSet


EXACT_SCORE = 1.0
NICKNAME_SCORE = 0.95
VARIATION_SCORE = 0.9
DISTINCT_PAIR_FLOOR = 0.4
DISTINCT_PAIR_DAMPING = 0.5
TYPO_FLOOR = 0.8
TYPO_MAX_DISTANCE = 2
TYPO_MIN_LENGTH = 4

_SLAVIC_ENDINGS = ("ov", "of", "ev", "ef", "off", "eff")
_ARTICLES = frozenset({"al", "el"})


class TokenScorer:
    """Scores two tokens with the rule set first, edit distance second.

    Rules are evaluated in order and the first one that applies wins:
    exact equality, nickname equivalence, affix/transliteration variation,
    then normalized Levenshtein similarity (dampened for known distinct
    pairs, floored for short typos on longer tokens).
    """

    def __init__(self, rules: VariationRuleSet) -> None:
        self.rules = rules

    def score(self, left: str, right: str) -> float:
        if left == right:
            return EXACT_SCORE
        if self.are_nicknames(left, right):
            return NICKNAME_SCORE
        if self.are_variations(left, right):
            return VARIATION_SCORE

        max_len = max(len(left), len(right))
        if max_len == 0:
            return 0.0
        distance = jellyfish.levenshtein_distance(left, right)
        similarity = 1 - distance / max_len

        if self.are_similar_but_distinct(left, right):
            return max(DISTINCT_PAIR_FLOOR, similarity * DISTINCT_PAIR_DAMPING)
        if distance <= TYPO_MAX_DISTANCE and max_len >= TYPO_MIN_LENGTH:
            return max(TYPO_FLOOR, similarity)
        return similarity

    def are_nicknames(self, left: str, right: str) -> bool:
        """True when one token is a nickname of the other or both share a formal name."""

        left_formal = self.rules.formal_name(left)
        right_formal = self.rules.formal_name(right)
        if left_formal is not None and left_formal == right:
            return True
        if right_formal is not None and right_formal == left:
            return True
        return left_formal is not None and left_formal == right_formal

    def are_similar_but_distinct(self, left: str, right: str) -> bool:
        return self.rules.is_distinct_pair(left, right)

    def are_variations(self, left: str, right: str) -> bool:
        """True for spelling variants covered by affix rules or transliteration groups."""

        if self.rules.is_excluded_variation(left, right):
            return False

        mc_mac = _mc_mac_equivalent(left, right)
        if mc_mac is not None:
            return mc_mac

        if left in _ARTICLES and right in _ARTICLES:
            return True

        if self.rules.in_same_variation_group(left, right):
            return True

        v_ff = _v_ff_equivalent(left, right)
        if v_ff is not None:
            return v_ff

        return _slavic_ending_equivalent(left, right)


def _mc_mac_equivalent(left: str, right: str) -> bool | None:
    """Compare the remainder after Mc/Mac; None when the prefix rule does not apply."""

    if (left.startswith("mc") and right.startswith("mac")) or (
        left.startswith("mac") and right.startswith("mc")
    ):
        return _after_first_c(left) == _after_first_c(right)
    return None


def _after_first_c(token: str) -> str:
    return token[token.index("c") + 1 :]


def _v_ff_equivalent(left: str, right: str) -> bool | None:
    """Petrov/Petroff style endings; None when neither token has the pattern."""

    if left.endswith("v") and right.endswith("ff"):
        return left[:-1] == right[:-2]
    if left.endswith("ff") and right.endswith("v"):
        return left[:-2] == right[:-1]
    return None


def _slavic_ending_equivalent(left: str, right: str) -> bool:
    for left_ending in _SLAVIC_ENDINGS:
        if not left.endswith(left_ending):
            continue
        left_base = left[: -len(left_ending)]
        if len(left_base) <= 2:
            continue
        for right_ending in _SLAVIC_ENDINGS:
            if right.endswith(right_ending) and right[: -len(right_ending)] == left_base:
                return True
    return False
