"""Whole-name similarity signals: phonetic code, character overlap, edit distance."""

from __future__ import annotations

from difflib import SequenceMatcher

import jellyfish


PHONETIC_EXACT_SCORE = 0.9
PHONETIC_PREFIX_SCORE = 0.7
PHONETIC_MISMATCH_SCORE = 0.3


def phonetic_code(name: str) -> str:
    """Soundex code of a whole name; separators are skipped so "al hilal" codes like "alhilal".

    A non-initial H or W separates consonant codes the way a vowel does, so
    "ashcroft" codes as A226 rather than A261.
    """

    letters = "".join(char for char in name.lower() if char.isalpha())
    if not letters:
        return ""
    return jellyfish.soundex(letters[0] + letters[1:].replace("h", "a").replace("w", "a"))


def phonetic_similarity(left: str, right: str) -> float:
    """Coarse phonetic closeness of two normalized names."""

    left_code = phonetic_code(left)
    right_code = phonetic_code(right)
    if left_code == right_code:
        return PHONETIC_EXACT_SCORE
    if left_code[:3] == right_code[:3]:
        return PHONETIC_PREFIX_SCORE
    return PHONETIC_MISMATCH_SCORE


def string_similarity(left: str, right: str) -> float:
    """Character overlap ratio in [0, 1]: twice the matched characters over the combined length."""

    if not left and not right:
        return 0.0
    return SequenceMatcher(a=left, b=right, autojunk=False).ratio()


def edit_distance(left: str, right: str) -> int:
    return jellyfish.levenshtein_distance(left, right)
