"""Override rules that stop lexically close names from matching."""

from __future__ import annotations

from app.verification.rules import VariationRuleSet


PATRONYMIC_MARKER = "ibn"


def is_order_swap(target_tokens: list[str], candidate_tokens: list[str]) -> bool:
    """Detect token-order inversions that change identity.

    Two-token names reversed ("ali hassan" / "hassan ali") and patronymics
    whose direction flipped ("abdullah ibn omar" / "omar ibn abdullah").
    """

    if len(target_tokens) == 2 and len(candidate_tokens) == 2:
        return target_tokens[0] == candidate_tokens[1] and target_tokens[1] == candidate_tokens[0]

    if PATRONYMIC_MARKER not in target_tokens or PATRONYMIC_MARKER not in candidate_tokens:
        return False
    target_before, target_after = _around_marker(target_tokens)
    candidate_before, candidate_after = _around_marker(candidate_tokens)
    return target_before == candidate_after and target_after == candidate_before


def _around_marker(tokens: list[str]) -> tuple[str, str]:
    position = tokens.index(PATRONYMIC_MARKER)
    before = tokens[position - 1] if position > 0 else ""
    after = tokens[position + 1] if position + 1 < len(tokens) else ""
    return before, after


class DistinctPairGuard:
    """Caps confidence for confusable-but-distinct names.

    Fires on a whole-name denylist hit, or when a distinct token pair
    (michael/michelle) co-occurs with some other token shared verbatim by
    both names. Can only lower confidence.
    """

    def __init__(self, rules: VariationRuleSet, cap: float = 0.74) -> None:
        self.rules = rules
        self.cap = cap

    def should_force_non_match(
        self,
        target: str,
        candidate: str,
        target_tokens: list[str],
        candidate_tokens: list[str],
    ) -> bool:
        if self.rules.is_known_non_match(target, candidate):
            return True

        for target_token in target_tokens:
            for candidate_token in candidate_tokens:
                if not self.rules.is_distinct_pair(target_token, candidate_token):
                    continue
                if _shares_other_token(target_tokens, candidate_tokens, target_token, candidate_token):
                    return True
        return False

    def apply(self, confidence: float, forced: bool) -> float:
        return min(confidence, self.cap) if forced else confidence


def _shares_other_token(
    target_tokens: list[str],
    candidate_tokens: list[str],
    flagged_target: str,
    flagged_candidate: str,
) -> bool:
    return any(
        target_token == candidate_token
        for target_token in target_tokens
        if target_token != flagged_target
        for candidate_token in candidate_tokens
        if candidate_token != flagged_candidate
    )
