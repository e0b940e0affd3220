"""Human-readable explanations for verification decisions."""

from __future__ import annotations

from app.verification.scoring import ScoreBreakdown
from app.verification.similarity import edit_distance
from app.verification.token_scoring import TokenScorer


EXACT_MATCH_REASON = "Exact match after normalization (removing punctuation, case differences)"
ORDER_SWAP_REASON = "Names contain the same tokens but in different order, which changes identity"
TOO_DIFFERENT_REASON = "Names are too different to be considered a match"


def spelling_difference_factor(distance: int) -> str | None:
    """Bucket a whole-name edit distance into minor/moderate/significant."""

    if distance <= 0:
        return None
    if distance <= 3:
        return f"minor spelling differences ({distance} characters)"
    if distance <= 6:
        return f"moderate spelling differences ({distance} characters)"
    return f"significant spelling differences ({distance} characters)"


def build_reason(
    *,
    target: str,
    candidate: str,
    target_tokens: list[str],
    candidate_tokens: list[str],
    breakdown: ScoreBreakdown,
    match: bool,
    reported_confidence: int,
    token_scorer: TokenScorer,
) -> str:
    """Pick the explanation for a decision, highest-priority factor first."""

    if breakdown.exact_match:
        return EXACT_MATCH_REASON
    if breakdown.order_swap:
        return ORDER_SWAP_REASON

    factors: list[str] = []
    if any(
        token_scorer.are_nicknames(target_token, candidate_token)
        for target_token in target_tokens
        for candidate_token in candidate_tokens
    ):
        factors.append("nickname variation detected")

    spelling = spelling_difference_factor(edit_distance(target, candidate))
    if spelling is not None:
        factors.append(spelling)

    if any(
        token_scorer.are_variations(target_token, candidate_token)
        for target_token in target_tokens
        for candidate_token in candidate_tokens
    ):
        factors.append("transliteration or common variation detected")

    if not match:
        if not factors:
            return TOO_DIFFERENT_REASON
        return f"Despite {' and '.join(factors)}, the overall similarity is too low"
    if factors:
        return f"Match due to {' and '.join(factors)}"
    return f"Names are sufficiently similar (confidence: {reported_confidence}%)"
