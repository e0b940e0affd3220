"""Confidence aggregation over token, phonetic and string signals."""

from __future__ import annotations

from dataclasses import dataclass

from app.verification.guards import is_order_swap
from app.verification.similarity import phonetic_similarity, string_similarity
from app.verification.token_scoring import TokenScorer


EXACT_CONFIDENCE = 1.0
ORDER_SWAP_CONFIDENCE = 0.3
NICKNAME_BOOST = 0.2


@dataclass(slots=True)
class ScoreBreakdown:
    """Signals behind one confidence value, reused by logging and explanations."""

    confidence: float
    exact_match: bool = False
    order_swap: bool = False
    token_score: float | None = None
    phonetic_score: float | None = None
    string_score: float | None = None
    nickname_boost: float = 0.0


class ConfidenceAggregator:
    """Blend per-signal scores into a single 0-1 confidence."""

    def __init__(self, token_scorer: TokenScorer) -> None:
        self.token_scorer = token_scorer

    def score(
        self,
        target: str,
        candidate: str,
        target_tokens: list[str],
        candidate_tokens: list[str],
    ) -> ScoreBreakdown:
        """Score two normalized names and their tokens."""

        if target == candidate:
            return ScoreBreakdown(confidence=EXACT_CONFIDENCE, exact_match=True)
        if is_order_swap(target_tokens, candidate_tokens):
            return ScoreBreakdown(confidence=ORDER_SWAP_CONFIDENCE, order_swap=True)

        token_score = self.token_set_similarity(target_tokens, candidate_tokens)
        phonetic_score = phonetic_similarity(target, candidate)
        string_score = string_similarity(target, candidate)
        boost = NICKNAME_BOOST if self.has_nickname_match(target_tokens, candidate_tokens) else 0.0

        blended = (token_score + phonetic_score + string_score) / 3 + boost
        return ScoreBreakdown(
            confidence=min(1.0, blended),
            token_score=token_score,
            phonetic_score=phonetic_score,
            string_score=string_score,
            nickname_boost=boost,
        )

    def token_set_similarity(self, target_tokens: list[str], candidate_tokens: list[str]) -> float:
        """Greedy best-match per target token, averaged over the longer token list.

        Not an assignment: one strong candidate token may back several
        target tokens when a name repeats a part.
        """

        total_tokens = max(len(target_tokens), len(candidate_tokens))
        if total_tokens == 0:
            return 0.0
        matched = 0.0
        for target_token in target_tokens:
            matched += max(
                (self.token_scorer.score(target_token, candidate_token) for candidate_token in candidate_tokens),
                default=0.0,
            )
        return matched / total_tokens

    def has_nickname_match(self, target_tokens: list[str], candidate_tokens: list[str]) -> bool:
        return any(
            self.token_scorer.are_nicknames(target_token, candidate_token)
            for target_token in target_tokens
            for candidate_token in candidate_tokens
        )
