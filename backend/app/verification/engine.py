"""Deterministic name verification engine with explainable decisions."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from app.verification.explain import build_reason
from app.verification.guards import DistinctPairGuard
from app.verification.normalization import normalize_name, tokenize_name
from app.verification.rules import VariationRuleSet, default_rule_set
from app.verification.scoring import ConfidenceAggregator, ScoreBreakdown
from app.verification.token_scoring import TokenScorer

logger = logging.getLogger(__name__)

DEFAULT_MATCH_THRESHOLD = 0.75
DEFAULT_NON_MATCH_CAP = 0.74


@dataclass(slots=True)
class VerificationOutcome:
    """Decision for one (target, candidate) pair."""

    match: bool
    confidence: int
    reason: str
    target_name: str
    candidate_name: str
    breakdown: ScoreBreakdown
    forced_non_match: bool = False

    def as_result(self) -> dict[str, object]:
        """Public result fields, without the internal signal breakdown."""

        return {
            "match": self.match,
            "confidence": self.confidence,
            "reason": self.reason,
            "target_name": self.target_name,
            "candidate_name": self.candidate_name,
        }


class VerificationEngine:
    """Compare a candidate name against a target name.

    Stateless per call: every decision is a pure function of the two input
    strings and the rule set the engine was built with.
    """

    def __init__(
        self,
        rules: VariationRuleSet | None = None,
        *,
        match_threshold: float = DEFAULT_MATCH_THRESHOLD,
        non_match_cap: float = DEFAULT_NON_MATCH_CAP,
    ) -> None:
        self.rules = rules if rules is not None else default_rule_set()
        self.match_threshold = match_threshold
        self.token_scorer = TokenScorer(self.rules)
        self.aggregator = ConfidenceAggregator(self.token_scorer)
        self.guard = DistinctPairGuard(self.rules, cap=non_match_cap)
        logger.debug(
            "verification.engine_ready threshold=%.2f cap=%.2f rules=%s",
            match_threshold,
            non_match_cap,
            self.rules.summary(),
        )

    def verify(self, target: str, candidate: str) -> VerificationOutcome:
        """Decide whether `candidate` plausibly names the same person as `target`."""

        target_normalized = normalize_name(target)
        candidate_normalized = normalize_name(candidate)
        target_tokens = tokenize_name(target_normalized)
        candidate_tokens = tokenize_name(candidate_normalized)

        breakdown = self.aggregator.score(
            target_normalized,
            candidate_normalized,
            target_tokens,
            candidate_tokens,
        )

        forced = False
        if not breakdown.exact_match:
            forced = self.guard.should_force_non_match(target, candidate, target_tokens, candidate_tokens)
            breakdown.confidence = self.guard.apply(breakdown.confidence, forced)

        match = breakdown.confidence >= self.match_threshold
        confidence = to_percent(breakdown.confidence)
        reason = build_reason(
            target=target_normalized,
            candidate=candidate_normalized,
            target_tokens=target_tokens,
            candidate_tokens=candidate_tokens,
            breakdown=breakdown,
            match=match,
            reported_confidence=confidence,
            token_scorer=self.token_scorer,
        )
        logger.debug(
            (
                "verification.signals target=%r candidate=%r token=%s phonetic=%s string=%s "
                "boost=%.2f order_swap=%s forced_non_match=%s confidence=%.4f"
            ),
            target_normalized,
            candidate_normalized,
            breakdown.token_score,
            breakdown.phonetic_score,
            breakdown.string_score,
            breakdown.nickname_boost,
            breakdown.order_swap,
            forced,
            breakdown.confidence,
        )
        return VerificationOutcome(
            match=match,
            confidence=confidence,
            reason=reason,
            target_name=target,
            candidate_name=candidate,
            breakdown=breakdown,
            forced_non_match=forced,
        )


def to_percent(confidence: float) -> int:
    """Report a 0-1 confidence on the 0-100 scale, rounding halves up."""

    return int(math.floor(confidence * 100 + 0.5))
