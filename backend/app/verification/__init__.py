"""Name verification package."""

from app.verification.engine import (
    DEFAULT_MATCH_THRESHOLD,
    VerificationEngine,
    VerificationOutcome,
)
from app.verification.normalization import normalize_name, tokenize_name
from app.verification.rules import RuleSetError, VariationRuleSet, default_rule_set, load_rule_set

__all__ = [
    "DEFAULT_MATCH_THRESHOLD",
    "RuleSetError",
    "VariationRuleSet",
    "VerificationEngine",
    "VerificationOutcome",
    "default_rule_set",
    "load_rule_set",
    "normalize_name",
    "tokenize_name",
]
