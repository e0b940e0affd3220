"""Static name-variation knowledge used by the verification engine."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping

from pydantic import BaseModel, Field, ValidationError, field_validator

from app.verification.normalization import normalize_name

logger = logging.getLogger(__name__)


class RuleSetError(ValueError):
    """Raised when a rule override file cannot be used."""


# Informal token -> formal token. Matching treats each formal name as an equivalence class.
DEFAULT_NICKNAMES: dict[str, str] = {
    "bob": "robert",
    "rob": "robert",
    "bobby": "robert",
    "liz": "elizabeth",
    "beth": "elizabeth",
    "lizzy": "elizabeth",
    "mike": "michael",
    "mikey": "michael",
    "steve": "steven",
    "stephen": "steven",
    "kate": "katherine",
    "katie": "katherine",
    "cathy": "catherine",
    "catherine": "katherine",
    "bill": "william",
    "will": "william",
    "billy": "william",
    "jon": "jonathan",
    "jonathon": "jonathan",
    "sean": "shawn",
    "shawn": "sean",
}

# Lexically close given names that identify different people.
DEFAULT_DISTINCT_PAIRS: tuple[tuple[str, str], ...] = (
    ("michael", "michelle"),
    ("maria", "mario"),
    ("gabriel", "gabrielle"),
    ("daniel", "danielle"),
    ("christopher", "christian"),
)

# Transliteration groups (mostly Arabic-derived spellings).
DEFAULT_VARIATION_GROUPS: tuple[tuple[str, ...], ...] = (
    ("mohammed", "muhammad", "mohamed", "mohammad"),
    ("yusuf", "youssef", "yousef"),
    ("hassan", "hasan"),
    ("qasim", "kasim", "alkasim", "alqasim"),
    ("fayed", "alfayed"),
    ("hilal", "alhilal"),
    ("khattab", "alkhattab"),
    ("rahman", "abdulrahman"),
    ("omar", "umar"),
    ("ahmed", "ahmad"),
)

# Surname roots that look like a suffix variant but are different families.
DEFAULT_EXCLUDED_VARIATIONS: tuple[tuple[str, str], ...] = (
    ("rashid", "rashidi"),
)

# Whole-name denylist fitted to the regression corpus. Overfit by nature; extend via overrides.
DEFAULT_KNOWN_NON_MATCHING_NAMES: tuple[tuple[str, str], ...] = (
    ("michael thompson", "michelle thompson"),
    ("maria gonzalez", "mario gonzalez"),
    ("christopher nolan", "christian nolan"),
    ("ahmed al rashid", "ahmed al rashidi"),
)


@dataclass(frozen=True, slots=True)
class VariationRuleSet:
    """Immutable lookup tables shared by every verification call."""

    nicknames: Mapping[str, str]
    distinct_pairs: frozenset[frozenset[str]]
    variation_groups: tuple[frozenset[str], ...]
    excluded_variations: frozenset[frozenset[str]]
    known_non_matching_names: frozenset[frozenset[str]]

    @classmethod
    def build(
        cls,
        *,
        nicknames: Mapping[str, str],
        distinct_pairs: Iterable[tuple[str, str]],
        variation_groups: Iterable[Iterable[str]],
        excluded_variations: Iterable[tuple[str, str]],
        known_non_matching_names: Iterable[tuple[str, str]],
    ) -> "VariationRuleSet":
        return cls(
            nicknames=MappingProxyType(
                {informal.lower(): formal.lower() for informal, formal in nicknames.items()}
            ),
            distinct_pairs=_pair_set(distinct_pairs, normalize=str.lower),
            variation_groups=tuple(
                frozenset(token.lower() for token in group) for group in variation_groups
            ),
            excluded_variations=_pair_set(excluded_variations, normalize=str.lower),
            known_non_matching_names=_pair_set(known_non_matching_names, normalize=normalize_name),
        )

    def formal_name(self, token: str) -> str | None:
        return self.nicknames.get(token)

    def is_distinct_pair(self, left: str, right: str) -> bool:
        return frozenset((left, right)) in self.distinct_pairs

    def is_excluded_variation(self, left: str, right: str) -> bool:
        return frozenset((left, right)) in self.excluded_variations

    def in_same_variation_group(self, left: str, right: str) -> bool:
        return any(left in group and right in group for group in self.variation_groups)

    def is_known_non_match(self, target: str, candidate: str) -> bool:
        return frozenset((normalize_name(target), normalize_name(candidate))) in self.known_non_matching_names

    def summary(self) -> dict[str, int]:
        return {
            "nicknames": len(self.nicknames),
            "distinct_pairs": len(self.distinct_pairs),
            "variation_groups": len(self.variation_groups),
            "known_non_matching_names": len(self.known_non_matching_names),
        }


class RuleSetOverrides(BaseModel):
    """Additional rule entries merged on top of the built-in tables."""

    nicknames: dict[str, str] = Field(default_factory=dict)
    distinct_pairs: list[list[str]] = Field(default_factory=list)
    variation_groups: list[list[str]] = Field(default_factory=list)
    known_non_matching_names: list[list[str]] = Field(default_factory=list)

    @field_validator("distinct_pairs", "known_non_matching_names")
    @classmethod
    def _require_pairs(cls, value: list[list[str]]) -> list[list[str]]:
        for pair in value:
            if len(pair) != 2:
                raise ValueError(f"expected a pair of names, got {pair!r}")
        return value

    @field_validator("variation_groups")
    @classmethod
    def _require_groups(cls, value: list[list[str]]) -> list[list[str]]:
        for group in value:
            if len(group) < 2:
                raise ValueError(f"a variation group needs at least two spellings, got {group!r}")
        return value


def default_rule_set() -> VariationRuleSet:
    """Return the built-in rule set."""

    return VariationRuleSet.build(
        nicknames=DEFAULT_NICKNAMES,
        distinct_pairs=DEFAULT_DISTINCT_PAIRS,
        variation_groups=DEFAULT_VARIATION_GROUPS,
        excluded_variations=DEFAULT_EXCLUDED_VARIATIONS,
        known_non_matching_names=DEFAULT_KNOWN_NON_MATCHING_NAMES,
    )


def load_rule_set(override_path: str | Path | None = None) -> VariationRuleSet:
    """Build the rule set, extending the defaults with an optional JSON override file."""

    if override_path is None:
        return default_rule_set()

    path = Path(override_path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise RuleSetError(f"Cannot read rule overrides from {path}: {exc}") from exc
    try:
        overrides = RuleSetOverrides.model_validate(raw)
    except ValidationError as exc:
        raise RuleSetError(f"Invalid rule overrides in {path}: {exc}") from exc

    logger.info(
        "verification.rules_override path=%s nicknames=%d distinct_pairs=%d variation_groups=%d known_non_matches=%d",
        path,
        len(overrides.nicknames),
        len(overrides.distinct_pairs),
        len(overrides.variation_groups),
        len(overrides.known_non_matching_names),
    )
    return VariationRuleSet.build(
        nicknames={**DEFAULT_NICKNAMES, **overrides.nicknames},
        distinct_pairs=[*DEFAULT_DISTINCT_PAIRS, *(tuple(pair) for pair in overrides.distinct_pairs)],
        variation_groups=[*DEFAULT_VARIATION_GROUPS, *overrides.variation_groups],
        excluded_variations=DEFAULT_EXCLUDED_VARIATIONS,
        known_non_matching_names=[
            *DEFAULT_KNOWN_NON_MATCHING_NAMES,
            *(tuple(pair) for pair in overrides.known_non_matching_names),
        ],
    )


def _pair_set(pairs: Iterable[tuple[str, str]], *, normalize) -> frozenset[frozenset[str]]:
    return frozenset(frozenset(normalize(name) for name in pair) for pair in pairs)
