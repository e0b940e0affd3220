"""Verification against the current target name."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Protocol

from app.config import get_settings
from app.schemas.verification import VerificationErrorRead, VerificationResultRead
from app.services.target_store import TargetNameStore
from app.verification.engine import VerificationEngine
from app.verification.rules import load_rule_set

logger = logging.getLogger(__name__)

NO_TARGET_MESSAGE = "No target name has been generated yet"


class NoTargetConfiguredError(RuntimeError):
    """Raised when verification is requested before any target name is stored."""

    def __init__(self, message: str = NO_TARGET_MESSAGE) -> None:
        super().__init__(message)


class TargetSource(Protocol):
    """Read side of the current-target register."""

    def get_latest(self) -> str | None:
        """Return the stored target name, if any."""


@lru_cache
def get_verification_engine() -> VerificationEngine:
    """Return the process-wide engine built from settings."""

    settings = get_settings()
    engine = VerificationEngine(
        load_rule_set(settings.rules_override_path),
        match_threshold=settings.match_threshold,
        non_match_cap=settings.known_non_match_cap,
    )
    logger.info(
        "verification.engine_loaded threshold=%.2f rules=%s",
        settings.match_threshold,
        engine.rules.summary(),
    )
    return engine


def get_target_store() -> TargetNameStore:
    """Return the store configured by settings."""

    return TargetNameStore(get_settings().storage_path)


def verify_candidate(
    source: TargetSource,
    candidate: str,
    engine: VerificationEngine | None = None,
) -> VerificationResultRead:
    """Verify `candidate` against the stored target; raises when no target is stored."""

    target = source.get_latest()
    if target is None:
        raise NoTargetConfiguredError()

    outcome = (engine or get_verification_engine()).verify(target, candidate)
    logger.info(
        "verification.decision match=%s confidence=%d forced_non_match=%s",
        outcome.match,
        outcome.confidence,
        outcome.forced_non_match,
    )
    return VerificationResultRead(**outcome.as_result())


def verify_candidate_result(
    source: TargetSource,
    candidate: str,
    engine: VerificationEngine | None = None,
) -> VerificationResultRead | VerificationErrorRead:
    """Same as `verify_candidate`, but reports a missing target as an error payload."""

    try:
        return verify_candidate(source, candidate, engine)
    except NoTargetConfiguredError as exc:
        return VerificationErrorRead(message=str(exc))


def compare_names(
    target: str,
    candidate: str,
    engine: VerificationEngine | None = None,
) -> VerificationResultRead:
    """Stateless comparison that does not touch the target store."""

    outcome = (engine or get_verification_engine()).verify(target, candidate)
    return VerificationResultRead(**outcome.as_result())
