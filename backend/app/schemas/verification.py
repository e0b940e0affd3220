"""Name verification request/response schemas."""

from typing import Annotated, Literal

from pydantic import AfterValidator, BaseModel, Field


def _require_non_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


NameText = Annotated[str, Field(min_length=1), AfterValidator(_require_non_blank)]


class VerifyRequest(BaseModel):
    """Candidate name to check against the current target."""

    candidate: NameText


class CompareRequest(BaseModel):
    """Stateless comparison of two names."""

    target: NameText
    candidate: NameText


class TargetSetRequest(BaseModel):
    """Externally produced name to store as the current target."""

    name: NameText


class TargetRead(BaseModel):
    """Stored target record."""

    latest_name: str
    generated_at: str


class VerificationResultRead(BaseModel):
    """Decision for one candidate name."""

    match: bool
    confidence: int = Field(ge=0, le=100)
    reason: str
    target_name: str
    candidate_name: str


class VerificationErrorRead(BaseModel):
    """Returned instead of a result when verification cannot run."""

    error: Literal[True] = True
    message: str
