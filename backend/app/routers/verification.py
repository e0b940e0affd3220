"""Name verification and target routes."""

from fastapi import APIRouter, Depends, HTTPException, Response

from app.schemas.common import ApiResponse
from app.schemas.verification import (
    CompareRequest,
    TargetRead,
    TargetSetRequest,
    VerificationErrorRead,
    VerificationResultRead,
    VerifyRequest,
)
from app.services.target_store import TargetNameStore, TargetStoreError
from app.services.verification import (
    NoTargetConfiguredError,
    compare_names,
    get_target_store,
    get_verification_engine,
    verify_candidate,
)
from app.verification.engine import VerificationEngine


router = APIRouter()


@router.post("/verify", response_model=ApiResponse[VerificationResultRead])
def verify_name(
    payload: VerifyRequest,
    store: TargetNameStore = Depends(get_target_store),
    engine: VerificationEngine = Depends(get_verification_engine),
) -> ApiResponse[VerificationResultRead]:
    """Verify a candidate name against the current target."""

    try:
        result = verify_candidate(store, payload.candidate, engine)
    except NoTargetConfiguredError as exc:
        raise HTTPException(
            status_code=409,
            detail=VerificationErrorRead(message=str(exc)).model_dump(),
        ) from exc
    except TargetStoreError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    return ApiResponse(data=result)


@router.post("/compare", response_model=ApiResponse[VerificationResultRead])
def compare(
    payload: CompareRequest,
    engine: VerificationEngine = Depends(get_verification_engine),
) -> ApiResponse[VerificationResultRead]:
    """Compare two names without reading or writing the target."""

    return ApiResponse(data=compare_names(payload.target, payload.candidate, engine))


@router.get("/target", response_model=ApiResponse[TargetRead | None])
def get_target(store: TargetNameStore = Depends(get_target_store)) -> ApiResponse[TargetRead | None]:
    """Return the current target record, if any."""

    try:
        record = store.get_record()
    except TargetStoreError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    if record is None:
        return ApiResponse(data=None)
    return ApiResponse(data=TargetRead(latest_name=record.latest_name, generated_at=record.generated_at))


@router.put("/target", response_model=ApiResponse[TargetRead])
def set_target(
    payload: TargetSetRequest,
    store: TargetNameStore = Depends(get_target_store),
) -> ApiResponse[TargetRead]:
    """Store an externally produced name as the current target."""

    record = store.save(payload.name)
    return ApiResponse(data=TargetRead(latest_name=record.latest_name, generated_at=record.generated_at))


@router.delete("/target", status_code=204)
def clear_target(store: TargetNameStore = Depends(get_target_store)) -> Response:
    """Forget the current target."""

    store.clear()
    return Response(status_code=204)
