from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from pearl.api.dependencies import get_fingerprint_service
from pearl.domain.errors import FingerprintBuildError, InvalidBirthDataError
from pearl.services.fingerprint_service import FingerprintService


router = APIRouter()


# ─────────────────────────────────────────────
# Request Schema
# ─────────────────────────────────────────────

class FingerprintCreateRequest(BaseModel):
    name: str = Field(..., examples=["Test User"])
    birth_date: str = Field(..., examples=["1990-11-02"])
    birth_time: Optional[str] = Field(None, examples=["14:30"])
    latitude: Optional[float] = Field(None, examples=[40.7128])
    longitude: Optional[float] = Field(None, examples=[-74.006])
    timezone: Optional[str] = Field(None, examples=["America/New_York"])
    city: Optional[str] = Field(None, examples=["New York"])
    country_code: Optional[str] = Field(None, examples=["US"])


# ─────────────────────────────────────────────
# Response Schema (loose by design)
# ─────────────────────────────────────────────

class FingerprintCreateResponse(BaseModel):
    fingerprint: Dict[str, Any]
    context_block: str


# ─────────────────────────────────────────────
# Route
# ─────────────────────────────────────────────

@router.post(
    "/fingerprint",
    response_model=FingerprintCreateResponse,
    summary="Build a cosmic fingerprint from birth details",
)
async def create_fingerprint(
    payload: FingerprintCreateRequest,
    service: FingerprintService = Depends(get_fingerprint_service),
):
    """
    Build a fresh fingerprint; nothing is stored server-side.
    """
    try:
        return await service.create_fingerprint(payload.model_dump())
    except InvalidBirthDataError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except FingerprintBuildError as e:
        raise HTTPException(status_code=500, detail=str(e))
