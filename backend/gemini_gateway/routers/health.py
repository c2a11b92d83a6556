from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from gemini_gateway.api.deps import get_settings
from gemini_gateway.core.config import Settings
from gemini_gateway.schemas.generation import HealthResponse

router = APIRouter(tags=["health"])


def _utc_timestamp() -> str:
    # e.g. 2024-05-01T12:00:00.123Z
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.get("/health", response_model=HealthResponse)
def health(settings: Settings = Depends(get_settings)):
    return HealthResponse(timestamp=_utc_timestamp(), service=settings.SERVICE_NAME)
