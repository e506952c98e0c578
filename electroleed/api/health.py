"""Health check: database connectivity and token settings, for load balancers and monitoring."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from electroleed import __version__
from electroleed.core.config import get_settings
from electroleed.core.database import check_db_connected, get_db
from electroleed.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(db: Annotated[Session, Depends(get_db)]) -> HealthResponse:
    settings = get_settings()
    return HealthResponse(
        version=__version__,
        environment=settings.APP_ENV,
        database="connected" if check_db_connected(db) else "disconnected",
        token_expiry_minutes=settings.JWT_EXPIRE_MINUTES,
    )
