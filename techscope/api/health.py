"""Health endpoint: database reachability and signing-key state."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from techscope import __version__
from techscope.core.config import Settings, get_settings
from techscope.core.database import check_db_connected, get_db
from techscope.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> HealthResponse:
    return HealthResponse(
        version=__version__,
        environment=settings.APP_ENV,
        database="connected" if check_db_connected(db) else "disconnected",
        signing_key="placeholder" if settings.uses_default_jwt_key() else "configured",
    )
