"""Health check endpoint with database connectivity check."""

from fastapi import APIRouter

from app.api.deps import DbSession
from app.core.config import settings
from app.core.database import check_db_connected
from app.schemas.common import Envelope
from app.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=Envelope[HealthResponse])
def get_health(db: DbSession) -> Envelope[HealthResponse]:
    """
    Return service health status and database connectivity.
    Used by load balancers and monitoring; no authentication required.
    """
    db_status = "connected" if check_db_connected(db) else "disconnected"
    return Envelope[HealthResponse](
        data=HealthResponse(environment=settings.APP_ENV, database=db_status),
    )
