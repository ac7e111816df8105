from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession

from crm_core.depends import get_session

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("")
async def health() -> dict:
    """Liveness check, no authentication required"""
    return {"status": "ok"}


@router.get("/ready")
async def ready(session: AsyncSession = Depends(get_session)) -> dict:
    """
    Readiness check

    Raises:
        HTTPException 503: database unavailable
    """
    try:
        await session.execute(text("SELECT 1"))
    except SQLAlchemyError:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service not ready: database unavailable",
        )
    return {"status": "ok", "database": True}
