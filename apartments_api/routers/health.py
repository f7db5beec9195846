import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession

from apartments_api.database import get_session, ping

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check(session: AsyncSession = Depends(get_session)):
    try:
        await ping(session)
    except (SQLAlchemyError, OSError) as e:
        logger.warning(f"Health check failed: {e}")
        return {
            "status": "unhealthy",
            "database": "disconnected",
            "error": str(e),
        }
    return {
        "status": "healthy",
        "database": "connected",
    }
