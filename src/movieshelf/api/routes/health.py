"""Health check endpoint."""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from movieshelf.database import get_db

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/health", tags=["health"], response_model=None)
async def health_check(db: AsyncSession = Depends(get_db)) -> dict[str, str] | JSONResponse:
    """
    Health check endpoint.

    Runs a trivial query so a lost database connection shows up here
    rather than as 500s on the movie endpoints.

    Returns:
        {"status": "ok"}, or 503 with {"status": "unavailable"} if the
        database cannot be reached
    """
    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Health check database query failed: {e}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unavailable"},
        )
    return {"status": "ok"}
