"""Operational endpoints."""
import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from credit_ledger.infrastructure.database import Database, bootstrap_schema
from credit_ledger.interfaces.http.deps import get_database
from credit_ledger.schemas import BootstrapResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/bootstrap", response_model=BootstrapResponse, summary="Create missing ledger tables")
async def bootstrap_database(database: Database = Depends(get_database)):
    try:
        report = await bootstrap_schema(database)
    except Exception as exc:
        logger.exception("Database initialization error")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Failed to initialize database", "error": str(exc)},
        )

    return BootstrapResponse(
        existing_tables=report.existing_tables,
        created_tables=report.created_tables,
        summary=report.summary,
    )
