"""Record listing and soft deletion endpoints."""
from __future__ import annotations

from datetime import date, datetime

from fastapi import APIRouter, Depends, HTTPException, Query, status

from credit_ledger.interfaces.http.deps import get_record_service
from credit_ledger.modules.records import (
    InvalidSortFieldError,
    PageInfo,
    RecordQuery,
    RecordService,
)
from credit_ledger.schemas import MessageResponse, RecordListResponse, RecordResponse

router = APIRouter()


def _day_of(value: date | datetime | None) -> date | None:
    """Timestamps filter by the whole day they fall on."""
    if isinstance(value, datetime):
        return value.date()
    return value


@router.get("", response_model=RecordListResponse, summary="List a user's records")
async def list_user_records(
    user_id: str | None = Query(None, alias="userId"),
    page: int = Query(1, ge=1),
    page_size: int = Query(10, alias="rowsPerPage", ge=1),
    start_date: date | datetime | None = Query(None, alias="startDate"),
    end_date: date | datetime | None = Query(None, alias="endDate"),
    operation_id: str | None = Query(None, alias="operationId"),
    sort_by: str = Query("created_at", alias="sortBy"),
    sort_order: str | None = Query(None, alias="sortOrder"),
    search: str | None = Query(None, alias="searchString"),
    service: RecordService = Depends(get_record_service),
) -> RecordListResponse:
    if not user_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="userId is required")

    order = "asc" if sort_order == "asc" else "desc"
    query = RecordQuery(
        user_id=user_id,
        limit=page_size,
        offset=(page - 1) * page_size,
        start_date=_day_of(start_date),
        end_date=_day_of(end_date),
        operation_type=operation_id,
        sort_by=sort_by or "created_at",
        sort_order=order,
        search=search,
    )
    try:
        result = await service.get_user_records(query)
    except InvalidSortFieldError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    info = PageInfo(page=page, page_size=page_size, total_count=result.total_count)
    return RecordListResponse(
        items=[RecordResponse.model_validate(record) for record in result.records],
        page=info.page,
        page_size=info.page_size,
        total_pages=info.total_pages,
        has_next_page=info.has_next_page,
        total_count=info.total_count,
        sort_by=query.sort_by,
        sort_order=query.sort_order,
    )


@router.delete("", response_model=MessageResponse, summary="Soft delete a record")
async def delete_record(
    user_id: str | None = Query(None, alias="userId"),
    record_id: str | None = Query(None, alias="recordId"),
    service: RecordService = Depends(get_record_service),
) -> MessageResponse:
    if not user_id or not record_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Both userId and recordId are required",
        )

    await service.soft_delete_record(record_id)
    return MessageResponse(message="Record soft deleted successfully")
