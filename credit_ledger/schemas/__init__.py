"""Pydantic schemas used across the HTTP surface.

Request and response bodies use camelCase on the wire; record rows keep the
column names they are stored under.
"""
from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, computed_field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageResponse(BaseModel):
    message: str


class OperationParamsPayload(BaseModel):
    num1: Union[int, float] = 0
    num2: Union[int, float] = 0


class NewOperationRequest(CamelModel):
    user_id: Optional[str] = None
    operation_type: Optional[str] = None
    operation_params: OperationParamsPayload = Field(default_factory=OperationParamsPayload)


class NewOperationResponse(CamelModel):
    result: str
    new_balance: int
    record_id: str


class RecordResponse(BaseModel):
    id: str
    user_id: str
    amount: int
    user_balance: int
    operation_id: str
    operation_type: str
    operation_response: Optional[str] = None
    created_at: datetime
    deleted: bool = False

    model_config = ConfigDict(from_attributes=True)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def date(self) -> datetime:
        return self.created_at


class RecordListResponse(CamelModel):
    items: list[RecordResponse]
    page: int
    page_size: int
    total_pages: int
    has_next_page: bool
    total_count: int
    sort_by: str
    sort_order: str


class UpdateBalanceRequest(CamelModel):
    user_id: StrictStr = Field(..., min_length=1)
    amount: StrictInt = Field(..., ge=0)


class UpdateBalanceResponse(CamelModel):
    message: str
    new_balance: int


class BootstrapResponse(CamelModel):
    existing_tables: list[str]
    created_tables: list[str]
    summary: str
