from typing import Generic, Literal, TypeVar

from pydantic import BaseModel

__all__ = [
    "SuccessResponse",
    "PageMetadata",
]

T = TypeVar("T")


class SuccessResponse(BaseModel, Generic[T]):
    status: Literal["success"] = "success"
    data: T


class PageMetadata(BaseModel):
    total_records: int
    first_page: int
    last_page: int
    page: int
    limit: int
