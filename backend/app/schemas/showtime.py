from decimal import Decimal

from pydantic import BaseModel

from app.core.enums import SeatStatus

__all__ = [
    "RoomPublic",
    "SeatWithStatus",
    "SeatMap",
]


class RoomPublic(BaseModel):
    id: int
    name: str
    rows: int
    columns: int


class SeatWithStatus(BaseModel):
    id: int
    name: str
    row: str
    column: int
    type: str
    surcharge: Decimal
    status: SeatStatus


class SeatMap(BaseModel):
    room: RoomPublic
    seats: list[SeatWithStatus]
