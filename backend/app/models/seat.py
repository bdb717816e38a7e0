from decimal import Decimal

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, Relationship, SQLModel

__all__ = [
    "SeatType",
    "Seat",
]


class SeatType(SQLModel, table=True):
    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=50)
    # Surcharge shown on the seat map; tickets are priced from the showtime
    price: Decimal = Field(default=Decimal(0), max_digits=10, decimal_places=2)


class Seat(SQLModel, table=True):
    __table_args__ = (
        UniqueConstraint("cinema_room_id", "name", name="uq_seat_room_name"),
    )
    id: int | None = Field(default=None, primary_key=True)
    cinema_room_id: int = Field(foreign_key="cinemaroom.id", index=True)
    seat_type_id: int = Field(foreign_key="seattype.id")
    name: str = Field(max_length=10)
    row: str = Field(max_length=5)
    column: int

    seat_type: SeatType = Relationship(sa_relationship_kwargs={"lazy": "joined"})
