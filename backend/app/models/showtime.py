from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import DateTime
from sqlmodel import Field, Relationship, SQLModel

from app.core.enums import ShowtimeStatus
from app.models.utils import enum_column

if TYPE_CHECKING:
    from .cinema_room import CinemaRoom
    from .movie import Movie

__all__ = [
    "Showtime",
]


class Showtime(SQLModel, table=True):
    id: int | None = Field(default=None, primary_key=True)
    movie_id: int = Field(foreign_key="movie.id")
    cinema_room_id: int = Field(foreign_key="cinemaroom.id")
    start_time: datetime = Field(index=True, sa_type=DateTime)
    end_time: datetime = Field(sa_type=DateTime)
    # Flat ticket price for every seat of this showtime
    price: Decimal = Field(default=Decimal(0), max_digits=10, decimal_places=2)
    status: ShowtimeStatus = Field(
        default=ShowtimeStatus.SCHEDULED, sa_column=enum_column(ShowtimeStatus)
    )

    movie: "Movie" = Relationship(sa_relationship_kwargs={"lazy": "joined"})
    cinema_room: "CinemaRoom" = Relationship(sa_relationship_kwargs={"lazy": "joined"})
