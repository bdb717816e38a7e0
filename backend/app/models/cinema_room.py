from sqlmodel import Field, SQLModel

__all__ = [
    "CinemaRoom",
]


class CinemaRoom(SQLModel, table=True):
    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=50)
    capacity: int
    rows: int
    columns: int
