from sqlmodel import Field, SQLModel

__all__ = [
    "Movie",
]


class Movie(SQLModel, table=True):
    id: int | None = Field(default=None, primary_key=True)
    title: str = Field(max_length=255)
    duration_min: int | None = None
    age_rating: str | None = Field(default=None, max_length=20)
