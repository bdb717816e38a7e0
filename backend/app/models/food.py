from decimal import Decimal

from sqlmodel import Field, SQLModel

__all__ = [
    "Food",
]


class Food(SQLModel, table=True):
    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=100)
    price: Decimal = Field(max_digits=10, decimal_places=2)
    category: str | None = Field(default=None, max_length=50)
    is_available: bool = Field(default=True)
