from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime
from sqlmodel import Field, Relationship, SQLModel

from app.utils import now_local_naive

if TYPE_CHECKING:
    from .user import User

__all__ = [
    "CustomerBase",
    "Customer",
]


class CustomerBase(SQLModel):
    full_name: str = Field(max_length=100)
    phone_number: str | None = Field(default=None, index=True, max_length=20)


class Customer(CustomerBase, table=True):
    id: int | None = Field(default=None, primary_key=True)
    # Walk-in customers registered at the counter have no account
    account_id: int | None = Field(default=None, foreign_key="user.id", unique=True)
    created_at: datetime = Field(default_factory=now_local_naive, sa_type=DateTime)

    account: Optional["User"] = Relationship(back_populates="customer")
