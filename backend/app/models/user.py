from datetime import datetime
from typing import TYPE_CHECKING, Optional

from pydantic import EmailStr
from sqlalchemy import DateTime
from sqlmodel import Field, Relationship, SQLModel

from app.core.enums import Role
from app.models.utils import enum_column
from app.utils import now_local_naive

if TYPE_CHECKING:
    from .customer import Customer

__all__ = [
    "UserBase",
    "User",
]


# Shared properties
class UserBase(SQLModel):
    phone_number: str = Field(unique=True, index=True, max_length=15)
    email: EmailStr | None = Field(default=None, unique=True, max_length=100)
    is_active: bool = Field(default=True)


# Login account for admins, staff and customers
class User(UserBase, table=True):
    id: int | None = Field(default=None, primary_key=True)
    hashed_password: str
    role: Role = Field(default=Role.CUSTOMER, sa_column=enum_column(Role))
    created_at: datetime = Field(default_factory=now_local_naive, sa_type=DateTime)

    customer: Optional["Customer"] = Relationship(
        back_populates="account",
        sa_relationship_kwargs={"uselist": False},
    )
