from enum import Enum

from sqlalchemy import Column
from sqlalchemy import Enum as SAEnum


def enum_column(enum_cls: type[Enum], **kwargs) -> Column:
    """
    Non-native enum column that stores the enum *values* ("pending"),
    not the member names ("PENDING").
    """
    return Column(
        SAEnum(
            enum_cls,
            native_enum=False,
            length=32,
            values_callable=lambda members: [member.value for member in members],
        ),
        nullable=False,
        **kwargs,
    )
