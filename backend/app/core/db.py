from logging import getLogger

from sqlmodel import Session, create_engine, select

from app.core.config import settings
from app.core.enums import Role
from app.core.security import get_password_hash
from app.models.user import User

logger = getLogger(__name__)

engine = create_engine(settings.SQLALCHEMY_DATABASE_URI, pool_pre_ping=True)


def init_db(session: Session) -> None:
    user = session.exec(
        select(User).where(User.phone_number == settings.FIRST_SUPERUSER_PHONE)
    ).first()
    if not user:
        user = User(
            phone_number=settings.FIRST_SUPERUSER_PHONE,
            hashed_password=get_password_hash(settings.FIRST_SUPERUSER_PASSWORD),
            role=Role.ADMIN,
        )
        session.add(user)
        session.commit()
        logger.info("Created first admin account %s", user.phone_number)
