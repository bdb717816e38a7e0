from sqlmodel import Session, or_, select

from app.core.security import verify_password
from app.models.user import User


def get_user_by_id(*, session: Session, user_id: int) -> User | None:
    """
    Get an account by its ID.

    Parameters:
        session (Session): The database session.
        user_id (int): The ID of the account to retrieve.
    Returns:
        User | None: The account if found, otherwise None.
    """
    return session.get(User, user_id)


def get_user_by_login(*, session: Session, login: str) -> User | None:
    """
    Get an account by phone number or email address.

    Parameters:
        session (Session): The database session.
        login (str): Phone number or email address.
    Returns:
        User | None: The account if found, otherwise None.
    """
    statement = select(User).where(or_(User.phone_number == login, User.email == login))
    return session.exec(statement).first()


def authenticate(*, session: Session, login: str, password: str) -> User | None:
    """
    Authenticate an account by phone number (or email) and password.

    Returns:
        User | None: The authenticated account if credentials are valid, otherwise None.
    """
    db_user = get_user_by_login(session=session, login=login)
    if not db_user:
        return None
    if not verify_password(password, db_user.hashed_password):
        return None
    return db_user
