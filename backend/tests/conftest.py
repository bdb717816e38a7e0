from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from app.api.deps import get_db
from app.core.config import settings
from app.core.db import init_db
from app.core.enums import Role
from app.main import app
from app.models.customer import Customer
from app.models.user import User

from tests.fixtures.factories import *  # noqa: F403
from tests.fixtures.factories import DEFAULT_PASSWORD

TEST_DATABASE_URL = "sqlite://"


@pytest.fixture(scope="function")
def test_engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(scope="function", autouse=True)
def db_transaction(test_engine: Engine) -> Generator[Session, None, None]:
    session = Session(test_engine)
    init_db(session)

    def override_get_db() -> Generator[Session, None, None]:
        yield session

    app.dependency_overrides[get_db] = override_get_db

    yield session

    session.close()
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def client() -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c


def get_token_headers(client: TestClient, login: str, password: str) -> dict[str, str]:
    r = client.post(
        f"{settings.API_V1_STR}/login/access-token",
        data={"username": login, "password": password},
    )
    tokens = r.json()
    a_token = tokens["access_token"]
    return {"Authorization": f"Bearer {a_token}"}


@pytest.fixture(scope="function")
def admin_token_headers(client: TestClient) -> dict[str, str]:
    return get_token_headers(
        client, settings.FIRST_SUPERUSER_PHONE, settings.FIRST_SUPERUSER_PASSWORD
    )


@pytest.fixture(scope="function")
def staff_user(db_transaction: Session, user_factory) -> User:
    user = user_factory(role=Role.STAFF)
    db_transaction.commit()
    return user


@pytest.fixture(scope="function")
def staff_token_headers(client: TestClient, staff_user: User) -> dict[str, str]:
    return get_token_headers(client, staff_user.phone_number, DEFAULT_PASSWORD)


@pytest.fixture(scope="function")
def customer(db_transaction: Session, user_factory, customer_factory) -> Customer:
    """A customer profile linked to a customer-role account."""
    account = user_factory(role=Role.CUSTOMER)
    customer = customer_factory(account=account)
    db_transaction.commit()
    return customer


@pytest.fixture(scope="function")
def customer_token_headers(client: TestClient, customer: Customer) -> dict[str, str]:
    return get_token_headers(client, customer.account.phone_number, DEFAULT_PASSWORD)


@pytest.fixture(scope="function")
def other_customer(db_transaction: Session, user_factory, customer_factory) -> Customer:
    account = user_factory(role=Role.CUSTOMER)
    customer = customer_factory(account=account)
    db_transaction.commit()
    return customer


@pytest.fixture(scope="function")
def other_customer_token_headers(
    client: TestClient, other_customer: Customer
) -> dict[str, str]:
    return get_token_headers(
        client, other_customer.account.phone_number, DEFAULT_PASSWORD
    )
