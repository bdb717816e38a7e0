from datetime import timedelta
from decimal import Decimal

import pytest
from factory import (
    Faker,  # type: ignore
    LazyAttribute,  # type: ignore
    LazyFunction,  # type: ignore
    SelfAttribute,  # type: ignore
    Sequence,  # type: ignore
    SubFactory,  # type: ignore
    post_generation,  # type: ignore
)
from factory.alchemy import SQLAlchemyModelFactory
from sqlmodel import Session

from app.core.enums import Role, ShowtimeStatus
from app.core.security import get_password_hash
from app.models.cinema_room import CinemaRoom
from app.models.customer import Customer
from app.models.food import Food
from app.models.movie import Movie
from app.models.seat import Seat, SeatType
from app.models.showtime import Showtime
from app.models.user import User
from app.utils import now_local_naive

__all__ = [
    "user_factory",
    "customer_factory",
    "movie_factory",
    "cinema_room_factory",
    "seat_type_factory",
    "seat_factory",
    "showtime_factory",
    "food_factory",
]

DEFAULT_PASSWORD = "password"


class SQLModelFactory(SQLAlchemyModelFactory):
    class Meta:
        abstract = True
        sqlalchemy_session_persistence = "flush"


# --------------------------------------
# FACTORIES
# --------------------------------------


class UserFactory(SQLModelFactory):
    class Meta:
        model = User

    phone_number = Sequence(lambda n: f"091{n:07d}")
    email = Sequence(lambda n: f"user{n}@example.com")
    is_active = True
    role = Role.CUSTOMER
    hashed_password = get_password_hash(DEFAULT_PASSWORD)

    @post_generation
    def password(self, create, extracted, **kwargs):
        if create and extracted:
            self.hashed_password = get_password_hash(extracted)


@pytest.fixture
def user_factory(db_transaction: Session):
    UserFactory._meta.sqlalchemy_session = db_transaction  # type: ignore
    return UserFactory


class CustomerFactory(SQLModelFactory):
    class Meta:
        model = Customer

    full_name = Faker("name")
    phone_number = Sequence(lambda n: f"098{n:07d}")
    account = None
    account_id = LazyAttribute(lambda o: o.account.id if o.account else None)


@pytest.fixture
def customer_factory(db_transaction: Session):
    UserFactory._meta.sqlalchemy_session = db_transaction  # type: ignore
    CustomerFactory._meta.sqlalchemy_session = db_transaction  # type: ignore
    return CustomerFactory


class MovieFactory(SQLModelFactory):
    class Meta:
        model = Movie

    title = Faker("sentence", nb_words=3)
    duration_min = Faker("random_int", min=80, max=180)
    age_rating = "T13"


@pytest.fixture
def movie_factory(db_transaction: Session):
    MovieFactory._meta.sqlalchemy_session = db_transaction  # type: ignore
    return MovieFactory


class CinemaRoomFactory(SQLModelFactory):
    class Meta:
        model = CinemaRoom

    name = Sequence(lambda n: f"Room {n}")
    rows = 10
    columns = 12
    capacity = LazyAttribute(lambda o: o.rows * o.columns)


@pytest.fixture
def cinema_room_factory(db_transaction: Session):
    CinemaRoomFactory._meta.sqlalchemy_session = db_transaction  # type: ignore
    return CinemaRoomFactory


class SeatTypeFactory(SQLModelFactory):
    class Meta:
        model = SeatType

    name = "Standard"
    price = Decimal("0.00")


@pytest.fixture
def seat_type_factory(db_transaction: Session):
    SeatTypeFactory._meta.sqlalchemy_session = db_transaction  # type: ignore
    return SeatTypeFactory


class SeatFactory(SQLModelFactory):
    class Meta:
        model = Seat
        exclude = ("cinema_room",)

    cinema_room = SubFactory(CinemaRoomFactory)
    cinema_room_id = SelfAttribute("cinema_room.id")
    seat_type = SubFactory(SeatTypeFactory)
    seat_type_id = SelfAttribute("seat_type.id")
    row = "A"
    column = Sequence(lambda n: n + 1)
    name = LazyAttribute(lambda o: f"{o.row}{o.column}")


@pytest.fixture
def seat_factory(db_transaction: Session):
    CinemaRoomFactory._meta.sqlalchemy_session = db_transaction  # type: ignore
    SeatTypeFactory._meta.sqlalchemy_session = db_transaction  # type: ignore
    SeatFactory._meta.sqlalchemy_session = db_transaction  # type: ignore
    return SeatFactory


class ShowtimeFactory(SQLModelFactory):
    class Meta:
        model = Showtime

    movie = SubFactory(MovieFactory)
    movie_id = SelfAttribute("movie.id")
    cinema_room = SubFactory(CinemaRoomFactory)
    cinema_room_id = SelfAttribute("cinema_room.id")
    start_time = LazyFunction(lambda: now_local_naive().replace(microsecond=0) + timedelta(days=1))
    end_time = LazyAttribute(lambda o: o.start_time + timedelta(hours=2))
    price = Decimal("80000.00")
    status = ShowtimeStatus.SCHEDULED


@pytest.fixture
def showtime_factory(db_transaction: Session):
    MovieFactory._meta.sqlalchemy_session = db_transaction  # type: ignore
    CinemaRoomFactory._meta.sqlalchemy_session = db_transaction  # type: ignore
    ShowtimeFactory._meta.sqlalchemy_session = db_transaction  # type: ignore
    return ShowtimeFactory


class FoodFactory(SQLModelFactory):
    class Meta:
        model = Food

    name = Faker("word")
    price = Decimal("45000.00")
    category = "snack"
    is_available = True


@pytest.fixture
def food_factory(db_transaction: Session):
    FoodFactory._meta.sqlalchemy_session = db_transaction  # type: ignore
    return FoodFactory
