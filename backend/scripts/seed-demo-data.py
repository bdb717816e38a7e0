from datetime import datetime, timedelta
from decimal import Decimal
from pathlib import Path

import yaml

from app.api.deps import get_db_context
from app.core.db import init_db
from app.models import CinemaRoom, Food, Movie, Seat, SeatType, Showtime
from app.utils import now_local_naive

script_dir = Path(__file__).resolve().parent
data_dir = script_dir.parent / "data"
print(f"Backend root path: {data_dir}")

seed_yaml_path = data_dir / "seed.yaml"


def load_yaml_data(file_path: Path) -> dict:
    with open(file_path, encoding="utf-8") as file:
        return yaml.safe_load(file)


def seed_demo_data():
    data = load_yaml_data(seed_yaml_path)
    with get_db_context() as session:
        init_db(session)

        seat_types = {}
        for seat_type in data["seat_types"]:
            print(f"Seeding seat type: {seat_type['name']}")
            db_obj = SeatType(name=seat_type["name"], price=Decimal(seat_type["price"]))
            session.add(db_obj)
            seat_types[db_obj.name] = db_obj
        session.flush()

        rooms = {}
        for room in data["rooms"]:
            print(f"Seeding room: {room['name']}")
            db_room = CinemaRoom(
                name=room["name"],
                rows=len(room["rows"]),
                columns=room["columns"],
                capacity=len(room["rows"]) * room["columns"],
            )
            session.add(db_room)
            session.flush()
            rooms[db_room.name] = db_room
            for row in room["rows"]:
                seat_type = seat_types[room.get("seat_types", {}).get(row, "Standard")]
                for column in range(1, room["columns"] + 1):
                    session.add(
                        Seat(
                            cinema_room_id=db_room.id,
                            seat_type_id=seat_type.id,
                            name=f"{row}{column}",
                            row=row,
                            column=column,
                        )
                    )

        movies = {}
        for movie in data["movies"]:
            print(f"Seeding movie: {movie['title']}")
            db_movie = Movie(**movie)
            session.add(db_movie)
            movies[db_movie.title] = db_movie

        for food in data["foods"]:
            print(f"Seeding food: {food['name']}")
            session.add(
                Food(name=food["name"], price=Decimal(food["price"]), category=food["category"])
            )
        session.flush()

        today = now_local_naive().date()
        for showtime in data["showtimes"]:
            movie = movies[showtime["movie"]]
            start_time = datetime.combine(
                today + timedelta(days=showtime["days_from_today"]),
                datetime.strptime(showtime["start"], "%H:%M").time(),
            )
            print(f"Seeding showtime: {movie.title} at {start_time}")
            session.add(
                Showtime(
                    movie_id=movie.id,
                    cinema_room_id=rooms[showtime["room"]].id,
                    start_time=start_time,
                    end_time=start_time + timedelta(minutes=movie.duration_min or 120),
                    price=Decimal(showtime["price"]),
                )
            )

        session.commit()


if __name__ == "__main__":
    seed_demo_data()
