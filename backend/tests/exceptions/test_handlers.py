from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel

from app.exceptions.base import AppError, InsufficientRole, error_responses
from app.exceptions.booking_exceptions import BookingNotFound, SeatsAlreadyBooked, SeatsNotFound
from app.exceptions.handlers import register_exception_handlers


class Payload(BaseModel):
    quantity: int


def _make_app() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/not-found")
    def not_found():
        raise BookingNotFound(3)

    @app.get("/forbidden")
    def forbidden():
        raise InsufficientRole()

    @app.get("/internal")
    def internal():
        raise AppError("psycopg.OperationalError: connection to 10.0.0.5 refused")

    @app.get("/crash")
    def crash():
        raise RuntimeError("boom")

    @app.post("/validate")
    def validate(payload: Payload):
        return payload

    return app


def test_client_errors_are_jsend_fail():
    client = TestClient(_make_app())

    not_found = client.get("/not-found")
    forbidden = client.get("/forbidden")

    assert not_found.status_code == 404
    assert not_found.json() == {"status": "fail", "message": "Booking 3 not found."}
    assert forbidden.status_code == 403
    assert forbidden.json()["status"] == "fail"


def test_server_errors_are_sanitized():
    client = TestClient(_make_app(), raise_server_exceptions=False)

    internal = client.get("/internal")
    crash = client.get("/crash")

    assert internal.status_code == 500
    assert internal.json() == {"status": "error", "message": AppError.detail}
    assert crash.status_code == 500
    assert crash.json() == {"status": "error", "message": "An unexpected error occurred."}


def test_validation_errors_are_400():
    client = TestClient(_make_app())

    response = client.post("/validate", json={"quantity": "many"})

    assert response.status_code == 400
    assert response.json()["status"] == "fail"
    assert response.json()["message"].startswith("quantity:")


def test_error_responses_groups_by_status_code():
    responses = error_responses(BookingNotFound, SeatsNotFound, SeatsAlreadyBooked)

    assert set(responses) == {404, 409}
    assert BookingNotFound.openapi_description in responses[404]["description"]
    assert SeatsNotFound.openapi_description in responses[404]["description"]
    assert responses[409]["content"]["application/json"]["example"] == {
        "status": "fail",
        "message": "Seats already booked: 7, 8.",
    }
