from fastapi import APIRouter

from app.api.routes import (
    bookings,
    login,
    showtimes,
)

api_router = APIRouter()
api_router.include_router(login.router)
api_router.include_router(bookings.router)
api_router.include_router(showtimes.router)
