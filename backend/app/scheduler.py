from apscheduler.schedulers.blocking import (  # type: ignore[import-untyped]
    BlockingScheduler,
)
from apscheduler.triggers.interval import IntervalTrigger  # type: ignore[import-untyped]
from sqlmodel import Session

from app.core.config import settings
from app.core.db import engine
from app.logging_ import setup_logger
from app.services import bookings as bookings_service


def cleanup_expired_bookings() -> int:
    with Session(engine) as session:
        return bookings_service.cleanup_expired_bookings(session=session)


if __name__ == "__main__":
    setup_logger("scheduler")
    scheduler = BlockingScheduler(timezone=settings.TIMEZONE)
    scheduler.add_job(
        func=cleanup_expired_bookings,
        trigger=IntervalTrigger(minutes=settings.BOOKING_CLEANUP_INTERVAL_MINUTES),
        id="expired_booking_cleanup",
        max_instances=1,
        coalesce=True,
    )
    scheduler.start()
