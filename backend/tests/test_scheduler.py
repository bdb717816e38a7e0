from pytest_mock import MockerFixture

from app import scheduler


def test_cleanup_job_runs_cleanup_in_own_session(mocker: MockerFixture):
    mock_session_cls = mocker.patch("app.scheduler.Session")
    mock_cleanup = mocker.patch(
        "app.services.bookings.cleanup_expired_bookings", return_value=4
    )

    cleaned = scheduler.cleanup_expired_bookings()

    assert cleaned == 4
    mock_session_cls.assert_called_once_with(scheduler.engine)
    mock_cleanup.assert_called_once_with(
        session=mock_session_cls.return_value.__enter__.return_value
    )
