from datetime import datetime

import pytz

from app.core.config import settings


def now_local_naive() -> datetime:
    """
    Current wall-clock time in the cinema's timezone, without tzinfo.
    All datetimes are stored naive in that timezone.
    """
    return datetime.now(pytz.timezone(settings.TIMEZONE)).replace(tzinfo=None)
