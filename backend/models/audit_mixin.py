from sqlalchemy import Column, DateTime
from datetime import datetime
import os
import pytz

FARM_TIMEZONE = pytz.timezone(os.getenv("FARM_TIMEZONE", "UTC"))


def farm_now():
    return datetime.now(FARM_TIMEZONE)


class TimestampMixin:
    """Mixin that provides created/updated timestamps.

    Records are hard-deleted, so there are no soft-delete columns here.
    """
    # DateTime(timezone=True) ensures the timezone info is persisted in the database.
    created_at = Column(DateTime(timezone=True), default=farm_now)
    updated_at = Column(DateTime(timezone=True), default=farm_now, onupdate=farm_now)
