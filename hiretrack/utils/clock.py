"""Time helpers shared by the services."""
import asyncio
import random
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo

from hiretrack.config import settings


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def touch(previous: Optional[datetime] = None) -> datetime:
    """Timestamp for a mutation, strictly later than ``previous``."""
    now = utcnow()
    if previous is not None and now <= ensure_utc(previous):
        return ensure_utc(previous) + timedelta(microseconds=1)
    return now


async def simulate_latency(min_ms: int = 200, max_ms: int = 400) -> None:
    """Sleep for a random backend-like delay unless latency is disabled."""
    if not settings.simulate_latency or settings.latency_scale <= 0:
        return
    delay_ms = random.randint(min_ms, max_ms) * settings.latency_scale
    await asyncio.sleep(delay_ms / 1000)


def calendar_tz() -> tzinfo:
    """Zone the calendar's wall-clock times are expressed in."""
    if settings.calendar_timezone.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(settings.calendar_timezone)
