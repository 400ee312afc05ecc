"""Availability evaluator — is a helpline contact method reachable right now

DB-independent logic. Works on the contact method documents stored in
Helpline.contact:

    {"value": "116 123",
     "availability": [{"day": "weekday", "opensAt": "09:00", "closesAt": "17:00"},
                      {"day": "weekend", "opensAt": "22:00", "closesAt": "06:00"}]}

A window may select its days with "day" ("weekday" / "weekend") or with an
explicit "days" list (["Mon", "Tue", ...]).
"""
import re
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

# Python weekday() → day name
WEEKDAY_MAP = {0: "mon", 1: "tue", 2: "wed", 3: "thu", 4: "fri", 5: "sat", 6: "sun"}
WEEKEND_DAYS = {"sat", "sun"}

TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})$")

DESTINATION_KEYS = ("value", "number", "url")


class DayType(str, Enum):
    WEEKDAY = "weekday"
    WEEKEND = "weekend"


@dataclass(frozen=True)
class EvaluationContext:
    """The instant a listing is evaluated against, reduced to what windows compare"""
    day_name: str
    minutes_since_midnight: int

    @property
    def day_type(self) -> DayType:
        return DayType.WEEKEND if self.day_name in WEEKEND_DAYS else DayType.WEEKDAY

    @classmethod
    def from_datetime(cls, now: datetime) -> "EvaluationContext":
        """Uses the wall-clock fields of now as given (convert to the helpline zone first)"""
        return cls(
            day_name=WEEKDAY_MAP[now.weekday()],
            minutes_since_midnight=now.hour * 60 + now.minute,
        )


def parse_time(value) -> Optional[int]:
    """"HH:MM" → minutes since midnight. None if not a valid 24-hour time."""
    if not isinstance(value, str):
        return None
    m = TIME_RE.match(value.strip())
    if not m:
        return None
    hour, minute = int(m.group(1)), int(m.group(2))
    if hour > 23 or minute > 59:
        return None
    return hour * 60 + minute


def window_matches_day(window: dict, ctx: EvaluationContext) -> bool:
    day = window.get("day")
    if isinstance(day, str):
        return day.strip().lower() == ctx.day_type.value

    days = window.get("days")
    if isinstance(days, list):
        return any(
            isinstance(d, str) and d.strip().lower()[:3] == ctx.day_name
            for d in days
        )

    return False


def is_within(open_minutes: int, close_minutes: int, current: int) -> bool:
    if close_minutes > open_minutes:
        return open_minutes <= current <= close_minutes
    # overnight, e.g. 22:00-06:00 (or a window closing at 00:00)
    return current >= open_minutes or current <= close_minutes


def find_window(availability: list, ctx: EvaluationContext) -> Optional[dict]:
    """First window for the context's day. Later duplicates are ignored."""
    for window in availability:
        if isinstance(window, dict) and window_matches_day(window, ctx):
            return window
    return None


def destination(method) -> str:
    """Phone number / address / URL of a stored contact method, "" if none.

    Older records keep it under "number" (voice, text) or "url" (webchat),
    and store email as a bare address string.
    """
    if isinstance(method, str):
        return method.strip()
    if not isinstance(method, dict):
        return ""
    for key in DESTINATION_KEYS:
        value = method.get(key)
        if isinstance(value, str) and value.strip():
            return value
    return ""


def is_available(method, ctx: EvaluationContext) -> bool:
    """True if the contact method can be reached at ctx.

    No availability windows means the service runs 24/7. Anything malformed
    counts as unavailable; this never raises.
    """
    if not destination(method):
        return False
    if isinstance(method, str):
        return True

    availability = method.get("availability")
    if not availability:
        return True
    if not isinstance(availability, list):
        return False

    window = find_window(availability, ctx)
    if window is None:
        return False

    open_minutes = parse_time(window.get("opensAt", window.get("from")))
    close_minutes = parse_time(window.get("closesAt", window.get("to")))
    if open_minutes is None or close_minutes is None:
        return False

    return is_within(open_minutes, close_minutes, ctx.minutes_since_midnight)
