from typing import NamedTuple, Tuple

from app.utils.errors import InvalidInterval


DAYS_OF_WEEK = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

MIN_START_TIME = 7
MAX_END_TIME = 19


class TimeOfDay(NamedTuple):
    hour: int
    minute: int = 0

    def __str__(self):
        return f"{self.hour}:{self.minute:02d}"


class TimeInterval(NamedTuple):
    start: TimeOfDay
    end: TimeOfDay


def parse_time_of_day(text: str) -> TimeOfDay:
    """
    "9:00" -> TimeOfDay(9, 0)
    "13:55:00" -> TimeOfDay(13, 55)
    seconds are accepted but ignored
    """
    s = (text or "").strip() if isinstance(text, str) else ""
    parts = s.split(":")
    if len(parts) not in (2, 3):
        raise ValueError(f"expected H:MM or H:MM:SS, got {text!r}")
    if not all(p.isdigit() for p in parts):
        raise ValueError(f"non-numeric time {text!r}")

    hour, minute = int(parts[0]), int(parts[1])
    second = int(parts[2]) if len(parts) == 3 else 0
    if not 0 <= hour <= 23:
        raise ValueError(f"hour out of range in {text!r}")
    if not (0 <= minute <= 59 and 0 <= second <= 59):
        raise ValueError(f"minute/second out of range in {text!r}")
    return TimeOfDay(hour, minute)


def parse_interval(start: str, end: str) -> TimeInterval:
    try:
        interval = TimeInterval(parse_time_of_day(start), parse_time_of_day(end))
    except ValueError as e:
        raise InvalidInterval(start, end, str(e)) from e

    if interval.start > interval.end:
        raise InvalidInterval(start, end, "start is after end")
    return interval


def expand_interval(interval: TimeInterval) -> Tuple[int, ...]:
    """
    Every hour bucket the interval touches, end hour included:
    (7:00, 7:30) -> (7,)
    (12:00, 13:55) -> (12, 13)
    """
    start, end = interval
    if start > end:
        raise InvalidInterval(str(start), str(end), "start is after end")
    return tuple(range(start.hour, end.hour + 1))
