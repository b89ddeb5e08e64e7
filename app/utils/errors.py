# app/utils/errors.py
from typing import Optional


class ScheduleError(ValueError):
    """Base class for errors raised by the scheduling core."""


class InvalidInterval(ScheduleError):
    def __init__(
        self,
        start,
        end,
        reason: str,
        course_number: Optional[str] = None,
        day: Optional[str] = None,
    ):
        self.start = start
        self.end = end
        self.reason = reason
        self.course_number = course_number
        self.day = day
        super().__init__(self._describe())

    def _describe(self) -> str:
        where = ""
        if self.course_number:
            where = f" in {self.course_number}"
            if self.day:
                where += f" on {self.day}"
        return f"invalid interval {self.start!r}-{self.end!r}{where}: {self.reason}"

    def for_course(self, course_number: str, day: str) -> "InvalidInterval":
        return InvalidInterval(self.start, self.end, self.reason, course_number=course_number, day=day)

    def to_dict(self) -> dict:
        return {
            "message": "Invalid interval",
            "course_number": self.course_number,
            "day": self.day,
            "start": str(self.start),
            "end": str(self.end),
            "reason": self.reason,
        }


class EmptySelection(ScheduleError):
    def __init__(self):
        super().__init__("no courses selected")


class TooManyCourses(ScheduleError):
    def __init__(self, count: int, limit: int):
        self.count = count
        self.limit = limit
        super().__init__(f"{count} courses selected, at most {limit} allowed")
