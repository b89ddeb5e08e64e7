# app/utils/schedule_grid.py
import logging
from typing import Dict, Tuple

from app.schemas.course import CourseRecord
from app.utils.errors import InvalidInterval
from app.utils.timeslots import (
    DAYS_OF_WEEK, MIN_START_TIME, MAX_END_TIME, parse_interval, expand_interval,
)

logger = logging.getLogger("app.schedule")

# day -> sorted hour buckets, e.g. {"Monday": (12, 13)}
PerCourseGrid = Dict[str, Tuple[int, ...]]


def build_course_grid(schedule: CourseRecord) -> PerCourseGrid:
    """
    Occupied hour buckets of one course, per day.

    Intervals on the same day are unioned, so overlapping or repeated timings
    collapse. Every hour an interval touches is kept, including hours outside
    the displayed grid.
    """
    grid: PerCourseGrid = {}
    for day in DAYS_OF_WEEK:
        timings = schedule.timings.get(day)
        if not timings:
            continue

        hours = set()
        for t in timings:
            try:
                hours.update(expand_interval(parse_interval(t.start, t.end)))
            except InvalidInterval as e:
                raise e.for_course(schedule.course_number, day) from e
        grid[day] = tuple(sorted(hours))
    return grid


def clip_grid(
    grid: PerCourseGrid,
    min_hour: int = MIN_START_TIME,
    max_hour: int = MAX_END_TIME,
) -> PerCourseGrid:
    """
    {"Monday": (6, 7, 18, 19)}, 7, 19 -> {"Monday": (7, 18)}
    days left empty are omitted
    """
    out: PerCourseGrid = {}
    for day, hours in grid.items():
        in_domain = tuple(h for h in hours if min_hour <= h < max_hour)
        if len(in_domain) < len(hours):
            logger.debug(
                "%s: hours %s outside %d-%d not shown",
                day, [h for h in hours if h not in in_domain], min_hour, max_hour,
            )
        if in_domain:
            out[day] = in_domain
    return out
