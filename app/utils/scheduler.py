# app/utils/scheduler.py
import logging
from typing import Sequence

from app.schemas.course import CourseRecord
from app.utils.conflict import ConflictReport, detect_conflicts
from app.utils.errors import EmptySelection
from app.utils.schedule_grid import build_course_grid
from app.utils.timeslots import MIN_START_TIME, MAX_END_TIME

logger = logging.getLogger("app.schedule")


def assemble_schedule(
    schedules: Sequence[CourseRecord],
    min_hour: int = MIN_START_TIME,
    max_hour: int = MAX_END_TIME,
) -> ConflictReport:
    """Build every course's grid in selection order, then merge or report conflicts."""
    if not schedules:
        raise EmptySelection()

    entries = [(s, build_course_grid(s)) for s in schedules]
    report = detect_conflicts(entries, min_hour, max_hour)

    logger.info(
        "schedule for %s -> %s",
        ",".join(s.course_number for s in schedules), report.status,
    )
    return report
