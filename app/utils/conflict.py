# app/utils/conflict.py
from dataclasses import dataclass, field
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple, Union

from app.schemas.course import CourseRecord
from app.utils.schedule_grid import PerCourseGrid, clip_grid
from app.utils.timeslots import DAYS_OF_WEEK, MIN_START_TIME, MAX_END_TIME

# day -> {hour -> course_number}, free cells are absent
WeeklyGrid = Dict[str, Dict[int, str]]

GridEntry = Tuple[CourseRecord, PerCourseGrid]


class ConflictCell(NamedTuple):
    day: str
    hour: int
    owner: str      # course that claimed the cell first
    claimant: str   # course whose claim collided


@dataclass(frozen=True)
class Merged:
    grid: WeeklyGrid

    @property
    def status(self) -> str:
        return "merged"


@dataclass(frozen=True)
class Conflicted:
    entries: List[GridEntry]
    conflicts: List[ConflictCell] = field(default_factory=list)

    @property
    def status(self) -> str:
        return "conflicted"

    def conflicting_courses(self) -> List[str]:
        seen = {}
        for c in self.conflicts:
            seen.setdefault(c.owner, None)
            seen.setdefault(c.claimant, None)
        return list(seen)


ConflictReport = Union[Merged, Conflicted]


def _owner_of(grid: WeeklyGrid, day: str, hour: int) -> Optional[str]:
    return grid.get(day, {}).get(hour)


def detect_conflicts(
    entries: Sequence[GridEntry],
    min_hour: int = MIN_START_TIME,
    max_hour: int = MAX_END_TIME,
) -> ConflictReport:
    """
    entries: (course, per-course grid) pairs in selection order

    判斷是否衝堂：
    every claimed (day, hour) is written into one fresh shared grid; a claim on a
    cell owned by another course is recorded, never overwrites the owner, and
    the scan continues so every colliding cell is reported.

    Collisions are found on every hour, so overlaps outside [min_hour, max_hour)
    still count; only the returned grids are clipped to that window.
    """
    shared: WeeklyGrid = {}
    conflicts: List[ConflictCell] = []

    for course, grid in entries:
        number = course.course_number
        for day in DAYS_OF_WEEK:
            for hour in grid.get(day, ()):
                owner = _owner_of(shared, day, hour)
                if owner is None:
                    shared.setdefault(day, {})[hour] = number
                elif owner != number:
                    conflicts.append(ConflictCell(day, hour, owner, number))

    if conflicts:
        return Conflicted(
            entries=[(course, clip_grid(grid, min_hour, max_hour)) for course, grid in entries],
            conflicts=conflicts,
        )

    merged: WeeklyGrid = {}
    for day, cells in shared.items():
        shown = {h: owner for h, owner in cells.items() if min_hour <= h < max_hour}
        if shown:
            merged[day] = shown
    return Merged(grid=merged)
