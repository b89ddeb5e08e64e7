from typing import Dict, List, Literal, Optional
from pydantic import BaseModel, Field

from app.schemas.course import CourseRecord


class ScheduleIn(BaseModel):
    # catalog labels ("CS31005 - ALGORITHMS - II") or bare codes ("CS31005")
    selections: List[str] = Field(default_factory=list)


class ScheduleCheckIn(BaseModel):
    courses: List[CourseRecord] = Field(default_factory=list)


class CourseGridOut(BaseModel):
    course_number: str
    grid: Dict[str, Dict[int, str]]


class ConflictOut(BaseModel):
    day: str
    hour: int
    owner: str
    claimant: str


class ScheduleOut(BaseModel):
    status: Literal["merged", "conflicted"]
    message: str
    hours: List[str]
    colors: Dict[str, str]
    merged: Optional[Dict[str, Dict[int, str]]] = None
    courses: List[CourseRecord] = []
    grids: List[CourseGridOut] = []
    conflicts: List[ConflictOut] = []
