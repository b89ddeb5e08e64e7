from typing import Dict, List, Literal
from pydantic import BaseModel, ConfigDict


DayName = Literal["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


class TimingIn(BaseModel):
    # kept as text, parsed (and rejected) by the scheduling core
    start: str
    end: str


class CourseRecord(BaseModel):
    """One course as served by the catalog: metadata is passed through untouched."""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    course_number: str
    course_name: str = ""
    course_description: str = ""
    instructor: str = ""
    credits: str = ""
    timings: Dict[DayName, List[TimingIn]] = {}
