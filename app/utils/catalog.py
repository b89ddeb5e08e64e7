# app/utils/catalog.py
import re
from typing import Dict, List, Sequence, Tuple

from sqlalchemy.orm import Session, selectinload

from app.models.course import Course
from app.schemas.course import CourseRecord

_CODE_RE = re.compile(r"^([A-Za-z]+)\s*(\d+)$")


def parse_course_label(label: str) -> Tuple[str, str]:
    """
    "CS31005 - ALGORITHMS - II" -> ("CS", "31005")
    "cs 143" -> ("CS", "143")
    "CS143-Test" -> ("CS", "143")
    """
    code = (label or "").split("-", 1)[0].strip()
    m = _CODE_RE.match(code)
    if not m:
        raise ValueError(f"cannot read a course code from {label!r}")
    return m.group(1).upper(), m.group(2)


def course_to_record(course: Course) -> CourseRecord:
    timings: Dict[str, List[dict]] = {}
    for t in course.times:
        timings.setdefault(t.weekday, []).append({"start": t.start, "end": t.end})

    return CourseRecord(
        course_number=course.id,
        course_name=course.name or "",
        course_description=course.description or "",
        instructor=course.instructor or "",
        credits=course.credits or "",
        timings=timings,
    )


def fetch_courses(db: Session, refs: Sequence[Tuple[str, str]]) -> Tuple[List[Course], List[str]]:
    """
    One query for the whole selection.
    returns (courses in the order of refs, "SUBJECTNUMBER" codes not found)
    """
    if not refs:
        return [], []

    subjects = sorted({s for s, _ in refs})
    rows = (
        db.query(Course)
        .options(selectinload(Course.times))
        .filter(Course.subject.in_(subjects))
        .filter(Course.number.in_(sorted({n for _, n in refs})))
        .all()
    )
    by_ref = {(c.subject, c.number): c for c in rows}

    found, missing = [], []
    for ref in refs:
        c = by_ref.get(ref)
        if c is None:
            missing.append(f"{ref[0]}{ref[1]}")
        else:
            found.append(c)
    return found, missing
