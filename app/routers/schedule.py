from typing import List
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import StreamingResponse
from sqlalchemy.orm import Session

from app.config import settings
from app.database import get_db
from app.schemas.course import CourseRecord
from app.schemas.schedule import (
    ScheduleIn, ScheduleCheckIn, ScheduleOut, CourseGridOut, ConflictOut,
)
from app.utils.catalog import parse_course_label, fetch_courses, course_to_record
from app.utils.conflict import ConflictReport, Merged
from app.utils.errors import EmptySelection, InvalidInterval, TooManyCourses
from app.utils.excel_export import schedule_to_xlsx_bytes, hour_headers, make_filename
from app.utils.palette import assign_colors
from app.utils.scheduler import assemble_schedule

import logging
logger = logging.getLogger("app.schedule")


router = APIRouter(prefix="/schedule", tags=["Schedule"])

MERGED_MESSAGE = "Merged Schedule Created"
CONFLICT_MESSAGE = (
    "Conflicts Detected between selected course schedules. "
    "Individual course schedules displayed below."
)


def _records_from_selection(body: ScheduleIn, db: Session) -> List[CourseRecord]:
    # 0) 解析 + 去重
    refs = []
    for label in body.selections:
        try:
            refs.append(parse_course_label(label))
        except ValueError:
            raise HTTPException(400, {"message": "Invalid course selection", "selection": label})
    refs = list(dict.fromkeys(refs))

    if len(refs) > settings.max_selected_courses:
        e = TooManyCourses(len(refs), settings.max_selected_courses)
        raise HTTPException(400, {"message": str(e), "limit": e.limit})

    # 1) 一次把涉及到的課都查出來（含 times）
    courses, missing = fetch_courses(db, refs)
    if missing:
        raise HTTPException(404, {"message": "Course not found", "course_numbers": missing})
    return [course_to_record(c) for c in courses]


def _compute(records: List[CourseRecord]) -> ConflictReport:
    try:
        return assemble_schedule(
            records,
            min_hour=settings.SCHEDULE_MIN_START_TIME,
            max_hour=settings.SCHEDULE_MAX_END_TIME,
        )
    except EmptySelection:
        raise HTTPException(400, {"message": "No courses selected"})
    except InvalidInterval as e:
        logger.warning("schedule rejected: %s", e)
        raise HTTPException(422, e.to_dict())


def _to_out(records: List[CourseRecord], report: ConflictReport) -> ScheduleOut:
    colors = assign_colors([r.course_number for r in records], settings.COURSE_COLORS)

    hours = hour_headers(settings.SCHEDULE_MIN_START_TIME, settings.SCHEDULE_MAX_END_TIME)

    if isinstance(report, Merged):
        return ScheduleOut(
            status=report.status,
            message=MERGED_MESSAGE,
            hours=hours,
            colors=colors,
            merged=report.grid,
            courses=records,
        )

    return ScheduleOut(
        status=report.status,
        message=CONFLICT_MESSAGE,
        hours=hours,
        colors=colors,
        courses=records,
        grids=[
            CourseGridOut(
                course_number=r.course_number,
                grid={day: {h: r.course_number for h in hrs} for day, hrs in grid.items()},
            )
            for r, grid in report.entries
        ],
        conflicts=[ConflictOut(**c._asdict()) for c in report.conflicts],
    )


@router.post("", response_model=ScheduleOut)
def compute_schedule(body: ScheduleIn, db: Session = Depends(get_db)):
    records = _records_from_selection(body, db)
    return _to_out(records, _compute(records))


@router.post("/check", response_model=ScheduleOut)
def check_schedule(body: ScheduleCheckIn):
    if len(body.courses) > settings.max_selected_courses:
        e = TooManyCourses(len(body.courses), settings.max_selected_courses)
        raise HTTPException(400, {"message": str(e), "limit": e.limit})
    return _to_out(body.courses, _compute(body.courses))


@router.post("/export")
def export_schedule_excel(body: ScheduleIn, db: Session = Depends(get_db)):
    """
    匯出課表成 Excel（.xlsx）
    """
    records = _records_from_selection(body, db)
    report = _compute(records)
    colors = assign_colors([r.course_number for r in records], settings.COURSE_COLORS)

    xlsx_bytes = schedule_to_xlsx_bytes(
        report, colors,
        min_hour=settings.SCHEDULE_MIN_START_TIME,
        max_hour=settings.SCHEDULE_MAX_END_TIME,
    )
    filename = make_filename("schedule")

    return StreamingResponse(
        iter([xlsx_bytes]),
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
