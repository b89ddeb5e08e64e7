from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session, selectinload

from app.database import get_db
from app.models.course import Course
from app.schemas.course import CourseRecord
from app.utils.catalog import course_to_record

import logging
logger = logging.getLogger("app.catalog")


router = APIRouter(prefix="/subjects", tags=["Catalog"])


@router.get("", response_model=List[str])
def list_subjects(db: Session = Depends(get_db)):
    rows = db.query(Course.subject).distinct().order_by(Course.subject.asc()).all()
    return [r[0] for r in rows if r[0]]


@router.get("/{subject}/courses", response_model=List[str])
def list_courses(subject: str, db: Session = Depends(get_db)):
    rows = (
        db.query(Course)
        .filter(Course.subject == subject.strip().upper())
        .order_by(Course.id.asc())
        .all()
    )
    if not rows:
        raise HTTPException(404, "Subject details not found")
    return [c.label for c in rows]


@router.get("/{subject}/courses/{number}", response_model=CourseRecord)
def get_course(subject: str, number: str, db: Session = Depends(get_db)):
    c = (
        db.query(Course)
        .options(selectinload(Course.times))
        .filter(Course.subject == subject.strip().upper(), Course.number == number.strip())
        .first()
    )
    if not c:
        raise HTTPException(404, "Course details unavailable for this subject")
    return course_to_record(c)
