"""
Import the flat-file course catalog into the database.

Layout:
    <root>/courses/<SUBJECT>/<NUMBER>.txt

Each course file holds six lines:
    course number, name, description, instructor, credits, timings
where timings look like "Monday=12:00-13:55|Tuesday=9:00-9:55,14:00-14:55".
"""
import argparse
import logging
from pathlib import Path
from typing import Dict, List, Tuple

from sqlalchemy.orm import Session

from app.database import Base, SessionLocal, engine
from app.logging_config import setup_logging
from app.models.course import Course
from app.models.course_time import CourseTime
from app.utils.timeslots import DAYS_OF_WEEK

logger = logging.getLogger("app.catalog")


class CatalogFormatError(ValueError):
    pass


def parse_timings(line: str) -> List[Tuple[str, str, str]]:
    """
    "Monday=12:00-13:55|Tuesday=9:00-9:55" -> [("Monday","12:00","13:55"), ("Tuesday","9:00","9:55")]
    """
    out = []
    for chunk in (line or "").split("|"):
        chunk = chunk.strip()
        if not chunk:
            continue
        if "=" not in chunk:
            raise CatalogFormatError(f"missing '=' in {chunk!r}")
        day, spans = (p.strip() for p in chunk.split("=", 1))
        if day not in DAYS_OF_WEEK:
            raise CatalogFormatError(f"unknown day {day!r}")
        for span in spans.split(","):
            span = span.strip()
            if not span:
                continue
            if "-" not in span:
                raise CatalogFormatError(f"missing '-' in {span!r}")
            start, end = (p.strip() for p in span.split("-", 1))
            out.append((day, start, end))
    return out


def read_course_file(path: Path) -> Dict:
    lines = path.read_text(encoding="utf-8").splitlines()
    if len(lines) < 6:
        raise CatalogFormatError(f"{path}: expected 6 lines, got {len(lines)}")

    return {
        "id": lines[0].strip(),
        "subject": path.parent.name.upper(),
        "number": path.stem.strip(),
        "name": lines[1].strip(),
        "description": lines[2].strip(),
        "instructor": lines[3].strip(),
        "credits": lines[4].strip(),
        "times": parse_timings(lines[5]),
    }


def upsert_course(db: Session, data: Dict) -> Course:
    c = db.query(Course).filter(Course.id == data["id"]).first()
    if c is None:
        c = Course(id=data["id"])
        db.add(c)
        # the session does not autoflush; later files with the same id must find this row
        db.flush()

    for k in ("subject", "number", "name", "description", "instructor", "credits"):
        setattr(c, k, data[k])

    # 全刪重建
    c.times = [
        CourseTime(weekday=day, start=start, end=end, position=i)
        for i, (day, start, end) in enumerate(data["times"])
    ]
    return c


def load_catalog(db: Session, root: Path) -> int:
    """Load every course file under root/courses; bad files are skipped and logged."""
    courses_dir = Path(root) / "courses"
    if not courses_dir.is_dir():
        raise FileNotFoundError(f"{courses_dir} not found")

    loaded = 0
    for path in sorted(courses_dir.glob("*/*.txt")):
        try:
            data = read_course_file(path)
        except CatalogFormatError as e:
            logger.warning("skip %s: %s", path, e)
            continue
        upsert_course(db, data)
        loaded += 1

    db.commit()
    logger.info("loaded %d courses from %s", loaded, courses_dir)
    return loaded


def main(argv=None):
    parser = argparse.ArgumentParser(description="Load the flat-file course catalog")
    parser.add_argument("root", type=Path, help="directory containing courses/<SUBJECT>/<NUMBER>.txt")
    args = parser.parse_args(argv)

    setup_logging()
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        load_catalog(db, args.root)
    finally:
        db.close()


if __name__ == "__main__":
    main()
