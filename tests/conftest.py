import os
import sys

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_DIR", os.path.join(os.path.dirname(__file__), ".logs"))

from app.database import Base, get_db  # noqa: E402
from app.models.course import Course  # noqa: E402
from app.models.course_time import CourseTime  # noqa: E402
from app.schemas.course import CourseRecord  # noqa: E402


def make_course(number, timings, **meta):
    """
    make_course("A", {"Monday": [("12:00", "13:55")]})
    """
    return CourseRecord(
        course_number=number,
        timings={
            day: [{"start": s, "end": e} for s, e in spans]
            for day, spans in timings.items()
        },
        **meta,
    )


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def seeded_db(db_session):
    rows = [
        ("CS143", "CS", "143", "Test Course", [("Monday", "12:00", "13:55"), ("Tuesday", "9:00", "9:55")]),
        ("CS21201", "CS", "21201", "DISCRETE STRUCTURES", [("Monday", "13:00", "13:30")]),
        ("CS31005", "CS", "31005", "ALGORITHMS - II", [("Wednesday", "8:00", "8:55")]),
        ("AI101", "AI", "101", "Intro to AI", [("Friday", "10:00", "11:55")]),
        ("MA200", "MA", "200", "Broken Times", [("Monday", "14:00", "11:00")]),
    ]
    for cid, subject, number, name, times in rows:
        db_session.add(Course(
            id=cid, subject=subject, number=number, name=name,
            description=f"{name} description", instructor="Test Instructor", credits="4",
            times=[CourseTime(weekday=d, start=s, end=e, position=i) for i, (d, s, e) in enumerate(times)],
        ))
    db_session.commit()
    return db_session


@pytest.fixture
def client(seeded_db):
    from fastapi.testclient import TestClient
    from app.main import app

    def override_get_db():
        yield seeded_db

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
