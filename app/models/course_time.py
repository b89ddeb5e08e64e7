from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from app.database import Base

class CourseTime(Base):
    __tablename__ = "course_time"

    id = Column(Integer, primary_key=True)
    course_id = Column(String(20), ForeignKey("courses.id", ondelete="CASCADE"), index=True)

    weekday = Column(String(10))      # "Monday" .. "Sunday"
    position = Column(Integer, default=0)
    # raw "H:MM" text, validated when a schedule is computed
    start = Column(String(8))
    end = Column(String(8))

    course = relationship("Course", back_populates="times")
