from sqlalchemy import Column, String, Text
from sqlalchemy.orm import relationship
from app.database import Base

class Course(Base):
    __tablename__ = "courses"

    # course number, e.g. "CS143"
    id = Column(String(20), primary_key=True)

    subject = Column(String(10), nullable=False, index=True)
    number = Column(String(10), nullable=False)

    name = Column(String(255), nullable=False, default="")
    description = Column(Text, default="")
    instructor = Column(String(255), default="")
    credits = Column(String(10), default="")

    # relationship
    times = relationship(
        "CourseTime",
        back_populates="course",
        cascade="all, delete-orphan",
        order_by="CourseTime.position",
    )

    @property
    def label(self) -> str:
        return f"{self.id} - {self.name}"


# mapped alongside Course so the "CourseTime" relationship resolves
from app.models.course_time import CourseTime  # noqa: E402,F401
