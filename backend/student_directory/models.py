from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship

from student_directory.database import Base


class Department(Base):
    __tablename__ = "departments"

    id = Column(String(64), primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    address = Column(String(255), nullable=False)

    students = relationship("Student", back_populates="department")


class Student(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    student_id = Column(String(50), nullable=False)
    address = Column(String(255), nullable=False)
    # Not enforced at insert: a student may point at a department that does not exist.
    department_id = Column(String(64), ForeignKey("departments.id"), nullable=True, index=True)

    department = relationship("Department", back_populates="students")
