import logging

from sqlalchemy.exc import DataError, IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session

from student_directory.exceptions import ConstraintViolation, StorageError, StorageUnavailable
from student_directory.models import Department, Student
from student_directory.schemas import StudentDepartmentRow

logger = logging.getLogger(__name__)


class StudentRepository:
    """Reads and inserts on the students table."""

    def __init__(self, db: Session):
        self.db = db

    def list_students_by_department(self, department_id) -> list[StudentDepartmentRow]:
        """
        Return the students whose department reference equals ``department_id``.

        The departments table is LEFT OUTER JOINed, so a student whose reference
        does not resolve is still returned with null department columns. Rows
        keep the order the store returns them in.
        """
        if department_id is None or department_id == "":
            # An empty filter must never turn into an unfiltered scan.
            return []

        try:
            rows = (
                self.db.query(
                    Student.id,
                    Student.first_name,
                    Student.last_name,
                    Student.student_id,
                    Student.address,
                    Student.department_id,
                    Department.id.label("department_ref_id"),
                    Department.name.label("department_name"),
                    Department.address.label("department_address"),
                )
                .outerjoin(Department, Student.department_id == Department.id)
                .filter(Student.department_id == department_id)
                .all()
            )
        except OperationalError as e:
            logger.error(f"Failed to list students for department {department_id!r}: {e}")
            raise StorageUnavailable("list students by department", str(e.orig)) from e
        except SQLAlchemyError as e:
            logger.error(f"Failed to list students for department {department_id!r}: {e}")
            raise StorageError(f"Failed to list students: {e}") from e

        return [StudentDepartmentRow(**row._mapping) for row in rows]

    def insert_student(
        self,
        first_name: str,
        last_name: str,
        student_id: str,
        address: str,
        department_id,
    ):
        """
        Insert one student and return the identifier assigned by the store.

        The referenced department is not looked up first; a dangling
        ``department_id`` is stored as given.
        """
        student = Student(
            first_name=first_name,
            last_name=last_name,
            student_id=student_id,
            address=address,
            department_id=department_id,
        )
        try:
            self.db.add(student)
            self.db.flush()
            new_id = student.id
            self.db.commit()
        except (IntegrityError, DataError) as e:
            self.db.rollback()
            logger.error(f"Student insert rejected: {e.orig}")
            raise ConstraintViolation(Student.__tablename__, str(e.orig)) from e
        except OperationalError as e:
            self.db.rollback()
            logger.error(f"Failed to insert student: {e}")
            raise StorageUnavailable("insert student", str(e.orig)) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to insert student: {e}")
            raise StorageError(f"Failed to insert student: {e}") from e

        return new_id
