"""
Directory service: the typed query/mutation API over departments and students.

Two queries (``departments``, ``students_by_department``) and one mutation
(``add_student``). Every call is a single storage round trip and returns
freshly queried data; nothing is cached between calls.
"""

import logging
from typing import Optional, Union

from sqlalchemy.orm import Session

from student_directory.exceptions import ValidationError
from student_directory.repositories.department_repo import DepartmentRepository
from student_directory.repositories.student_repo import StudentRepository
from student_directory.schemas import (
    DepartmentRecord,
    DepartmentResponse,
    StudentDepartmentRow,
    StudentResponse,
)

logger = logging.getLogger(__name__)

UNKNOWN_DEPARTMENT_NAME = "Unknown Department"
UNKNOWN_DEPARTMENT_ADDRESS = "Unknown Address"

REQUIRED_STUDENT_FIELDS = ("first_name", "last_name", "student_id", "address", "department_id")


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def department_to_response(record: DepartmentRecord) -> DepartmentResponse:
    return DepartmentResponse(id=str(record.id), name=record.name, address=record.address)


def row_to_student(row: StudentDepartmentRow) -> StudentResponse:
    """
    Map a joined row onto the API shape.

    A null reference yields no department. A reference that did not resolve
    keeps its id and gets the placeholder name and address.
    """
    if row.department_id is None:
        department = None
    elif row.department_ref_id is None:
        department = DepartmentResponse(
            id=str(row.department_id),
            name=UNKNOWN_DEPARTMENT_NAME,
            address=UNKNOWN_DEPARTMENT_ADDRESS,
        )
    else:
        department = DepartmentResponse(
            id=str(row.department_id),
            name=row.department_name,
            address=row.department_address,
        )

    return StudentResponse(
        id=str(row.id),
        first_name=row.first_name,
        last_name=row.last_name,
        student_id=row.student_id,
        address=row.address,
        department=department,
    )


class DirectoryService:
    def __init__(self, db: Session):
        self.departments_repo = DepartmentRepository(db)
        self.students_repo = StudentRepository(db)

    def departments(self) -> list[DepartmentResponse]:
        records = self.departments_repo.list_departments()
        return [department_to_response(r) for r in records]

    def students_by_department(
        self, department_id: Optional[Union[str, int]]
    ) -> list[StudentResponse]:
        """Students referencing ``department_id``; empty when no id is given."""
        if _is_blank(department_id):
            return []

        rows = self.students_repo.list_students_by_department(str(department_id))
        logger.debug(f"Department {department_id!r}: {len(rows)} student(s)")
        return [row_to_student(row) for row in rows]

    def add_student(
        self,
        first_name: Optional[str],
        last_name: Optional[str],
        student_id: Optional[str],
        address: Optional[str],
        department_id: Optional[Union[str, int]],
    ) -> StudentResponse:
        """
        Register a student and echo it back.

        The department is neither checked nor re-read after the insert, so the
        returned department only carries the submitted id.
        """
        submitted = {
            "first_name": first_name,
            "last_name": last_name,
            "student_id": student_id,
            "address": address,
            "department_id": department_id,
        }
        missing = [name for name in REQUIRED_STUDENT_FIELDS if _is_blank(submitted[name])]
        if missing:
            logger.warning(f"Rejected student registration, missing: {', '.join(missing)}")
            raise ValidationError(missing)

        department_id = str(department_id)
        new_id = self.students_repo.insert_student(
            first_name=first_name,
            last_name=last_name,
            student_id=student_id,
            address=address,
            department_id=department_id,
        )
        logger.info(f"Registered student {new_id} in department {department_id!r}")

        return StudentResponse(
            id=str(new_id),
            first_name=first_name,
            last_name=last_name,
            student_id=student_id,
            address=address,
            department=DepartmentResponse(id=department_id),
        )
