import logging

from sqlalchemy.exc import OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session

from student_directory.exceptions import StorageError, StorageUnavailable
from student_directory.models import Department
from student_directory.schemas import DepartmentRecord

logger = logging.getLogger(__name__)


class DepartmentRepository:
    """Read-only access to the departments table."""

    def __init__(self, db: Session):
        self.db = db

    def list_departments(self) -> list[DepartmentRecord]:
        """Return every department in storage order, unfiltered."""
        try:
            departments = self.db.query(Department).all()
        except OperationalError as e:
            logger.error(f"Failed to list departments: {e}")
            raise StorageUnavailable("list departments", str(e.orig)) from e
        except SQLAlchemyError as e:
            logger.error(f"Failed to list departments: {e}")
            raise StorageError(f"Failed to list departments: {e}") from e
        return [DepartmentRecord.model_validate(d) for d in departments]
