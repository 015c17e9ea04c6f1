from fastapi import Depends
from sqlalchemy.orm import Session

from student_directory.database import get_db
from student_directory.services.directory_service import DirectoryService


def get_directory_service(db: Session = Depends(get_db)) -> DirectoryService:
    """A fresh service per request, bound to that request's session."""
    return DirectoryService(db)
