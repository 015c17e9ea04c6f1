from typing import Optional

from fastapi import APIRouter, Depends, Query

from student_directory.dependencies import get_directory_service
from student_directory.schemas import StudentCreate, StudentResponse
from student_directory.services.directory_service import DirectoryService

router = APIRouter(prefix="/api/students")


@router.get("", response_model=list[StudentResponse])
def students_by_department(
    department_id: Optional[str] = Query(None, alias="departmentId"),
    service: DirectoryService = Depends(get_directory_service),
):
    return service.students_by_department(department_id)


@router.post("", response_model=StudentResponse, status_code=201)
def add_student(
    data: StudentCreate,
    service: DirectoryService = Depends(get_directory_service),
):
    return service.add_student(
        first_name=data.first_name,
        last_name=data.last_name,
        student_id=data.student_id,
        address=data.address,
        department_id=data.department_id,
    )
