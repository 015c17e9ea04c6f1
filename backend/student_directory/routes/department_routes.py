from fastapi import APIRouter, Depends

from student_directory.dependencies import get_directory_service
from student_directory.schemas import DepartmentResponse, StudentResponse
from student_directory.services.directory_service import DirectoryService

router = APIRouter(prefix="/api/departments")


@router.get("", response_model=list[DepartmentResponse])
def list_departments(
    service: DirectoryService = Depends(get_directory_service),
):
    return service.departments()


@router.get("/{department_id}/students", response_model=list[StudentResponse])
def department_students(
    department_id: str,
    service: DirectoryService = Depends(get_directory_service),
):
    return service.students_by_department(department_id)
