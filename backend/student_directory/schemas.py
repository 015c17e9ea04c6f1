from typing import Any, Optional, Union

from pydantic import BaseModel


# Rows read from storage. Department identifiers are stored as opaque strings;
# the student identifier keeps its storage type until mapped below.


class DepartmentRecord(BaseModel):
    id: str
    name: str
    address: str

    model_config = {"from_attributes": True}


class StudentDepartmentRow(BaseModel):
    id: Any
    first_name: str
    last_name: str
    student_id: str
    address: str
    department_id: Optional[str] = None
    department_ref_id: Optional[str] = None
    department_name: Optional[str] = None
    department_address: Optional[str] = None


# API shapes. Field names are part of the external contract.


class DepartmentResponse(BaseModel):
    id: str
    name: Optional[str] = None
    address: Optional[str] = None


class StudentResponse(BaseModel):
    id: str
    first_name: str
    last_name: str
    student_id: str
    address: str
    department: Optional[DepartmentResponse] = None


class StudentCreate(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    student_id: Optional[str] = None
    address: Optional[str] = None
    department_id: Optional[Union[str, int]] = None
