from fastapi import APIRouter, Depends, Path

from .deps import get_employee_manager
from .models import MAX_CLIENT_ID
from .schema import EmployeeSchema, EmployeePayload
from .service import EmployeeManager

employee_router = APIRouter(prefix="/employees", tags=["Employees"])

# List all employees
@employee_router.get("", response_model=list[EmployeeSchema])
def list_employees(manager: EmployeeManager = Depends(get_employee_manager)):
    return manager.list_employees()

# Create employee, the id is always assigned by the store
@employee_router.post("", response_model=EmployeeSchema)
def employee_post(payload: EmployeePayload, manager: EmployeeManager = Depends(get_employee_manager)):
    return manager.create_employee(payload)

# Get employee by id, EmployeeNotFound is rendered as a 404 by core.errors
@employee_router.get("/{employee_id}", response_model=EmployeeSchema)
def employee_detail(employee_id: int, manager: EmployeeManager = Depends(get_employee_manager)):
    return manager.get_employee(employee_id)

# Create or replace employee with id
@employee_router.put("/{employee_id}", response_model=EmployeeSchema)
def employee_put(payload: EmployeePayload, employee_id: int = Path(ge=1, le=MAX_CLIENT_ID), manager: EmployeeManager = Depends(get_employee_manager)):
    return manager.replace_employee(employee_id, payload)

# Delete employee, missing ids are not an error
@employee_router.delete("/{employee_id}")
def employee_delete(employee_id: int, manager: EmployeeManager = Depends(get_employee_manager)):
    manager.delete_employee(employee_id)
    return {"message": "employee deleted"}
