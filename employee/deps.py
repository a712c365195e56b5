from fastapi import Depends
from sqlalchemy.orm import Session

from core.database import get_db
from .service import EmployeeManager
from .store import EmployeeStore

def get_employee_store(db: Session = Depends(get_db)) -> EmployeeStore:
    return EmployeeStore(db)

def get_employee_manager(store: EmployeeStore = Depends(get_employee_store)) -> EmployeeManager:
    return EmployeeManager(store)
