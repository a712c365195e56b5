from typing import Optional, List
from sqlalchemy.orm import Session
from sqlalchemy import func, select, text
from sqlalchemy.exc import IntegrityError
from .models import Employee, MIN_STORED_ID, MAX_STORED_ID
from .schema import EmployeePayload

# keeps the postgres serial ahead of ids inserted explicitly, never moves it back
ADVANCE_ID_SEQUENCE = text(
    "SELECT setval(pg_get_serial_sequence('employees', 'id'), "
    "GREATEST(:employee_id, COALESCE(pg_sequence_last_value(pg_get_serial_sequence('employees', 'id')::regclass), 0)))"
)


def _storable(employee_id: int) -> bool:
    return MIN_STORED_ID <= employee_id <= MAX_STORED_ID


class EmployeeStore:
    def __init__(self, db: Session):
        self.db = db

    def get_all(self) -> List[Employee]:
        statement = select(Employee).order_by(Employee.id.asc())
        return list(self.db.scalars(statement))

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        if not _storable(employee_id):
            return None
        return self.db.get(Employee, employee_id)

    def insert(self, payload: EmployeePayload) -> Employee:
        db_employee = Employee(name=payload.name, role=payload.role)
        self.db.add(db_employee)
        self.db.commit()
        self.db.refresh(db_employee)
        return db_employee

    def upsert(self, employee_id: int, payload: EmployeePayload) -> Employee:
        db_employee = self.db.get(Employee, employee_id)
        if db_employee is None:
            db_employee = Employee(id=employee_id, name=payload.name, role=payload.role)
            self.db.add(db_employee)
            try:
                self.db.flush()
                self._advance_id_sequence(employee_id)
                self.db.commit()
            except IntegrityError:
                # another request created this id first, fall through to replace
                self.db.rollback()
                db_employee = self.db.get(Employee, employee_id)
                if db_employee is None:
                    raise
            else:
                self.db.refresh(db_employee)
                return db_employee

        db_employee.name = payload.name
        db_employee.role = payload.role
        self.db.commit()
        self.db.refresh(db_employee)
        return db_employee

    def delete_by_id(self, employee_id: int) -> bool:
        db_employee = self.get_by_id(employee_id)
        if not db_employee:
            return False
        self.db.delete(db_employee)
        self.db.commit()
        return True

    def count(self) -> int:
        return self.db.scalar(select(func.count()).select_from(Employee))

    def _advance_id_sequence(self, employee_id: int) -> None:
        # sqlite AUTOINCREMENT already tracks the largest id ever inserted
        if self.db.get_bind().dialect.name == "postgresql":
            self.db.execute(ADVANCE_ID_SEQUENCE, {"employee_id": employee_id})
