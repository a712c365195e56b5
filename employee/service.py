import logging
from typing import Optional, List

from core.errors import EmployeeNotFound
from .models import Employee
from .schema import EmployeePayload
from .store import EmployeeStore

logger = logging.getLogger(__name__)

DEMO_EMPLOYEES = [
    EmployeePayload(name="Bilbo Baggins", role="burglar"),
    EmployeePayload(name="Frodo Baggins", role="thief"),
]


class EmployeeManager:
    # get_employee is the one call that adds behaviour: a missing row becomes EmployeeNotFound
    def __init__(self, store: EmployeeStore):
        self.store = store

    def list_employees(self) -> List[Employee]:
        return self.store.get_all()

    def find_employee(self, employee_id: int) -> Optional[Employee]:
        return self.store.get_by_id(employee_id)

    def get_employee(self, employee_id: int) -> Employee:
        db_employee = self.store.get_by_id(employee_id)
        if db_employee is None:
            raise EmployeeNotFound(employee_id)
        return db_employee

    def create_employee(self, payload: EmployeePayload) -> Employee:
        db_employee = self.store.insert(payload)
        logger.info("Created %r", db_employee)
        return db_employee

    def replace_employee(self, employee_id: int, payload: EmployeePayload) -> Employee:
        db_employee = self.store.upsert(employee_id, payload)
        logger.info("Saved %r", db_employee)
        return db_employee

    def delete_employee(self, employee_id: int) -> bool:
        deleted = self.store.delete_by_id(employee_id)
        if deleted:
            logger.info("Deleted employee %s", employee_id)
        return deleted


def seed_demo_employees(store: EmployeeStore) -> List[Employee]:
    if store.count():
        return []
    seeded = []
    for payload in DEMO_EMPLOYEES:
        db_employee = store.insert(payload)
        logger.info("Preloading %r", db_employee)
        seeded.append(db_employee)
    return seeded
