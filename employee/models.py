from __future__ import annotations
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import BigInteger, Integer, String
from core.database import Base

# storable range of the id column on every backend
MIN_STORED_ID = -(2**63)
MAX_STORED_ID = 2**63 - 1

# upper bound for ids chosen by a client through PUT, leaves the counter room to grow
MAX_CLIENT_ID = 2**31 - 1

class Employee(Base):
    __tablename__ = "employees"

    # INTEGER on sqlite keeps the rowid alias that AUTOINCREMENT needs
    id: Mapped[int] = mapped_column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(255), nullable=False)

    __table_args__ = (
        {"sqlite_autoincrement": True},  # ids of deleted rows are never handed out again
    )

    def __repr__(self) -> str:
        return f"Employee(id={self.id!r}, name={self.name!r}, role={self.role!r})"
