"""
Employee ORM model.

PostgreSQL folds unquoted identifiers to lower case, so the table created by
`CREATE TABLE Employee (ID SERIAL ..., FirstName ...)` is physically
`employee(id, firstname, ...)`. The names here are lower case to address
that same table.

Dependencies: sqlalchemy
System role: Seed target table definition
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from db_init.boundary.db.base import Base


class EmployeeModel(Base):
    """
    Employee row.

    Attributes:
        id: Auto-increment integer primary key (SERIAL on PostgreSQL)
        firstname: First name (max 50 chars)
        lastname: Last name (max 50 chars)
        zip: Postal code (max 10 chars)
        country: Country (max 50 chars)
        salary: Salary
    """

    __tablename__ = "employee"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    firstname: Mapped[str | None] = mapped_column(String(50))
    lastname: Mapped[str | None] = mapped_column(String(50))
    zip: Mapped[str | None] = mapped_column(String(10))
    country: Mapped[str | None] = mapped_column(String(50))
    salary: Mapped[int | None] = mapped_column(Integer)

    def __repr__(self) -> str:
        return f"<EmployeeModel(id={self.id}, firstname={self.firstname}, lastname={self.lastname})>"
