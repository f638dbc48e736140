"""
Database Models (SQLAlchemy ORM)
=============================================================================
CONCEPT: ORM Models

The class below maps to the `employees` table. The API only ever reads from
it; rows are created by the seeding collaborator (employee_api.db.seed).

TABLE DESIGN:
  - id: INTEGER PRIMARY KEY AUTOINCREMENT (immutable, unique)
  - name, email: free text
  - sex: one of SEX_VALUES
=============================================================================
"""

from sqlalchemy import Column, Integer, String

from employee_api.db.engine import Base

SEX_VALUES = ("male", "female")


class Employee(Base):
    __tablename__ = "employees"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String)
    email = Column(String)
    sex = Column(String)

    def __repr__(self) -> str:
        return f"<Employee id={self.id} name={self.name!r}>"
