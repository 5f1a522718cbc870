from sqlmodel import SQLModel, Field
from typing import Optional

class Employee(SQLModel, table=True):
    """Employee record; id is assigned by the database on first save."""
    __tablename__ = "employees"
    # AUTOINCREMENT keeps SQLite from recycling ids of deleted rows
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    first_name: str = Field(max_length=255)
    last_name: str = Field(index=True, max_length=255)

    def __str__(self) -> str:
        return f"Employee[id={self.id}, firstName='{self.first_name}', lastName='{self.last_name}']"
