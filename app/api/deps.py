# File: app/api/deps.py

from collections.abc import Generator
from typing import Annotated

from fastapi import Depends, Path
from sqlalchemy.orm import Session

from app.db.session import SessionLocal
from app.repositories.label import LabelRepository, SqlLabelRepository
from app.repositories.todo import SqlTodoRepository, TodoRepository

# ids are Postgres `integer` columns
INT4_MIN = -(2**31)
INT4_MAX = 2**31 - 1

RecordId = Annotated[int, Path(ge=INT4_MIN, le=INT4_MAX)]


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that provides a SQLAlchemy session.

    Usage in route functions:
        db: Session = Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_todo_repository(db: Session = Depends(get_db)) -> TodoRepository:
    """
    Repository used by the todo routes.

    Tests swap this out through `app.dependency_overrides`.
    """
    return SqlTodoRepository(db)


def get_label_repository(db: Session = Depends(get_db)) -> LabelRepository:
    return SqlLabelRepository(db)
