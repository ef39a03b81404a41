# File: app/repositories/todo.py

"""
Todo repositories.

TodoRepository is the interface the HTTP layer depends on. Two implementations:

  - SqlTodoRepository: backed by a SQLAlchemy session (Postgres in production)
  - InMemoryTodoRepository: a dict behind a lock, used by tests and local runs
"""

import logging
import threading
from abc import ABC, abstractmethod
from typing import Dict, List

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.todo import Todo
from app.repositories.errors import NotFoundError, UnexpectedError
from app.schemas.todo import TodoCreate, TodoRead, TodoUpdate

logger = logging.getLogger(__name__)


class TodoRepository(ABC):
    @abstractmethod
    def create(self, payload: TodoCreate) -> TodoRead:
        ...

    @abstractmethod
    def find(self, id: int) -> TodoRead:
        ...

    @abstractmethod
    def all(self) -> List[TodoRead]:
        ...

    @abstractmethod
    def update(self, id: int, payload: TodoUpdate) -> TodoRead:
        ...

    @abstractmethod
    def delete(self, id: int) -> None:
        ...


# -----------------------------
# Postgres
# -----------------------------
class SqlTodoRepository(TodoRepository):
    def __init__(self, db: Session):
        self.db = db

    def _fail(self, action: str, exc: SQLAlchemyError) -> UnexpectedError:
        self.db.rollback()
        logger.error("todo %s failed: %s", action, exc)
        return UnexpectedError(str(exc))

    def _get_row(self, id: int) -> Todo:
        try:
            row = self.db.get(Todo, id)
        except SQLAlchemyError as e:
            raise self._fail("find", e) from e
        if row is None:
            raise NotFoundError(id)
        return row

    def create(self, payload: TodoCreate) -> TodoRead:
        row = Todo(text=payload.text, completed=False)
        try:
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
        except SQLAlchemyError as e:
            raise self._fail("create", e) from e
        return TodoRead.model_validate(row)

    def find(self, id: int) -> TodoRead:
        return TodoRead.model_validate(self._get_row(id))

    def all(self) -> List[TodoRead]:
        try:
            rows = self.db.scalars(select(Todo).order_by(Todo.id)).all()
        except SQLAlchemyError as e:
            raise self._fail("all", e) from e
        return [TodoRead.model_validate(row) for row in rows]

    def update(self, id: int, payload: TodoUpdate) -> TodoRead:
        row = self._get_row(id)
        if payload.text is not None:
            row.text = payload.text
        if payload.completed is not None:
            row.completed = payload.completed
        try:
            self.db.commit()
            self.db.refresh(row)
        except SQLAlchemyError as e:
            raise self._fail("update", e) from e
        return TodoRead.model_validate(row)

    def delete(self, id: int) -> None:
        try:
            result = self.db.execute(delete(Todo).where(Todo.id == id))
            self.db.commit()
        except SQLAlchemyError as e:
            raise self._fail("delete", e) from e
        if result.rowcount == 0:
            raise NotFoundError(id)


# -----------------------------
# In-memory
# -----------------------------
class InMemoryTodoRepository(TodoRepository):
    def __init__(self):
        self._store: Dict[int, TodoRead] = {}
        self._next_id = 1
        self._lock = threading.RLock()

    def create(self, payload: TodoCreate) -> TodoRead:
        with self._lock:
            todo = TodoRead(id=self._next_id, text=payload.text, completed=False)
            self._store[todo.id] = todo
            self._next_id += 1
            return todo

    def find(self, id: int) -> TodoRead:
        with self._lock:
            todo = self._store.get(id)
        if todo is None:
            raise NotFoundError(id)
        return todo

    def all(self) -> List[TodoRead]:
        with self._lock:
            return [self._store[key] for key in sorted(self._store)]

    def update(self, id: int, payload: TodoUpdate) -> TodoRead:
        with self._lock:
            old = self.find(id)
            todo = TodoRead(
                id=id,
                text=payload.text if payload.text is not None else old.text,
                completed=payload.completed if payload.completed is not None else old.completed,
            )
            self._store[id] = todo
            return todo

    def delete(self, id: int) -> None:
        with self._lock:
            if self._store.pop(id, None) is None:
                raise NotFoundError(id)
