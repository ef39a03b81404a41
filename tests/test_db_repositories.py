# File: tests/test_db_repositories.py

"""
Scenario tests against a real Postgres.

Needs DATABASE_URL (e.g. from .env) and a running database:
    make db && make dev   # or: python -m app.db.init_db
Skipped with `pytest --standalone` (make test-s).
"""

import uuid

import pytest
from sqlalchemy import select

from app.db.init_db import init_db
from app.db.session import SessionLocal
from app.models.todo import Todo
from app.repositories.errors import DuplicateError, NotFoundError
from app.repositories.label import SqlLabelRepository
from app.repositories.todo import SqlTodoRepository
from app.schemas.todo import TodoCreate, TodoUpdate

pytestmark = pytest.mark.database


@pytest.fixture
def db():
    init_db()
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def test_todo_crud_scenario(db):
    repository = SqlTodoRepository(db)
    todo_text = "[crud_scenario] text"

    # create
    created = repository.create(TodoCreate(text=todo_text))
    assert created.text == todo_text
    assert not created.completed

    # find
    todo = repository.find(created.id)
    assert todo == created

    # all
    assert created in repository.all()

    # update
    updated_text = "[crud_scenario] updated text"
    todo = repository.update(todo.id, TodoUpdate(text=updated_text, completed=True))
    assert todo.text == updated_text
    assert todo.completed

    # delete
    repository.delete(todo.id)
    with pytest.raises(NotFoundError):
        repository.find(created.id)

    rows = db.scalars(select(Todo).where(Todo.id == todo.id)).all()
    assert rows == []


def test_todo_delete_missing(db):
    repository = SqlTodoRepository(db)
    created = repository.create(TodoCreate(text="[delete_missing] text"))
    repository.delete(created.id)

    with pytest.raises(NotFoundError):
        repository.delete(created.id)


def test_label_crud_scenario(db):
    repository = SqlLabelRepository(db)
    label_text = f"test_label_{uuid.uuid4().hex[:8]}"

    label = repository.create(label_text)
    assert label.name == label_text

    labels = repository.all()
    assert labels[-1].name == label_text

    with pytest.raises(DuplicateError):
        repository.create(label_text)

    repository.delete(label.id)
    assert label not in repository.all()
