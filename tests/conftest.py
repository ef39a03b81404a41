# File: tests/conftest.py

import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_label_repository, get_todo_repository
from app.core.config import settings
from app.main import create_application
from app.repositories.label import InMemoryLabelRepository
from app.repositories.todo import InMemoryTodoRepository


def pytest_addoption(parser):
    parser.addoption(
        "--standalone",
        action="store_true",
        default=False,
        help="skip tests that need a running Postgres",
    )


def pytest_collection_modifyitems(config, items):
    if config.getoption("--standalone"):
        reason = "standalone run (--standalone)"
    elif not settings.database_test:
        reason = "DATABASE_TEST is off"
    elif not settings.database_url:
        reason = "undefined [DATABASE_URL]"
    else:
        return

    skip_database = pytest.mark.skip(reason=reason)
    for item in items:
        if "database" in item.keywords:
            item.add_marker(skip_database)


@pytest.fixture
def todo_repository():
    return InMemoryTodoRepository()


@pytest.fixture
def label_repository():
    return InMemoryLabelRepository()


@pytest.fixture
def client(todo_repository, label_repository):
    app = create_application()
    app.dependency_overrides[get_todo_repository] = lambda: todo_repository
    app.dependency_overrides[get_label_repository] = lambda: label_repository
    with TestClient(app) as c:
        yield c
