# File: app/api/routes_todos.py

from typing import List

from fastapi import APIRouter, Depends, Response, status

from app.api.deps import RecordId, get_todo_repository
from app.repositories.todo import TodoRepository
from app.schemas.todo import TodoCreate, TodoRead, TodoUpdate

router = APIRouter(tags=["todos"])


@router.post(
    "",
    response_model=TodoRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create todo",
)
def create_todo(
    payload: TodoCreate,
    repository: TodoRepository = Depends(get_todo_repository),
):
    return repository.create(payload)


@router.get("", response_model=List[TodoRead], summary="List todos")
def all_todo(repository: TodoRepository = Depends(get_todo_repository)):
    return repository.all()


@router.get("/{id}", response_model=TodoRead, summary="Find todo")
def find_todo(id: RecordId, repository: TodoRepository = Depends(get_todo_repository)):
    """
    GET /todos/{id}

    404 when the todo does not exist.
    """
    return repository.find(id)


@router.patch("/{id}", response_model=TodoRead, summary="Update todo")
def update_todo(
    id: RecordId,
    payload: TodoUpdate,
    repository: TodoRepository = Depends(get_todo_repository),
):
    """
    Partial update: fields left out of the body keep their current value.
    """
    return repository.update(id, payload)


@router.delete(
    "/{id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete todo",
)
def delete_todo(id: RecordId, repository: TodoRepository = Depends(get_todo_repository)):
    repository.delete(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
