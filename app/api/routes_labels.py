# File: app/api/routes_labels.py

from typing import List

from fastapi import APIRouter, Depends, Response, status

from app.api.deps import RecordId, get_label_repository
from app.repositories.label import LabelRepository
from app.schemas.label import LabelCreate, LabelRead

router = APIRouter(tags=["labels"])


@router.post(
    "",
    response_model=LabelRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create label",
)
def create_label(
    payload: LabelCreate,
    repository: LabelRepository = Depends(get_label_repository),
):
    """
    409 when a label with the same name already exists.
    """
    return repository.create(payload.name)


@router.get("", response_model=List[LabelRead], summary="List labels")
def all_label(repository: LabelRepository = Depends(get_label_repository)):
    return repository.all()


@router.delete(
    "/{id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete label",
)
def delete_label(id: RecordId, repository: LabelRepository = Depends(get_label_repository)):
    repository.delete(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
