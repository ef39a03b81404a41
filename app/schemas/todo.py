# File: app/schemas/todo.py

from typing import Optional

from pydantic import BaseModel, StrictBool, field_validator

TEXT_MAX_LENGTH = 100


def check_text_length(value: str) -> str:
    """Shared rule for todo text and label names: 1..100 characters."""
    if len(value) < 1:
        raise ValueError("Can not be empty")
    if len(value) > TEXT_MAX_LENGTH:
        raise ValueError("Over text length")
    return value


class TodoCreate(BaseModel):
    text: str

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        return check_text_length(v)


class TodoUpdate(BaseModel):
    text: Optional[str] = None
    completed: Optional[StrictBool] = None

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        return check_text_length(v)


class TodoRead(BaseModel):
    id: int
    text: str
    completed: bool

    class Config:
        from_attributes = True
