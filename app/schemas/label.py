# File: app/schemas/label.py

from pydantic import BaseModel, field_validator

from app.schemas.todo import check_text_length


class LabelCreate(BaseModel):
    name: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return check_text_length(v)


class LabelRead(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True
