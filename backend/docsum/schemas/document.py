from datetime import datetime
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class DocumentOut(BaseModel):
    id: int
    user_id: int
    title: str
    file_name: str
    file_url: str
    file_key: str
    file_size: int
    created_at: datetime

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class DocumentCreate(BaseModel):
    """Metadata of a file the uploader has already stored."""

    title: str = ""
    file_name: str = Field(min_length=1)
    file_url: str = Field(min_length=1)
    file_key: str = Field(min_length=1)
    file_size: int = Field(ge=0)

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class DocumentSaved(BaseModel):
    success: bool
    document_id: int | None = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class DeleteResult(BaseModel):
    success: bool
