from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from docsum.schemas.document import DocumentOut


class SummaryOut(BaseModel):
    id: int
    type: str
    content: str
    title: str | None = None
    order: int | None = None

    class Config:
        from_attributes = True


class DocumentSummaries(BaseModel):
    document: DocumentOut
    summaries: list[SummaryOut]


class RegenerationRequest(BaseModel):
    focus_chapters: list[str] = Field(default_factory=list)
    focus_topics: list[str] = Field(default_factory=list)
    custom_instructions: str = ""

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class RegenerationResponse(BaseModel):
    success: bool
    job_id: str | None = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True
