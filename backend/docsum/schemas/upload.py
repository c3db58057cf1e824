from pydantic import BaseModel


class UploadResult(BaseModel):
    url: str
    key: str
    name: str
    size: int
