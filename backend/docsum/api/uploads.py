from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import FileResponse
from docsum.api.deps import get_caller
from docsum.api.errors import guarded
from docsum.core.config import settings
from docsum.core.exceptions import PayloadTooLarge
from docsum.schemas.upload import UploadResult
from docsum.services.identity import CallerContext
from docsum.services.storage import resolve_upload_path, save_upload

router = APIRouter()

UPLOAD_CHUNK_SIZE = 1024 * 1024


async def read_limited(file: UploadFile, limit: int) -> bytes:
    """Read the upload in chunks, stopping as soon as it exceeds ``limit`` bytes."""
    chunks = []
    total = 0
    while chunk := await file.read(UPLOAD_CHUNK_SIZE):
        total += len(chunk)
        if total > limit:
            raise PayloadTooLarge()
        chunks.append(chunk)
    return b"".join(chunks)


@router.post("/api/uploads", response_model=UploadResult)
async def upload_file(file: UploadFile = File(...), caller: CallerContext = Depends(get_caller)):
    content = await read_limited(file, settings.max_upload_bytes)
    with guarded("storing upload"):
        return save_upload(file.filename or "", content)


@router.get("/files/{key}")
def get_file(key: str):
    file_path = resolve_upload_path(key)
    headers = {
        "Content-Disposition": "inline",
        "Content-Security-Policy": "frame-ancestors *",
        "Accept-Ranges": "bytes",
    }
    return FileResponse(file_path, media_type="application/pdf", headers=headers)
