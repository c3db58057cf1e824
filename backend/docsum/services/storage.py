import logging
import os
import re
import uuid
from docsum.core.config import settings
from docsum.core.exceptions import InvalidInput, NotFound, PayloadTooLarge
from docsum.schemas.upload import UploadResult

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Untitled Document"
_EXTENSION_RE = re.compile(r"\.[^/.]+$")
_KEY_RE = re.compile(r"[0-9a-f]{32}_[\w.\-]+")


def default_title(title: str | None, file_name: str | None) -> str:
    """Caller's title if given, else the file name minus its last extension, else a fallback."""
    title = (title or "").strip()
    if title:
        return title
    stem = _EXTENSION_RE.sub("", file_name or "")
    return stem or DEFAULT_TITLE


def _safe_name(filename: str) -> str:
    name = os.path.basename(filename).replace(" ", "_")
    return re.sub(r"[^\w.\-]", "", name) or "document.pdf"


def save_upload(filename: str, data: bytes) -> UploadResult:
    if not filename or not filename.lower().endswith(".pdf"):
        raise InvalidInput("Only PDF files are supported")
    if len(data) > settings.max_upload_bytes:
        raise PayloadTooLarge()
    os.makedirs(settings.upload_dir, exist_ok=True)
    key = f"{uuid.uuid4().hex}_{_safe_name(filename)}"
    file_path = os.path.join(settings.upload_dir, key)
    with open(file_path, "wb") as f:
        f.write(data)
    logger.info("File stored", extra={"file_key": key, "size": len(data)})
    url = f"{settings.public_base_url.rstrip('/')}/files/{key}"
    return UploadResult(url=url, key=key, name=filename, size=len(data))


def resolve_upload_path(key: str) -> str:
    if not _KEY_RE.fullmatch(key):
        raise NotFound("File not found")
    file_path = os.path.join(settings.upload_dir, key)
    if not os.path.exists(file_path):
        raise NotFound("File not found")
    return file_path
