import logging
import re
from sqlalchemy.orm import Session
from docsum.core.exceptions import InvalidInput, NotFound
from docsum.models import Document, DocumentFolder, Summary, User
from docsum.services.authorization import require_owner

logger = logging.getLogger(__name__)

_DOCUMENT_ID_RE = re.compile(r"-?\d+")
# primary keys are 32-bit INTEGER columns on Postgres
_MIN_DOCUMENT_ID = -(2**31)
_MAX_DOCUMENT_ID = 2**31 - 1


def parse_document_id(raw: str) -> int:
    value = (raw or "").strip()
    if not _DOCUMENT_ID_RE.fullmatch(value):
        raise InvalidInput("Invalid document ID")
    return int(value)


def get_document(db: Session, document_id: int) -> Document:
    if not _MIN_DOCUMENT_ID <= document_id <= _MAX_DOCUMENT_ID:
        raise NotFound("Document not found")
    document = db.get(Document, document_id)
    if not document:
        raise NotFound("Document not found")
    return document


def get_owned_document(db: Session, user: User, document_id: int) -> Document:
    document = get_document(db, document_id)
    require_owner(user, document)
    return document


def list_documents(db: Session, user: User) -> list[Document]:
    return (
        db.query(Document)
        .filter(Document.user_id == user.id)
        .order_by(Document.created_at.desc(), Document.id.desc())
        .all()
    )


def list_summaries(db: Session, document: Document) -> list[Summary]:
    return db.query(Summary).filter(Summary.document_id == document.id).order_by(Summary.id).all()


def create_document(
    db: Session,
    user: User,
    *,
    title: str,
    file_name: str,
    file_url: str,
    file_key: str,
    file_size: int,
) -> Document:
    document = Document(
        user_id=user.id,
        title=title,
        file_name=file_name,
        file_url=file_url,
        file_key=file_key,
        file_size=file_size,
    )
    db.add(document)
    db.commit()
    db.refresh(document)
    logger.info("Document saved", extra={"document_id": document.id, "user_id": user.id})
    return document


def delete_document(db: Session, document: Document) -> None:
    """Remove the document's folder links and then the document, in one transaction.

    Summaries go with the row through the ``ON DELETE CASCADE`` on their foreign key.
    """
    document_id = document.id
    try:
        removed_links = (
            db.query(DocumentFolder)
            .filter(DocumentFolder.document_id == document_id)
            .delete(synchronize_session=False)
        )
        db.delete(document)
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.info("Document deleted", extra={"document_id": document_id, "folder_links": removed_links})
