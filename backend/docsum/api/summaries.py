import logging
from fastapi import APIRouter, Depends
from redis.exceptions import RedisError
from sqlalchemy.orm import Session
from docsum.api.deps import get_caller
from docsum.api.errors import guarded
from docsum.db.session import get_db
from docsum.schemas.document import DocumentCreate, DocumentOut, DocumentSaved
from docsum.schemas.summary import DocumentSummaries, RegenerationRequest, RegenerationResponse, SummaryOut
from docsum.services import document_store
from docsum.services.identity import CallerContext, ensure_user, find_user, resolve_user
from docsum.services.regeneration import enqueue_generation
from docsum.services.storage import default_title

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/summaries")


@router.get("", response_model=list[DocumentOut])
def list_documents(caller: CallerContext = Depends(get_caller), db: Session = Depends(get_db)):
    with guarded("listing documents", db):
        user = find_user(db, caller)
        if not user:
            return []
        return document_store.list_documents(db, user)


@router.post("", response_model=DocumentSaved)
def save_document(
    payload: DocumentCreate,
    caller: CallerContext = Depends(get_caller),
    db: Session = Depends(get_db),
):
    with guarded("saving document", db):
        user = ensure_user(db, caller)
        document = document_store.create_document(
            db,
            user,
            title=default_title(payload.title, payload.file_name),
            file_name=payload.file_name,
            file_url=payload.file_url,
            file_key=payload.file_key,
            file_size=payload.file_size,
        )
        try:
            enqueue_generation(document)
        except RedisError:
            logger.warning("Could not enqueue summary generation", extra={"document_id": document.id}, exc_info=True)
        return DocumentSaved(success=True, document_id=document.id)


@router.get("/{document_id}", response_model=DocumentSummaries)
def get_document_summaries(
    document_id: str,
    caller: CallerContext = Depends(get_caller),
    db: Session = Depends(get_db),
):
    doc_id = document_store.parse_document_id(document_id)
    with guarded("fetching summaries", db):
        user = resolve_user(db, caller)
        document = document_store.get_owned_document(db, user, doc_id)
        summaries = document_store.list_summaries(db, document)
        return DocumentSummaries(
            document=DocumentOut.model_validate(document),
            summaries=[SummaryOut.model_validate(s) for s in summaries],
        )


@router.post("/{document_id}/regenerate", response_model=RegenerationResponse)
def regenerate_summaries(
    document_id: str,
    options: RegenerationRequest,
    caller: CallerContext = Depends(get_caller),
    db: Session = Depends(get_db),
):
    doc_id = document_store.parse_document_id(document_id)
    with guarded("regenerating summaries", db):
        user = resolve_user(db, caller)
        document = document_store.get_owned_document(db, user, doc_id)
        job_id = enqueue_generation(document, options)
        return RegenerationResponse(success=True, job_id=job_id)
