from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from docsum.api.deps import get_caller
from docsum.api.errors import guarded
from docsum.db.session import get_db
from docsum.schemas.document import DeleteResult, DocumentOut
from docsum.services import document_store
from docsum.services.identity import CallerContext, resolve_user

router = APIRouter(prefix="/api/documents")


@router.get("/{document_id}", response_model=DocumentOut)
def get_document(document_id: str, caller: CallerContext = Depends(get_caller), db: Session = Depends(get_db)):
    doc_id = document_store.parse_document_id(document_id)
    with guarded("fetching document", db):
        user = resolve_user(db, caller)
        return document_store.get_owned_document(db, user, doc_id)


@router.delete("/{document_id}", response_model=DeleteResult)
def delete_document(document_id: str, caller: CallerContext = Depends(get_caller), db: Session = Depends(get_db)):
    doc_id = document_store.parse_document_id(document_id)
    with guarded("deleting document", db):
        user = resolve_user(db, caller)
        document = document_store.get_owned_document(db, user, doc_id)
        document_store.delete_document(db, document)
    return DeleteResult(success=True)
