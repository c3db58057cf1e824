from fastapi import APIRouter
from docsum.api import documents, summaries, uploads

api_router = APIRouter()
api_router.include_router(documents.router, tags=["documents"])
api_router.include_router(summaries.router, tags=["summaries"])
api_router.include_router(uploads.router, tags=["uploads"])
