from docsum.models.base import Base
from docsum.models.user import User
from docsum.models.document import Document
from docsum.models.folder import Folder, DocumentFolder
from docsum.models.summary import Summary

__all__ = [
    "Base",
    "User",
    "Document",
    "Folder",
    "DocumentFolder",
    "Summary",
]
