from datetime import datetime
from sqlalchemy import String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from docsum.models.base import Base


class Folder(Base):
    __tablename__ = "folders"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True)
    name: Mapped[str] = mapped_column(String(255))
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    user = relationship("User", back_populates="folders")
    document_links = relationship("DocumentFolder", back_populates="folder", cascade="all, delete-orphan")


class DocumentFolder(Base):
    __tablename__ = "document_folders"
    __table_args__ = (UniqueConstraint("document_id", "folder_id", name="uq_document_folder"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    document_id: Mapped[int] = mapped_column(ForeignKey("documents.id"), index=True)
    folder_id: Mapped[int] = mapped_column(ForeignKey("folders.id"), index=True)

    document = relationship("Document", back_populates="folder_links")
    folder = relationship("Folder", back_populates="document_links")
