from datetime import datetime
from sqlalchemy import String, DateTime, ForeignKey, BigInteger
from sqlalchemy.orm import Mapped, mapped_column, relationship
from docsum.models.base import Base


class Document(Base):
    __tablename__ = "documents"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True)
    title: Mapped[str] = mapped_column(String(255))
    file_name: Mapped[str] = mapped_column(String(512))
    file_url: Mapped[str] = mapped_column(String(1024))
    file_key: Mapped[str] = mapped_column(String(255))
    file_size: Mapped[int] = mapped_column(BigInteger)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    user = relationship("User", back_populates="documents")
    folder_links = relationship("DocumentFolder", back_populates="document")
    summaries = relationship(
        "Summary",
        back_populates="document",
        order_by="Summary.id",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
