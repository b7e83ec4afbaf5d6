"""SQLAlchemy ORM model for the Document entity."""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Index, Integer, JSON
from sqlalchemy.orm import Mapped, mapped_column

from docarchive.infrastructure.database.base import Base


class DocumentModel(Base):
    """ORM model — maps to the 'documents' table.

    ``template_id`` carries no foreign key: a document may outlive the
    template it was created from.
    """

    __tablename__ = "documents"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    template_id: Mapped[int] = mapped_column(Integer, nullable=False)
    data: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    archived: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    archived_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    archive_metadata: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_documents_template", "template_id"),
        Index("ix_documents_archived", "archived"),
    )

    def __repr__(self) -> str:
        return (
            f"<DocumentModel(id={self.id}, template_id={self.template_id}, "
            f"archived={self.archived})>"
        )
