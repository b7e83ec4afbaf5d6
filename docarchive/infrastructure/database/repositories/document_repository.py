"""Concrete repository implementation for Document backed by SQLAlchemy."""

from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from docarchive.application.interfaces import DocumentRepository
from docarchive.domain.entities import (
    ArchiveMetadata,
    Document,
    StorageLocation,
    VersionType,
)
from docarchive.infrastructure.database.models import DocumentModel


def metadata_to_json(metadata: ArchiveMetadata | None) -> dict[str, Any] | None:
    if metadata is None:
        return None
    location = metadata.storage_location
    return {
        "title": metadata.title,
        "version_type": metadata.version_type.value if metadata.version_type else None,
        "expiry_date": metadata.expiry_date,
        "storage_location": (
            {"cabinet": location.cabinet, "shelf": location.shelf, "folder": location.folder}
            if location is not None
            else None
        ),
        "notes": metadata.notes,
    }


def metadata_from_json(raw: dict[str, Any] | None) -> ArchiveMetadata | None:
    if raw is None:
        return None
    location = raw.get("storage_location")
    version_type = raw.get("version_type")
    return ArchiveMetadata(
        title=raw.get("title"),
        version_type=VersionType(version_type) if version_type else None,
        expiry_date=raw.get("expiry_date"),
        storage_location=StorageLocation(**location) if location is not None else None,
        notes=raw.get("notes"),
    )


class SQLAlchemyDocumentRepository(DocumentRepository):
    """Implements the DocumentRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: DocumentModel) -> Document:
        """Map ORM model → domain entity."""
        return Document(
            id=model.id,
            template_id=model.template_id,
            data=dict(model.data or {}),
            archived=bool(model.archived),
            archived_at=model.archived_at,
            archive_metadata=metadata_from_json(model.archive_metadata),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Document) -> DocumentModel:
        """Map domain entity → ORM model (for creation)."""
        return DocumentModel(
            template_id=entity.template_id,
            data=dict(entity.data),
            archived=entity.archived,
            archived_at=entity.archived_at,
            archive_metadata=metadata_to_json(entity.archive_metadata),
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    async def get_by_id(self, document_id: int) -> Document | None:
        result = await self._session.get(DocumentModel, document_id)
        return self._to_entity(result) if result else None

    async def get_all(
        self,
        *,
        template_id: int | None = None,
        archived: bool | None = None,
    ) -> list[Document]:
        stmt = select(DocumentModel)

        if template_id is not None:
            stmt = stmt.where(DocumentModel.template_id == template_id)
        if archived is not None:
            stmt = stmt.where(DocumentModel.archived == archived)

        stmt = stmt.order_by(DocumentModel.id)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, document: Document) -> Document:
        model = self._to_model(document)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, document: Document) -> Document:
        model = await self._session.get(DocumentModel, document.id)
        if model is None:
            raise ValueError(f"Document {document.id} not found in database")
        model.data = dict(document.data)
        model.archived = document.archived
        model.archived_at = document.archived_at
        model.archive_metadata = metadata_to_json(document.archive_metadata)
        model.updated_at = document.updated_at
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, document_id: int) -> bool:
        model = await self._session.get(DocumentModel, document_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True

    async def delete_by_template(self, template_id: int) -> int:
        stmt = delete(DocumentModel).where(DocumentModel.template_id == template_id)
        result = await self._session.execute(stmt)
        await self._session.flush()
        return result.rowcount or 0
