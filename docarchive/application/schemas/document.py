"""Pydantic DTOs for documents and archive metadata.

Two archive contracts coexist on purpose:

* ``ArchiveMetadataSchema`` — the stored shape. Every attribute is optional
  so older or partially filled records stay readable.
* ``ArchiveRequest`` — what the archiving form requires before submitting:
  title, version type, cabinet and shelf.
"""

from datetime import datetime
from typing import Any

from pydantic import Field

from docarchive.application.schemas.base import CamelModel
from docarchive.domain.entities import VersionType


class DocumentCreate(CamelModel):
    """Schema for creating a document against a template."""

    template_id: int = Field(..., examples=[1])
    data: dict[str, Any] = Field(
        default_factory=dict,
        examples=[{"field_1": "5", "q_question_1": True}],
    )


class DocumentUpdate(CamelModel):
    """Partial update — only the keys present in ``data`` are validated."""

    template_id: int | None = None
    data: dict[str, Any] | None = None


class StorageLocationSchema(CamelModel):
    cabinet: str | None = None
    shelf: str | None = None
    folder: str | None = None


class ArchiveMetadataSchema(CamelModel):
    """Stored archive metadata — lenient."""

    title: str | None = None
    version_type: VersionType | None = None
    expiry_date: str | None = None
    storage_location: StorageLocationSchema | None = None
    notes: str | None = None


class StrictStorageLocation(CamelModel):
    cabinet: str = Field(..., min_length=1)
    shelf: str = Field(..., min_length=1)
    folder: str | None = None


class ArchiveRequest(CamelModel):
    """Archiving form contract — strict."""

    title: str = Field(..., min_length=1)
    version_type: VersionType
    expiry_date: str | None = None
    storage_location: StrictStorageLocation
    notes: str | None = None


class DocumentResponse(CamelModel):
    """Schema returned to the client."""

    id: int
    template_id: int
    data: dict[str, Any]
    archived: bool
    archived_at: datetime | None
    archive_metadata: ArchiveMetadataSchema | None
    created_at: datetime
    updated_at: datetime
