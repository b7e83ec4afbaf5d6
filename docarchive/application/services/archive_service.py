"""Application service for the archive lifecycle of documents.

Unarchived -> Archived -> Unarchived, with no terminal state. Archiving
replaces the metadata wholesale; unarchiving discards it.
"""

import logging

from pydantic import ValidationError

from docarchive.application.interfaces import DocumentRepository
from docarchive.application.schemas import ArchiveMetadataSchema, ArchiveRequest
from docarchive.application.schemas.errors import format_errors, summarize_errors
from docarchive.domain.entities import ArchiveMetadata, Document, StorageLocation
from docarchive.domain.exceptions import DomainValidationError, EntityNotFoundError

logger = logging.getLogger(__name__)


def _to_metadata(schema: ArchiveMetadataSchema) -> ArchiveMetadata:
    location = schema.storage_location
    return ArchiveMetadata(
        title=schema.title,
        version_type=schema.version_type,
        expiry_date=schema.expiry_date,
        storage_location=(
            StorageLocation(cabinet=location.cabinet, shelf=location.shelf, folder=location.folder)
            if location is not None
            else None
        ),
        notes=schema.notes,
    )


class ArchiveService:
    """Archives and unarchives documents.

    ``strict_requests`` additionally enforces the archiving form contract
    (``ArchiveRequest``) on top of the lenient stored shape.
    """

    def __init__(self, repository: DocumentRepository, strict_requests: bool = False):
        self._repository = repository
        self._strict = strict_requests

    async def list_archived(self) -> list[Document]:
        return await self._repository.get_all(archived=True)

    async def archive_document(self, document_id: int, metadata: ArchiveMetadataSchema) -> Document:
        if self._strict:
            self._check_request(metadata)

        document = await self._get(document_id)
        document.archive(_to_metadata(metadata))
        updated = await self._repository.update(document)
        logger.info(
            "Archived document %s (cabinet=%s)",
            document_id, updated.archive_metadata.cabinet if updated.archive_metadata else None,
        )
        return updated

    async def unarchive_document(self, document_id: int) -> Document:
        document = await self._get(document_id)
        document.unarchive()
        updated = await self._repository.update(document)
        logger.info("Unarchived document %s", document_id)
        return updated

    async def _get(self, document_id: int) -> Document:
        document = await self._repository.get_by_id(document_id)
        if document is None:
            raise EntityNotFoundError("Document", document_id)
        return document

    @staticmethod
    def _check_request(metadata: ArchiveMetadataSchema) -> None:
        try:
            ArchiveRequest.model_validate(metadata.model_dump(exclude_none=True))
        except ValidationError as exc:
            messages = summarize_errors(exc.errors())
            raise DomainValidationError(format_errors(messages), messages) from exc
