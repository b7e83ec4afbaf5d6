"""Application service (use case) for documents created from templates."""

import logging
from typing import Any

from docarchive.application.interfaces import DocumentRepository, TemplateRepository
from docarchive.application.schemas import DocumentCreate, DocumentUpdate
from docarchive.application.services.document_validator import DocumentValidator
from docarchive.domain.entities import Document, FieldValue
from docarchive.domain.exceptions import (
    DocumentValidationError,
    EntityNotFoundError,
    TemplateNotFoundError,
)

logger = logging.getLogger(__name__)


def _stored_payload(submitted: dict[str, Any], values: dict[str, FieldValue]) -> dict[str, Any]:
    """Submitted payload with validated keys replaced by their normalised form."""
    return {**submitted, **{key: value.raw for key, value in values.items()}}


class DocumentService:
    """Creates, edits and removes documents.

    Every write of document data goes through the contract generated from
    the document's template at that moment.
    """

    def __init__(
        self,
        repository: DocumentRepository,
        template_repository: TemplateRepository,
        validator: DocumentValidator | None = None,
    ):
        self._repository = repository
        self._templates = template_repository
        self._validator = validator or DocumentValidator()

    async def get_document(self, document_id: int) -> Document:
        document = await self._repository.get_by_id(document_id)
        if document is None:
            raise EntityNotFoundError("Document", document_id)
        return document

    async def list_documents(self) -> list[Document]:
        return await self._repository.get_all()

    async def list_by_template(self, template_id: int) -> list[Document]:
        return await self._repository.get_all(template_id=template_id)

    async def create_document(self, data: DocumentCreate) -> Document:
        template = await self._templates.get_by_id(data.template_id)
        if template is None:
            raise TemplateNotFoundError(data.template_id)

        values = self._validator.validate(template, data.data)
        document = Document(
            template_id=data.template_id,
            data=_stored_payload(data.data, values),
        )
        created = await self._repository.create(document)
        logger.info("Created document %s from template %s", created.id, created.template_id)
        return created

    async def update_document(self, document_id: int, data: DocumentUpdate) -> Document:
        document = await self.get_document(document_id)

        if data.template_id is not None and data.template_id != document.template_id:
            raise DocumentValidationError(
                "A document cannot be moved to another template",
                {"templateId": "cannot be changed"},
            )

        submitted = data.data or {}
        template = await self._templates.get_by_id(document.template_id)
        if template is None:
            logger.warning(
                "Document %s references missing template %s; storing update unvalidated",
                document_id, document.template_id,
            )
            values: dict[str, FieldValue] = {}
        else:
            values = self._validator.validate(template, submitted, partial=True)

        document.merge_data(_stored_payload(submitted, values))
        return await self._repository.update(document)

    async def delete_document(self, document_id: int) -> bool:
        exists = await self._repository.get_by_id(document_id)
        if exists is None:
            raise EntityNotFoundError("Document", document_id)
        return await self._repository.delete(document_id)
