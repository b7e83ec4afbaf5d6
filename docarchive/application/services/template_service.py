"""Application service (use case) for template definitions."""

import logging
from typing import Literal

from docarchive.application.interfaces import DocumentRepository, TemplateRepository
from docarchive.application.schemas import (
    FieldDefinitionSchema,
    QuestionDefinitionSchema,
    TemplateCreate,
    TemplateUpdate,
)
from docarchive.domain.entities import FieldDefinition, QuestionDefinition, Template
from docarchive.domain.exceptions import EntityNotFoundError, TemplateInUseError

logger = logging.getLogger(__name__)


def _to_field(schema: FieldDefinitionSchema) -> FieldDefinition:
    return FieldDefinition(
        id=schema.id,
        name=schema.name,
        type=schema.type,
        required=schema.required,
        options=schema.options,
        format=schema.format,
        client_field=schema.client_field,
    )


def _to_question(schema: QuestionDefinitionSchema) -> QuestionDefinition:
    return QuestionDefinition(
        id=schema.id,
        text=schema.text,
        type=schema.type,
        required=schema.required,
        options=schema.options,
        field_id=schema.field_id,
    )


class TemplateService:
    """Orchestrates template CRUD.

    Deleting a template honours ``delete_policy`` toward the documents that
    still reference it: ``orphan`` leaves them in place, ``restrict``
    refuses the deletion, ``cascade`` deletes them as well.
    """

    def __init__(
        self,
        repository: TemplateRepository,
        document_repository: DocumentRepository,
        delete_policy: Literal["orphan", "restrict", "cascade"] = "orphan",
    ):
        self._repository = repository
        self._documents = document_repository
        self._delete_policy = delete_policy

    async def get_template(self, template_id: int) -> Template:
        template = await self._repository.get_by_id(template_id)
        if template is None:
            raise EntityNotFoundError("Template", template_id)
        return template

    async def list_templates(self) -> list[Template]:
        return await self._repository.get_all()

    async def create_template(self, data: TemplateCreate) -> Template:
        template = Template(
            name=data.name,
            description=data.description,
            fields=[_to_field(f) for f in data.fields],
            questions=[_to_question(q) for q in data.questions],
        )
        template.check_references()
        created = await self._repository.create(template)
        logger.info(
            "Created template %s '%s' (%d fields, %d questions)",
            created.id, created.name, len(created.fields), len(created.questions),
        )
        return created

    async def update_template(self, template_id: int, data: TemplateUpdate) -> Template:
        template = await self.get_template(template_id)
        removed = template.update(
            name=data.name,
            description=data.description,
            fields=[_to_field(f) for f in data.fields] if data.fields is not None else None,
            questions=(
                [_to_question(q) for q in data.questions] if data.questions is not None else None
            ),
        )
        if removed:
            logger.info(
                "Template %s: removed questions %s linked to deleted fields",
                template_id, ", ".join(removed),
            )
        return await self._repository.update(template)

    async def delete_template(self, template_id: int) -> bool:
        exists = await self._repository.get_by_id(template_id)
        if exists is None:
            raise EntityNotFoundError("Template", template_id)

        documents = await self._documents.get_all(template_id=template_id)
        if documents:
            if self._delete_policy == "restrict":
                raise TemplateInUseError(template_id, len(documents))
            if self._delete_policy == "cascade":
                count = await self._documents.delete_by_template(template_id)
                logger.info("Template %s: deleted %d referencing documents", template_id, count)
            else:
                logger.warning(
                    "Template %s deleted while %d documents still reference it",
                    template_id, len(documents),
                )
        return await self._repository.delete(template_id)
