"""Concrete repository implementation for Template backed by SQLAlchemy."""

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from docarchive.application.interfaces import TemplateRepository
from docarchive.domain.entities import (
    ClientAttribute,
    FieldDefinition,
    FieldType,
    QuestionDefinition,
    QuestionType,
    Template,
)
from docarchive.infrastructure.database.models import TemplateModel


def field_to_json(definition: FieldDefinition) -> dict[str, Any]:
    return {
        "id": definition.id,
        "name": definition.name,
        "type": definition.type.value,
        "required": definition.required,
        "options": definition.options,
        "format": definition.format,
        "client_field": definition.client_field.value if definition.client_field else None,
    }


def field_from_json(raw: dict[str, Any]) -> FieldDefinition:
    client_field = raw.get("client_field")
    return FieldDefinition(
        id=raw["id"],
        name=raw.get("name", ""),
        type=FieldType(raw["type"]),
        required=bool(raw.get("required", False)),
        options=raw.get("options"),
        format=raw.get("format"),
        client_field=ClientAttribute(client_field) if client_field else None,
    )


def question_to_json(question: QuestionDefinition) -> dict[str, Any]:
    return {
        "id": question.id,
        "text": question.text,
        "type": question.type.value,
        "required": question.required,
        "options": question.options,
        "field_id": question.field_id,
    }


def question_from_json(raw: dict[str, Any]) -> QuestionDefinition:
    return QuestionDefinition(
        id=raw["id"],
        text=raw.get("text", ""),
        type=QuestionType(raw["type"]),
        required=bool(raw.get("required", False)),
        options=raw.get("options"),
        field_id=raw.get("field_id"),
    )


class SQLAlchemyTemplateRepository(TemplateRepository):
    """Implements the TemplateRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: TemplateModel) -> Template:
        """Map ORM model → domain entity."""
        return Template(
            id=model.id,
            name=model.name,
            description=model.description,
            fields=[field_from_json(f) for f in model.fields or []],
            questions=[question_from_json(q) for q in model.questions or []],
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Template) -> TemplateModel:
        """Map domain entity → ORM model (for creation)."""
        return TemplateModel(
            name=entity.name,
            description=entity.description,
            fields=[field_to_json(f) for f in entity.fields],
            questions=[question_to_json(q) for q in entity.questions],
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    async def get_by_id(self, template_id: int) -> Template | None:
        result = await self._session.get(TemplateModel, template_id)
        return self._to_entity(result) if result else None

    async def get_all(self) -> list[Template]:
        stmt = select(TemplateModel).order_by(TemplateModel.id)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, template: Template) -> Template:
        model = self._to_model(template)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, template: Template) -> Template:
        model = await self._session.get(TemplateModel, template.id)
        if model is None:
            raise ValueError(f"Template {template.id} not found in database")
        model.name = template.name
        model.description = template.description
        # Fresh lists so the JSON columns are flagged as changed
        model.fields = [field_to_json(f) for f in template.fields]
        model.questions = [question_to_json(q) for q in template.questions]
        model.updated_at = template.updated_at
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, template_id: int) -> bool:
        model = await self._session.get(TemplateModel, template_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
