"""Pydantic DTOs for templates, their field definitions and questions."""

from datetime import datetime
from uuid import uuid4

from pydantic import Field

from docarchive.application.schemas.base import CamelModel
from docarchive.domain.entities import ClientAttribute, FieldType, QuestionType


def _token(prefix: str) -> str:
    return f"{prefix}_{uuid4().hex[:12]}"


class FieldDefinitionSchema(CamelModel):
    """A typed input slot. ``id`` is an opaque token, generated when omitted."""

    id: str = Field(default_factory=lambda: _token("field"), min_length=1, max_length=100)
    name: str = Field("", max_length=255)
    type: FieldType
    required: bool = False
    options: list[str] | None = None
    format: str | None = Field(None, examples=["DMY"])
    client_field: ClientAttribute | None = None


class QuestionDefinitionSchema(CamelModel):
    """A follow-up question, optionally linked to a field by ``field_id``."""

    id: str = Field(default_factory=lambda: _token("question"), min_length=1, max_length=100)
    text: str = Field(..., min_length=1)
    type: QuestionType
    required: bool = False
    options: list[str] | None = None
    field_id: str | None = None


class TemplateCreate(CamelModel):
    """Schema for creating a new template."""

    name: str = Field(..., min_length=1, max_length=255, examples=["عقد زواج"])
    description: str = Field("", examples=["نموذج عقد زواج يتضمن بيانات الزوجين والشهود"])
    fields: list[FieldDefinitionSchema] = Field(default_factory=list)
    questions: list[QuestionDefinitionSchema] = Field(default_factory=list)


class TemplateUpdate(CamelModel):
    """Schema for a partial template update — all fields optional."""

    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    fields: list[FieldDefinitionSchema] | None = None
    questions: list[QuestionDefinitionSchema] | None = None


class TemplateResponse(CamelModel):
    """Schema returned to the client."""

    id: int
    name: str
    description: str
    fields: list[FieldDefinitionSchema]
    questions: list[QuestionDefinitionSchema]
    created_at: datetime
    updated_at: datetime
