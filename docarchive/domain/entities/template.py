"""Domain entities for document templates — fields, questions and the template aggregate."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from docarchive.domain.exceptions import TemplateDefinitionError


class FieldType(str, Enum):
    """Input slot types a template field can declare."""

    TEXT = "text"
    NUMBER = "number"
    DATE = "date"
    SELECT = "select"
    FILE = "file"
    CLIENT = "client"


class QuestionType(str, Enum):
    """Follow-up question types."""

    YES_NO = "yesno"
    MULTIPLE = "multiple"
    TEXT = "text"


class ClientAttribute(str, Enum):
    """Client attribute a client-reference field pulls into the document."""

    NAME = "name"
    ID_NUMBER = "idNumber"
    MOBILE = "mobile"
    ID_EXPIRY = "idExpiry"


QUESTION_KEY_PREFIX = "q_"


def question_key(question_id: str) -> str:
    """Data payload key under which a question's answer is stored."""
    return f"{QUESTION_KEY_PREFIX}{question_id}"


@dataclass
class FieldDefinition:
    """A single typed input slot declared by a template."""

    id: str
    name: str
    type: FieldType
    required: bool = False
    options: list[str] | None = None
    format: str | None = None
    client_field: ClientAttribute | None = None


@dataclass
class QuestionDefinition:
    """A follow-up question, optionally linked to one of the template's fields."""

    id: str
    text: str
    type: QuestionType
    required: bool = False
    options: list[str] | None = None
    field_id: str | None = None

    @property
    def key(self) -> str:
        return question_key(self.id)


@dataclass
class Template:
    """Aggregate root: a reusable schema of fields and follow-up questions.

    Questions reference fields by identifier only. ``check_references``
    enforces that every reference resolves inside the same template.
    """

    name: str
    description: str
    fields: list[FieldDefinition] = field(default_factory=list)
    questions: list[QuestionDefinition] = field(default_factory=list)
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def field_ids(self) -> set[str]:
        return {f.id for f in self.fields}

    def get_field(self, field_id: str) -> FieldDefinition | None:
        for definition in self.fields:
            if definition.id == field_id:
                return definition
        return None

    def check_references(self) -> None:
        """Validate identifier uniqueness and question -> field references."""
        errors: dict[str, str] = {}

        seen: set[str] = set()
        for definition in self.fields:
            if definition.id in seen:
                errors[definition.id] = "duplicate field id"
            seen.add(definition.id)

        seen_questions: set[str] = set()
        known_fields = self.field_ids()
        for question in self.questions:
            if question.id in seen_questions:
                errors[question.id] = "duplicate question id"
            seen_questions.add(question.id)
            if question.field_id is not None and question.field_id not in known_fields:
                errors[question.id] = f"references unknown field '{question.field_id}'"
            if question.key in known_fields:
                errors[question.id] = f"answer key '{question.key}' collides with a field id"

        if errors:
            summary = "; ".join(f"{key}: {msg}" for key, msg in errors.items())
            raise TemplateDefinitionError(f"Invalid template definition: {summary}", errors)

    def remove_field(self, field_id: str) -> list[str]:
        """Remove a field and every question linked to it.

        Returns the ids of the questions that were removed.
        """
        self.fields = [f for f in self.fields if f.id != field_id]
        return self._drop_dangling_questions()

    def replace_fields(self, fields: list[FieldDefinition]) -> list[str]:
        """Swap the field list, cascading removal of orphaned questions."""
        kept = {f.id for f in fields}
        removed: list[str] = []
        for definition in list(self.fields):
            if definition.id not in kept:
                removed.extend(self.remove_field(definition.id))
        self.fields = list(fields)
        removed.extend(self._drop_dangling_questions())
        return removed

    def update(
        self,
        name: str | None = None,
        description: str | None = None,
        fields: list[FieldDefinition] | None = None,
        questions: list[QuestionDefinition] | None = None,
    ) -> list[str]:
        """Merge a partial update and refresh the updated_at timestamp.

        Returns the ids of questions dropped by the field cascade.
        """
        if name is not None:
            self.name = name
        if description is not None:
            self.description = description

        removed: list[str] = []
        if questions is not None:
            self.questions = list(questions)
            if fields is not None:
                self.fields = list(fields)
        elif fields is not None:
            removed = self.replace_fields(fields)

        self.check_references()
        self.updated_at = datetime.now(timezone.utc)
        return removed

    def _drop_dangling_questions(self) -> list[str]:
        known = self.field_ids()
        kept: list[QuestionDefinition] = []
        removed: list[str] = []
        for question in self.questions:
            if question.field_id is not None and question.field_id not in known:
                removed.append(question.id)
            else:
                kept.append(question)
        self.questions = kept
        return removed
