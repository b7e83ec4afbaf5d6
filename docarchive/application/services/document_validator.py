"""Dynamic validation of document payloads against their template.

A template declares an open-ended list of typed fields and follow-up
questions, so the shape of a document's ``data`` is only known at runtime.
``DocumentValidator.contract_for`` interprets the template into a
``DocumentContract``: one rule per field id and per ``q_<questionId>`` key,
each rule dispatched on the declared type tag. The contract compiles its
rules into a throwaway pydantic model and returns tagged values
(``TextValue``, ``NumberValue``, ``BooleanValue``, ``ReferenceValue``).

Contracts are rebuilt on every call. A template edit therefore changes
validation for the very next submission, while stored documents are never
re-validated.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    ValidationError,
    create_model,
)

from docarchive.domain.entities import (
    BooleanValue,
    FieldDefinition,
    FieldType,
    FieldValue,
    NumberValue,
    QuestionDefinition,
    QuestionType,
    ReferenceValue,
    Template,
    TextValue,
)
from docarchive.domain.exceptions import DocumentValidationError

logger = logging.getLogger(__name__)


def _not_bool(value: Any) -> Any:
    # JSON booleans would otherwise coerce to 0/1
    if isinstance(value, bool):
        raise ValueError("Input should be a valid number, not a boolean")
    return value


NonEmptyStr = Annotated[str, Field(min_length=1)]
Number = Annotated[float, Field(allow_inf_nan=False), BeforeValidator(_not_bool)]
NonNegativeNumber = Annotated[float, Field(ge=0, allow_inf_nan=False), BeforeValidator(_not_bool)]


@dataclass(frozen=True)
class _Rule:
    """Validation rule for one payload key."""

    key: str
    label: str
    required: bool
    annotation: Any
    wrap: Callable[[Any], FieldValue]


def _choice(options: list[str] | None) -> Any:
    """Non-empty string, or one of ``options`` when the definition lists any."""
    if options:
        return Literal[tuple(options)]
    return NonEmptyStr


def _number(value: Any) -> FieldValue:
    return NumberValue(float(value))


def _reference(value: Any) -> FieldValue:
    return ReferenceValue(str(value))


def _field_rule(definition: FieldDefinition) -> _Rule:
    kind = definition.type
    if kind is FieldType.NUMBER:
        annotation = NonNegativeNumber if definition.required else Number
        wrap = _number
    elif kind is FieldType.CLIENT:
        annotation = Union[StrictInt, NonEmptyStr]
        wrap = _reference
    elif kind is FieldType.SELECT:
        annotation = _choice(definition.options)
        wrap = TextValue
    else:
        # text, date and file values are all carried as strings; dates keep
        # whatever format the form submitted, files are opaque references.
        annotation = NonEmptyStr if definition.required else str
        wrap = TextValue
    return _Rule(definition.id, definition.name, definition.required, annotation, wrap)


def _question_rule(question: QuestionDefinition) -> _Rule:
    if question.type is QuestionType.YES_NO:
        annotation, wrap = StrictBool, BooleanValue
    elif question.type is QuestionType.MULTIPLE:
        annotation, wrap = _choice(question.options), TextValue
    else:
        annotation = NonEmptyStr if question.required else str
        wrap = TextValue
    return _Rule(question.key, question.text, question.required, annotation, wrap)


class DocumentContract:
    """Validation contract for documents bound to one template."""

    def __init__(self, template_id: int | None, rules: list[_Rule]):
        self.template_id = template_id
        self._rules = {rule.key: rule for rule in rules}

    @property
    def keys(self) -> list[str]:
        return list(self._rules)

    @property
    def required_keys(self) -> list[str]:
        return [key for key, rule in self._rules.items() if rule.required]

    def validate(self, data: dict[str, Any], *, partial: bool = False) -> dict[str, FieldValue]:
        """Validate ``data`` and return tagged values for the known keys present.

        With ``partial=True`` only keys present in ``data`` are checked, so
        missing required keys are not reported. Unknown keys are ignored.
        """
        rules = [
            rule for rule in self._rules.values()
            if not partial or rule.key in data
        ]
        # Blank answers to optional slots count as "not answered"
        payload = {
            key: value
            for key, value in data.items()
            if not (key in self._rules and not self._rules[key].required and value in ("", None))
        }
        model = self._compile(rules)
        try:
            parsed = model.model_validate(payload)
        except ValidationError as exc:
            raise self._to_domain_error(exc) from exc

        values: dict[str, FieldValue] = {}
        by_name = {f"v{i}": rule for i, rule in enumerate(rules)}
        for name in parsed.model_fields_set:
            value = getattr(parsed, name)
            if value is None:
                continue
            rule = by_name[name]
            values[rule.key] = rule.wrap(value)
        return values

    def _compile(self, rules: list[_Rule]) -> type[BaseModel]:
        # Positional names keep arbitrary field ids usable as aliases
        definitions: dict[str, Any] = {}
        for i, rule in enumerate(rules):
            if rule.required:
                definitions[f"v{i}"] = (rule.annotation, Field(..., alias=rule.key))
            else:
                definitions[f"v{i}"] = (Optional[rule.annotation], Field(None, alias=rule.key))
        return create_model(
            f"DocumentData{self.template_id or ''}",
            __config__=ConfigDict(extra="ignore"),
            **definitions,
        )

    def _to_domain_error(self, exc: ValidationError) -> DocumentValidationError:
        errors: dict[str, str] = {}
        for error in exc.errors():
            loc = error.get("loc") or ("data",)
            key = str(loc[0])
            errors.setdefault(key, error["msg"])

        parts = []
        for key, message in errors.items():
            rule = self._rules.get(key)
            label = f"{key} ({rule.label})" if rule and rule.label else key
            parts.append(f"{label}: {message}")
        return DocumentValidationError(
            "Invalid document data: " + "; ".join(parts),
            errors,
        )


class DocumentValidator:
    """Builds validation contracts from templates."""

    def contract_for(self, template: Template) -> DocumentContract:
        rules = [_field_rule(f) for f in template.fields]
        rules.extend(_question_rule(q) for q in template.questions)
        logger.debug(
            "Built document contract for template %s: %d rules (%d required)",
            template.id,
            len(rules),
            sum(1 for r in rules if r.required),
        )
        return DocumentContract(template.id, rules)

    def validate(
        self,
        template: Template,
        data: dict[str, Any],
        *,
        partial: bool = False,
    ) -> dict[str, FieldValue]:
        """Shortcut: build the template's contract and validate ``data``."""
        return self.contract_for(template).validate(data, partial=partial)
