"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class TemplateNotFoundError(EntityNotFoundError):
    """Raised when a document references a template that does not exist."""

    def __init__(self, template_id: int):
        super().__init__("Template", template_id)


class DomainValidationError(Exception):
    """Raised when input violates a business rule.

    ``errors`` maps the offending key (field id, attribute name) to a
    short message; ``str(exc)`` is the aggregated human-readable message.
    """

    def __init__(self, message: str, errors: dict[str, str] | None = None):
        self.message = message
        self.errors = errors or {}
        super().__init__(message)


class DuplicateEntityError(DomainValidationError):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(
            f"{entity_type} with {field}='{value}' already exists",
            {field: "already exists"},
        )


class TemplateDefinitionError(DomainValidationError):
    """Raised when a template's fields and questions are inconsistent."""


class DocumentValidationError(DomainValidationError):
    """Raised when a document payload does not satisfy its template."""


class TemplateInUseError(Exception):
    """Raised when deleting a template that documents still reference."""

    def __init__(self, template_id: int, document_count: int):
        self.template_id = template_id
        self.document_count = document_count
        super().__init__(
            f"Template with id '{template_id}' is referenced by "
            f"{document_count} document(s)"
        )
