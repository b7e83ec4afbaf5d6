from .base import CamelModel
from .errors import format_errors, summarize_errors
from .client import ClientCreate, ClientUpdate, ClientResponse
from .template import (
    FieldDefinitionSchema,
    QuestionDefinitionSchema,
    TemplateCreate,
    TemplateUpdate,
    TemplateResponse,
)
from .document import (
    ArchiveMetadataSchema,
    ArchiveRequest,
    DocumentCreate,
    DocumentUpdate,
    DocumentResponse,
    StorageLocationSchema,
)
from .report import (
    DateRangeSchema,
    ReportCreate,
    ReportUpdate,
    ReportResponse,
    ReportGroupSchema,
    ReportResultResponse,
)
from .user import UserCreate

__all__ = [
    "CamelModel",
    "format_errors",
    "summarize_errors",
    "ClientCreate",
    "ClientUpdate",
    "ClientResponse",
    "FieldDefinitionSchema",
    "QuestionDefinitionSchema",
    "TemplateCreate",
    "TemplateUpdate",
    "TemplateResponse",
    "ArchiveMetadataSchema",
    "ArchiveRequest",
    "DocumentCreate",
    "DocumentUpdate",
    "DocumentResponse",
    "StorageLocationSchema",
    "DateRangeSchema",
    "ReportCreate",
    "ReportUpdate",
    "ReportResponse",
    "ReportGroupSchema",
    "ReportResultResponse",
    "UserCreate",
]
