from .client import Client
from .user import User
from .template import (
    ClientAttribute,
    FieldDefinition,
    FieldType,
    QuestionDefinition,
    QuestionType,
    Template,
    question_key,
)
from .document import ArchiveMetadata, Document, StorageLocation, VersionType
from .field_value import BooleanValue, FieldValue, NumberValue, ReferenceValue, TextValue
from .report import DateRange, Report, ReportGroup, ReportResult, ReportType

__all__ = [
    "Client",
    "User",
    "ClientAttribute",
    "FieldDefinition",
    "FieldType",
    "QuestionDefinition",
    "QuestionType",
    "Template",
    "question_key",
    "ArchiveMetadata",
    "Document",
    "StorageLocation",
    "VersionType",
    "BooleanValue",
    "FieldValue",
    "NumberValue",
    "ReferenceValue",
    "TextValue",
    "DateRange",
    "Report",
    "ReportGroup",
    "ReportResult",
    "ReportType",
]
