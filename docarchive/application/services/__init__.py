from .document_validator import DocumentContract, DocumentValidator
from .client_service import ClientService
from .template_service import TemplateService
from .document_service import DocumentService
from .archive_service import ArchiveService
from .report_aggregator import ReportAggregator
from .report_service import ReportService
from .user_service import UserService

__all__ = [
    "DocumentContract",
    "DocumentValidator",
    "ClientService",
    "TemplateService",
    "DocumentService",
    "ArchiveService",
    "ReportAggregator",
    "ReportService",
    "UserService",
]
