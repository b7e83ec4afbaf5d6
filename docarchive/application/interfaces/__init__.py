from .client_repository import ClientRepository
from .template_repository import TemplateRepository
from .document_repository import DocumentRepository
from .report_repository import ReportRepository
from .user_repository import UserRepository

__all__ = [
    "ClientRepository",
    "TemplateRepository",
    "DocumentRepository",
    "ReportRepository",
    "UserRepository",
]
