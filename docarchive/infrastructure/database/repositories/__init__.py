from .client_repository import SQLAlchemyClientRepository
from .template_repository import SQLAlchemyTemplateRepository
from .document_repository import SQLAlchemyDocumentRepository
from .report_repository import SQLAlchemyReportRepository
from .user_repository import SQLAlchemyUserRepository

__all__ = [
    "SQLAlchemyClientRepository",
    "SQLAlchemyTemplateRepository",
    "SQLAlchemyDocumentRepository",
    "SQLAlchemyReportRepository",
    "SQLAlchemyUserRepository",
]
