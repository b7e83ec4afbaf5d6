from .client import ClientModel
from .template import TemplateModel
from .document import DocumentModel
from .report import ReportModel
from .user import UserModel

__all__ = [
    "ClientModel",
    "TemplateModel",
    "DocumentModel",
    "ReportModel",
    "UserModel",
]
