"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from docarchive.config import Settings, get_settings
from docarchive.application.services import (
    ArchiveService,
    ClientService,
    DocumentService,
    ReportAggregator,
    ReportService,
    TemplateService,
)
from docarchive.infrastructure.database.session import get_db_session
from docarchive.infrastructure.database.repositories import (
    SQLAlchemyClientRepository,
    SQLAlchemyDocumentRepository,
    SQLAlchemyReportRepository,
    SQLAlchemyTemplateRepository,
)


async def get_client_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ClientService, None]:
    """Provides a ClientService instance with its repository wired up."""
    yield ClientService(SQLAlchemyClientRepository(session))


async def get_template_service(
    session: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
) -> AsyncGenerator[TemplateService, None]:
    """Provides a TemplateService honouring the configured delete policy."""
    yield TemplateService(
        SQLAlchemyTemplateRepository(session),
        SQLAlchemyDocumentRepository(session),
        delete_policy=settings.template_delete_policy,
    )


async def get_document_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[DocumentService, None]:
    """Provides a DocumentService with document and template repositories."""
    yield DocumentService(
        SQLAlchemyDocumentRepository(session),
        SQLAlchemyTemplateRepository(session),
    )


async def get_archive_service(
    session: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
) -> AsyncGenerator[ArchiveService, None]:
    yield ArchiveService(
        SQLAlchemyDocumentRepository(session),
        strict_requests=settings.strict_archive_requests,
    )


def _build_aggregator(session: AsyncSession) -> ReportAggregator:
    return ReportAggregator(
        SQLAlchemyClientRepository(session),
        SQLAlchemyTemplateRepository(session),
        SQLAlchemyDocumentRepository(session),
    )


async def get_report_aggregator(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ReportAggregator, None]:
    yield _build_aggregator(session)


async def get_report_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ReportService, None]:
    """Provides a ReportService for presets, backed by a live aggregator."""
    yield ReportService(SQLAlchemyReportRepository(session), _build_aggregator(session))


