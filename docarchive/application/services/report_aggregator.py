"""On-demand report aggregation over live entity data.

Nothing is persisted: every call re-reads the repositories, filters by the
inclusive date range and groups the rows for charting.
"""

import logging
from collections import Counter
from collections.abc import Iterable

from docarchive.application.interfaces import (
    ClientRepository,
    DocumentRepository,
    TemplateRepository,
)
from docarchive.domain.entities import (
    Client,
    DateRange,
    Document,
    ReportGroup,
    ReportResult,
    ReportType,
    Template,
)
from docarchive.domain.entities.report import as_utc

logger = logging.getLogger(__name__)


def _groups(counter: Counter) -> list[ReportGroup]:
    return [ReportGroup(name=str(name), value=count) for name, count in counter.items()]


class ReportAggregator:
    """Resolves the collection for a report type and groups it."""

    def __init__(
        self,
        client_repository: ClientRepository,
        template_repository: TemplateRepository,
        document_repository: DocumentRepository,
    ):
        self._clients = client_repository
        self._templates = template_repository
        self._documents = document_repository

    async def generate(
        self,
        report_type: ReportType,
        date_range: DateRange | None = None,
    ) -> ReportResult:
        date_range = date_range or DateRange()

        if report_type is ReportType.CLIENTS:
            records, groups = await self._clients_report(date_range)
        elif report_type is ReportType.DOCUMENTS:
            records, groups = await self._documents_report(date_range)
        elif report_type is ReportType.TEMPLATES:
            records, groups = await self._templates_report(date_range)
        else:
            records, groups = await self._archive_report(date_range)

        logger.debug(
            "Generated %s report: %d records, %d groups",
            report_type.value, len(records), len(groups),
        )
        return ReportResult(type=report_type, records=records, groups=groups, date_range=date_range)

    async def _clients_report(self, date_range: DateRange) -> tuple[list[Client], list[ReportGroup]]:
        clients = [c for c in await self._clients.get_all() if date_range.contains(c.created_at)]
        by_month = Counter(as_utc(c.created_at).strftime("%Y-%m") for c in clients)
        return clients, _groups(Counter(dict(sorted(by_month.items()))))

    async def _documents_report(
        self, date_range: DateRange
    ) -> tuple[list[Document], list[ReportGroup]]:
        documents = [
            d for d in await self._documents.get_all() if date_range.contains(d.created_at)
        ]
        names = await self._template_names()
        by_template = Counter(
            names.get(d.template_id, f"Template {d.template_id}") for d in documents
        )
        return documents, _groups(by_template)

    async def _templates_report(
        self, date_range: DateRange
    ) -> tuple[list[Template], list[ReportGroup]]:
        templates = [
            t for t in await self._templates.get_all() if date_range.contains(t.created_at)
        ]
        per_template = Counter(d.template_id for d in await self._documents.get_all())
        groups = [ReportGroup(name=t.name, value=per_template.get(t.id, 0)) for t in templates]
        return templates, groups

    async def _archive_report(
        self, date_range: DateRange
    ) -> tuple[list[Document], list[ReportGroup]]:
        # Archived rows are filtered on their last update, i.e. when they were archived
        documents = [
            d for d in await self._documents.get_all(archived=True)
            if date_range.contains(d.updated_at)
        ]
        by_cabinet = Counter(
            d.archive_metadata.cabinet
            for d in documents
            if d.archive_metadata is not None and d.archive_metadata.cabinet
        )
        return documents, _groups(by_cabinet)

    async def _template_names(self) -> dict[int, str]:
        templates: Iterable[Template] = await self._templates.get_all()
        return {t.id: t.name for t in templates if t.id is not None}
