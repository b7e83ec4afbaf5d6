"""Application service (use case) for saved report presets."""

from typing import Any

from pydantic import ValidationError

from docarchive.application.interfaces import ReportRepository
from docarchive.application.schemas import DateRangeSchema, ReportCreate, ReportUpdate
from docarchive.application.schemas.errors import format_errors, summarize_errors
from docarchive.application.services.report_aggregator import ReportAggregator
from docarchive.domain.entities import DateRange, Report, ReportResult
from docarchive.domain.exceptions import DomainValidationError, EntityNotFoundError


def date_range_from_filters(filters: dict[str, Any] | None) -> DateRange:
    """Read the ``dateRange`` entry of a preset's filters, if any."""
    raw = (filters or {}).get("dateRange") or {}
    try:
        parsed = DateRangeSchema.model_validate(raw)
    except ValidationError as exc:
        messages = summarize_errors(exc.errors())
        raise DomainValidationError(format_errors(messages, "Invalid report filters"), messages) from exc
    return DateRange(start=parsed.start, end=parsed.end)


class ReportService:
    """CRUD for report presets, plus running a preset through the aggregator."""

    def __init__(self, repository: ReportRepository, aggregator: ReportAggregator):
        self._repository = repository
        self._aggregator = aggregator

    async def get_report(self, report_id: int) -> Report:
        report = await self._repository.get_by_id(report_id)
        if report is None:
            raise EntityNotFoundError("Report", report_id)
        return report

    async def list_reports(self) -> list[Report]:
        return await self._repository.get_all()

    async def create_report(self, data: ReportCreate) -> Report:
        date_range_from_filters(data.filters)
        report = Report(name=data.name, type=data.type, filters=data.filters)
        return await self._repository.create(report)

    async def update_report(self, report_id: int, data: ReportUpdate) -> Report:
        report = await self.get_report(report_id)
        if data.filters is not None:
            date_range_from_filters(data.filters)
        report.update(name=data.name, type=data.type, filters=data.filters)
        return await self._repository.update(report)

    async def delete_report(self, report_id: int) -> bool:
        exists = await self._repository.get_by_id(report_id)
        if exists is None:
            raise EntityNotFoundError("Report", report_id)
        return await self._repository.delete(report_id)

    async def run_report(self, report_id: int) -> ReportResult:
        report = await self.get_report(report_id)
        return await self._aggregator.generate(report.type, date_range_from_filters(report.filters))
