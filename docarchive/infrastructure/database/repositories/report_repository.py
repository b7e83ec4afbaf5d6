"""Concrete repository implementation for saved reports backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from docarchive.application.interfaces import ReportRepository
from docarchive.domain.entities import Report, ReportType
from docarchive.infrastructure.database.models import ReportModel


class SQLAlchemyReportRepository(ReportRepository):

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ReportModel) -> Report:
        return Report(
            id=model.id,
            name=model.name,
            type=ReportType(model.type),
            filters=model.filters,
            created_at=model.created_at,
        )

    async def get_by_id(self, report_id: int) -> Report | None:
        result = await self._session.get(ReportModel, report_id)
        return self._to_entity(result) if result else None

    async def get_all(self) -> list[Report]:
        stmt = select(ReportModel).order_by(ReportModel.id)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, report: Report) -> Report:
        model = ReportModel(
            name=report.name,
            type=report.type.value,
            filters=report.filters,
            created_at=report.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, report: Report) -> Report:
        model = await self._session.get(ReportModel, report.id)
        if model is None:
            raise ValueError(f"Report {report.id} not found in database")
        model.name = report.name
        model.type = report.type.value
        model.filters = dict(report.filters) if report.filters is not None else None
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, report_id: int) -> bool:
        model = await self._session.get(ReportModel, report_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
