"""Report preset CRUD plus on-demand report generation."""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query, status

from docarchive.application.schemas import (
    ClientResponse,
    DateRangeSchema,
    DocumentResponse,
    ReportCreate,
    ReportGroupSchema,
    ReportResponse,
    ReportResultResponse,
    ReportUpdate,
    TemplateResponse,
)
from docarchive.application.services import ReportAggregator, ReportService
from docarchive.application.services.report_service import date_range_from_filters
from docarchive.domain.entities import ReportResult, ReportType
from docarchive.domain.exceptions import DomainValidationError, EntityNotFoundError
from docarchive.infrastructure.dependencies import get_report_aggregator, get_report_service

router = APIRouter(prefix="/reports", tags=["Reports"])

_RECORD_SCHEMAS = {
    ReportType.CLIENTS: ClientResponse,
    ReportType.DOCUMENTS: DocumentResponse,
    ReportType.TEMPLATES: TemplateResponse,
    ReportType.ARCHIVE: DocumentResponse,
}


def _to_result_response(result: ReportResult) -> ReportResultResponse:
    schema = _RECORD_SCHEMAS[result.type]
    records: list[dict[str, Any]] = [
        schema.model_validate(r, from_attributes=True).model_dump(by_alias=True, mode="json")
        for r in result.records
    ]
    return ReportResultResponse(
        type=result.type,
        total=result.total,
        date_range=DateRangeSchema(start=result.date_range.start, end=result.date_range.end),
        groups=[ReportGroupSchema(name=g.name, value=g.value) for g in result.groups],
        records=records,
        generated_at=result.generated_at,
    )


@router.get("", response_model=list[ReportResponse])
async def list_reports(
    service: ReportService = Depends(get_report_service),
) -> list[ReportResponse]:
    reports = await service.list_reports()
    return [ReportResponse.model_validate(r, from_attributes=True) for r in reports]


@router.get("/generate", response_model=ReportResultResponse)
async def generate_report(
    type: ReportType = Query(..., description="clients, documents, templates or archive"),
    start: str | None = Query(None, alias="from", description="ISO date or datetime"),
    end: str | None = Query(None, alias="to", description="ISO date or datetime"),
    aggregator: ReportAggregator = Depends(get_report_aggregator),
) -> ReportResultResponse:
    """Aggregate live data for ``type`` within the inclusive date range.

    A date-only ``to`` covers that whole day.
    """
    try:
        date_range = date_range_from_filters({"dateRange": {"from": start, "to": end}})
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    result = await aggregator.generate(type, date_range)
    return _to_result_response(result)


@router.get("/{report_id}", response_model=ReportResponse)
async def get_report(
    report_id: int,
    service: ReportService = Depends(get_report_service),
) -> ReportResponse:
    try:
        report = await service.get_report(report_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ReportResponse.model_validate(report, from_attributes=True)


@router.get("/{report_id}/run", response_model=ReportResultResponse)
async def run_report(
    report_id: int,
    service: ReportService = Depends(get_report_service),
) -> ReportResultResponse:
    """Generate the saved preset against current data."""
    try:
        result = await service.run_report(report_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return _to_result_response(result)


@router.post("", response_model=ReportResponse, status_code=status.HTTP_201_CREATED)
async def create_report(
    data: ReportCreate,
    service: ReportService = Depends(get_report_service),
) -> ReportResponse:
    try:
        report = await service.create_report(data)
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return ReportResponse.model_validate(report, from_attributes=True)


@router.patch("/{report_id}", response_model=ReportResponse)
async def update_report(
    report_id: int,
    data: ReportUpdate,
    service: ReportService = Depends(get_report_service),
) -> ReportResponse:
    try:
        report = await service.update_report(report_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return ReportResponse.model_validate(report, from_attributes=True)


@router.delete("/{report_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_report(
    report_id: int,
    service: ReportService = Depends(get_report_service),
) -> None:
    try:
        await service.delete_report(report_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
