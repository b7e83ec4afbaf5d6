"""Pydantic DTOs for saved reports and generated report results."""

from datetime import date, datetime, time
from typing import Any

from pydantic import Field, field_validator

from docarchive.application.schemas.base import CamelModel
from docarchive.domain.entities import ReportType


class DateRangeSchema(CamelModel):
    """Inclusive date range; either bound may be omitted."""

    start: datetime | None = Field(None, alias="from")
    end: datetime | None = Field(None, alias="to")

    @field_validator("end", mode="before")
    @classmethod
    def _date_only_end_covers_whole_day(cls, value: Any) -> Any:
        """A bare ``YYYY-MM-DD`` upper bound means the end of that day."""
        if isinstance(value, str) and len(value) == 10:
            try:
                value = date.fromisoformat(value)
            except ValueError:
                return value
        if isinstance(value, date) and not isinstance(value, datetime):
            return datetime.combine(value, time.max)
        return value


class ReportCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    type: ReportType
    filters: dict[str, Any] | None = Field(
        None, examples=[{"dateRange": {"from": "2024-01-01", "to": "2024-12-31"}}],
    )


class ReportUpdate(CamelModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    type: ReportType | None = None
    filters: dict[str, Any] | None = None


class ReportResponse(CamelModel):
    id: int
    name: str
    type: ReportType
    filters: dict[str, Any] | None
    created_at: datetime


class ReportGroupSchema(CamelModel):
    name: str
    value: int


class ReportResultResponse(CamelModel):
    """Filtered rows plus grouped counts for charting."""

    type: ReportType
    total: int
    date_range: DateRangeSchema
    groups: list[ReportGroupSchema]
    records: list[dict[str, Any]]
    generated_at: datetime
