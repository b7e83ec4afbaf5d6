"""Domain entities for reports — saved presets and computed results."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ReportType(str, Enum):
    """Entity domain a report aggregates over."""

    CLIENTS = "clients"
    DOCUMENTS = "documents"
    TEMPLATES = "templates"
    ARCHIVE = "archive"


@dataclass
class Report:
    """A saved report preset. Results are never stored; see ReportResult."""

    name: str
    type: ReportType
    filters: dict[str, Any] | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(
        self,
        name: str | None = None,
        type: ReportType | None = None,
        filters: dict[str, Any] | None = None,
    ) -> None:
        if name is not None:
            self.name = name
        if type is not None:
            self.type = type
        if filters is not None:
            self.filters = filters


@dataclass(frozen=True)
class DateRange:
    """Inclusive range; either bound may be omitted."""

    start: datetime | None = None
    end: datetime | None = None

    def contains(self, moment: datetime) -> bool:
        moment = as_utc(moment)
        if self.start is not None and moment < as_utc(self.start):
            return False
        if self.end is not None and moment > as_utc(self.end):
            return False
        return True

    @property
    def is_empty(self) -> bool:
        return self.start is None and self.end is None


@dataclass(frozen=True)
class ReportGroup:
    name: str
    value: int


@dataclass
class ReportResult:
    """Filtered records plus a grouping suitable for charting."""

    type: ReportType
    records: list[Any]
    groups: list[ReportGroup]
    date_range: DateRange = field(default_factory=DateRange)
    generated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def total(self) -> int:
        return len(self.records)


def as_utc(moment: datetime) -> datetime:
    """Treat naive datetimes (e.g. read back from SQLite) as UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment
