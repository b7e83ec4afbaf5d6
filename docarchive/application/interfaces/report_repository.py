"""Abstract repository interface (port) for saved Report presets."""

from abc import ABC, abstractmethod

from docarchive.domain.entities import Report


class ReportRepository(ABC):

    @abstractmethod
    async def get_by_id(self, report_id: int) -> Report | None:
        ...

    @abstractmethod
    async def get_all(self) -> list[Report]:
        ...

    @abstractmethod
    async def create(self, report: Report) -> Report:
        ...

    @abstractmethod
    async def update(self, report: Report) -> Report:
        ...

    @abstractmethod
    async def delete(self, report_id: int) -> bool:
        ...
