"""Abstract repository interface (port) for Template persistence."""

from abc import ABC, abstractmethod

from docarchive.domain.entities import Template


class TemplateRepository(ABC):
    """Port for template persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, template_id: int) -> Template | None:
        ...

    @abstractmethod
    async def get_all(self) -> list[Template]:
        ...

    @abstractmethod
    async def create(self, template: Template) -> Template:
        ...

    @abstractmethod
    async def update(self, template: Template) -> Template:
        ...

    @abstractmethod
    async def delete(self, template_id: int) -> bool:
        """Delete a template. Returns True if deleted, False if not found."""
        ...
