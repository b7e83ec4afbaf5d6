"""Abstract repository interface (port) for Document persistence."""

from abc import ABC, abstractmethod

from docarchive.domain.entities import Document


class DocumentRepository(ABC):
    """Port for document persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, document_id: int) -> Document | None:
        ...

    @abstractmethod
    async def get_all(
        self,
        *,
        template_id: int | None = None,
        archived: bool | None = None,
    ) -> list[Document]:
        """Retrieve documents in storage order, optionally filtered."""
        ...

    @abstractmethod
    async def create(self, document: Document) -> Document:
        ...

    @abstractmethod
    async def update(self, document: Document) -> Document:
        ...

    @abstractmethod
    async def delete(self, document_id: int) -> bool:
        """Delete a document. Returns True if deleted, False if not found."""
        ...

    @abstractmethod
    async def delete_by_template(self, template_id: int) -> int:
        """Delete every document bound to a template. Returns the count."""
        ...
