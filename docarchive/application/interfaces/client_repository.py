"""Abstract repository interface (port) for Client persistence."""

from abc import ABC, abstractmethod

from docarchive.domain.entities import Client


class ClientRepository(ABC):
    """Port for client persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, client_id: int) -> Client | None:
        ...

    @abstractmethod
    async def get_by_id_number(self, id_number: str) -> Client | None:
        """Look a client up by national id number."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Client]:
        ...

    @abstractmethod
    async def create(self, client: Client) -> Client:
        ...

    @abstractmethod
    async def update(self, client: Client) -> Client:
        ...

    @abstractmethod
    async def delete(self, client_id: int) -> bool:
        """Delete a client. Returns True if deleted, False if not found."""
        ...
