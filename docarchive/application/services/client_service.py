"""Application service (use case) for client registration."""

import logging

from docarchive.application.interfaces import ClientRepository
from docarchive.application.schemas import ClientCreate, ClientUpdate
from docarchive.domain.entities import Client
from docarchive.domain.exceptions import DuplicateEntityError, EntityNotFoundError

logger = logging.getLogger(__name__)

_NULLABLE = frozenset({"description", "id_image_url"})


class ClientService:
    """Orchestrates client CRUD logic. Depends on the repository port (DI)."""

    def __init__(self, repository: ClientRepository):
        self._repository = repository

    async def get_client(self, client_id: int) -> Client:
        client = await self._repository.get_by_id(client_id)
        if client is None:
            raise EntityNotFoundError("Client", client_id)
        return client

    async def list_clients(self) -> list[Client]:
        return await self._repository.get_all()

    async def create_client(self, data: ClientCreate) -> Client:
        await self._ensure_unique_id_number(data.id_number)
        client = Client(
            name=data.name,
            id_number=data.id_number,
            id_expiry=data.id_expiry,
            mobile=data.mobile,
            description=data.description,
            id_image_url=data.id_image_url,
        )
        created = await self._repository.create(client)
        logger.info("Registered client %s (id_number=%s)", created.id, created.id_number)
        return created

    async def update_client(self, client_id: int, data: ClientUpdate) -> Client:
        client = await self.get_client(client_id)

        # Explicit nulls only clear the optional attributes
        changes = {
            name: value
            for name, value in data.model_dump(exclude_unset=True).items()
            if value is not None or name in _NULLABLE
        }
        new_id_number = changes.get("id_number")
        if new_id_number is not None and new_id_number != client.id_number:
            await self._ensure_unique_id_number(new_id_number)

        client.update(**changes)
        return await self._repository.update(client)

    async def delete_client(self, client_id: int) -> bool:
        exists = await self._repository.get_by_id(client_id)
        if exists is None:
            raise EntityNotFoundError("Client", client_id)
        return await self._repository.delete(client_id)

    async def _ensure_unique_id_number(self, id_number: str) -> None:
        if await self._repository.get_by_id_number(id_number) is not None:
            raise DuplicateEntityError("Client", "id_number", id_number)
