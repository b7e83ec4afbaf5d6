"""Concrete repository implementation for Client backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from docarchive.application.interfaces import ClientRepository
from docarchive.domain.entities import Client
from docarchive.infrastructure.database.models import ClientModel


class SQLAlchemyClientRepository(ClientRepository):
    """Implements the ClientRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ClientModel) -> Client:
        """Map ORM model → domain entity."""
        return Client(
            id=model.id,
            name=model.name,
            id_number=model.id_number,
            id_expiry=model.id_expiry,
            mobile=model.mobile,
            description=model.description,
            id_image_url=model.id_image_url,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Client) -> ClientModel:
        """Map domain entity → ORM model (for creation)."""
        return ClientModel(
            name=entity.name,
            id_number=entity.id_number,
            id_expiry=entity.id_expiry,
            mobile=entity.mobile,
            description=entity.description,
            id_image_url=entity.id_image_url,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    async def get_by_id(self, client_id: int) -> Client | None:
        result = await self._session.get(ClientModel, client_id)
        return self._to_entity(result) if result else None

    async def get_by_id_number(self, id_number: str) -> Client | None:
        stmt = select(ClientModel).where(ClientModel.id_number == id_number)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[Client]:
        stmt = select(ClientModel).order_by(ClientModel.id)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, client: Client) -> Client:
        model = self._to_model(client)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, client: Client) -> Client:
        model = await self._session.get(ClientModel, client.id)
        if model is None:
            raise ValueError(f"Client {client.id} not found in database")
        model.name = client.name
        model.id_number = client.id_number
        model.id_expiry = client.id_expiry
        model.mobile = client.mobile
        model.description = client.description
        model.id_image_url = client.id_image_url
        model.updated_at = client.updated_at
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, client_id: int) -> bool:
        model = await self._session.get(ClientModel, client_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
