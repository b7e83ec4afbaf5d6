"""In-memory fake repositories implementing the repository ports."""

import pytest

from docarchive.application.interfaces import (
    ClientRepository,
    DocumentRepository,
    ReportRepository,
    TemplateRepository,
    UserRepository,
)
from docarchive.domain.entities import Client, Document, Report, Template, User


class _InMemory:
    entity_name = "Entity"

    def __init__(self):
        self._items: dict[int, object] = {}
        self._next_id = 1

    async def get_by_id(self, item_id: int):
        return self._items.get(item_id)

    async def create(self, item):
        item.id = self._next_id
        self._next_id += 1
        self._items[item.id] = item
        return item

    async def update(self, item):
        if item.id not in self._items:
            raise ValueError(f"{self.entity_name} {item.id} not found")
        self._items[item.id] = item
        return item

    async def delete(self, item_id: int) -> bool:
        if item_id in self._items:
            del self._items[item_id]
            return True
        return False


class FakeClientRepository(_InMemory, ClientRepository):
    entity_name = "Client"

    async def get_by_id_number(self, id_number: str) -> Client | None:
        for client in self._items.values():
            if client.id_number == id_number:
                return client
        return None

    async def get_all(self) -> list[Client]:
        return list(self._items.values())


class FakeTemplateRepository(_InMemory, TemplateRepository):
    entity_name = "Template"

    async def get_all(self) -> list[Template]:
        return list(self._items.values())


class FakeDocumentRepository(_InMemory, DocumentRepository):
    entity_name = "Document"

    async def get_all(
        self,
        *,
        template_id: int | None = None,
        archived: bool | None = None,
    ) -> list[Document]:
        return [
            d for d in self._items.values()
            if (template_id is None or d.template_id == template_id)
            and (archived is None or d.archived == archived)
        ]

    async def delete_by_template(self, template_id: int) -> int:
        doomed = [i for i, d in self._items.items() if d.template_id == template_id]
        for item_id in doomed:
            del self._items[item_id]
        return len(doomed)


class FakeReportRepository(_InMemory, ReportRepository):
    entity_name = "Report"

    async def get_all(self) -> list[Report]:
        return list(self._items.values())


class FakeUserRepository(_InMemory, UserRepository):
    entity_name = "User"

    async def get_by_username(self, username: str) -> User | None:
        for user in self._items.values():
            if user.username == username:
                return user
        return None


@pytest.fixture
def client_repo() -> FakeClientRepository:
    return FakeClientRepository()


@pytest.fixture
def template_repo() -> FakeTemplateRepository:
    return FakeTemplateRepository()


@pytest.fixture
def document_repo() -> FakeDocumentRepository:
    return FakeDocumentRepository()


@pytest.fixture
def report_repo() -> FakeReportRepository:
    return FakeReportRepository()


@pytest.fixture
def user_repo() -> FakeUserRepository:
    return FakeUserRepository()
