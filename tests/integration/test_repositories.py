"""SQLAlchemy repository adapters against an in-memory SQLite database."""

import pytest

from docarchive.application.schemas import UserCreate
from docarchive.application.services import UserService
from docarchive.domain.entities import ArchiveMetadata, Document, StorageLocation, VersionType
from docarchive.infrastructure.database.repositories import (
    SQLAlchemyDocumentRepository,
    SQLAlchemyTemplateRepository,
    SQLAlchemyUserRepository,
)
from docarchive.infrastructure.database.seed import seed_sample_template


@pytest.mark.asyncio
async def test_user_accounts_persist(session_factory):
    async with session_factory() as session:
        service = UserService(SQLAlchemyUserRepository(session))
        created = await service.create_user(UserCreate(username="admin", password="s3cret"))
        await session.commit()

    async with session_factory() as session:
        repository = SQLAlchemyUserRepository(session)
        stored = await repository.get_by_username("admin")
        assert stored.id == created.id
        assert stored.password_hash != "s3cret"
        assert await UserService(repository).check_password("admin", "s3cret") is True


@pytest.mark.asyncio
async def test_archive_metadata_round_trips_through_json(session_factory):
    async with session_factory() as session:
        repository = SQLAlchemyDocumentRepository(session)
        document = await repository.create(Document(template_id=1, data={"field_1": "5"}))
        document.archive(
            ArchiveMetadata(
                title="x",
                version_type=VersionType.COPY,
                storage_location=StorageLocation(cabinet="A", shelf="1"),
            )
        )
        await repository.update(document)
        await session.commit()

    async with session_factory() as session:
        stored = await SQLAlchemyDocumentRepository(session).get_by_id(document.id)
        assert stored.archived is True
        assert stored.archive_metadata.version_type is VersionType.COPY
        assert stored.archive_metadata.cabinet == "A"
        assert stored.archive_metadata.storage_location.folder is None


@pytest.mark.asyncio
async def test_delete_by_template_counts_rows(session_factory):
    async with session_factory() as session:
        repository = SQLAlchemyDocumentRepository(session)
        for template_id in (1, 1, 2):
            await repository.create(Document(template_id=template_id, data={}))

        assert await repository.delete_by_template(1) == 2
        remaining = await repository.get_all()
        assert [d.template_id for d in remaining] == [2]


@pytest.mark.asyncio
async def test_seed_on_database(session_factory):
    async with session_factory() as session:
        repository = SQLAlchemyTemplateRepository(session)
        await seed_sample_template(repository)
        await session.commit()

    async with session_factory() as session:
        templates = await SQLAlchemyTemplateRepository(session).get_all()
        assert len(templates) == 1
        assert templates[0].questions[0].field_id == "field_1"
        assert templates[0].fields[0].client_field.value == "name"
