"""Unit tests for the archive lifecycle."""

import pytest
import pytest_asyncio

from docarchive.application.schemas import ArchiveMetadataSchema
from docarchive.application.services import ArchiveService
from docarchive.domain.entities import Document, VersionType
from docarchive.domain.exceptions import DomainValidationError, EntityNotFoundError


def _metadata(**overrides) -> ArchiveMetadataSchema:
    data = {
        "title": "x",
        "versionType": "original",
        "storageLocation": {"cabinet": "A", "shelf": "1"},
    }
    data.update(overrides)
    return ArchiveMetadataSchema.model_validate(data)


@pytest_asyncio.fixture
async def document(document_repo) -> Document:
    return await document_repo.create(Document(template_id=1, data={"field_1": "5"}))


@pytest.fixture
def service(document_repo) -> ArchiveService:
    return ArchiveService(document_repo)


@pytest.mark.asyncio
async def test_archive_sets_state_and_metadata(service: ArchiveService, document: Document):
    archived = await service.archive_document(document.id, _metadata())

    assert archived.archived is True
    assert archived.archived_at is not None
    assert archived.archive_metadata.title == "x"
    assert archived.archive_metadata.version_type is VersionType.ORIGINAL
    assert archived.archive_metadata.cabinet == "A"


@pytest.mark.asyncio
async def test_archive_then_unarchive_discards_metadata(service: ArchiveService, document: Document):
    await service.archive_document(document.id, _metadata(notes="keep?"))
    restored = await service.unarchive_document(document.id)

    assert restored.archived is False
    assert restored.archive_metadata is None
    assert restored.archived_at is None


@pytest.mark.asyncio
async def test_rearchive_replaces_metadata(service: ArchiveService, document: Document):
    await service.archive_document(document.id, _metadata(notes="first"))
    again = await service.archive_document(
        document.id, ArchiveMetadataSchema.model_validate({"title": "second"})
    )
    assert again.archive_metadata.title == "second"
    assert again.archive_metadata.notes is None
    assert again.archive_metadata.storage_location is None


@pytest.mark.asyncio
async def test_lenient_metadata_accepted_by_default(service: ArchiveService, document: Document):
    archived = await service.archive_document(document.id, ArchiveMetadataSchema())
    assert archived.archived is True


@pytest.mark.asyncio
async def test_unarchive_is_idempotent(service: ArchiveService, document: Document):
    restored = await service.unarchive_document(document.id)
    assert restored.archived is False


@pytest.mark.asyncio
async def test_missing_document(service: ArchiveService):
    with pytest.raises(EntityNotFoundError):
        await service.archive_document(404, _metadata())
    with pytest.raises(EntityNotFoundError):
        await service.unarchive_document(404)


@pytest.mark.asyncio
async def test_list_archived(service: ArchiveService, document: Document, document_repo):
    other = await document_repo.create(Document(template_id=1, data={}))
    await service.archive_document(other.id, _metadata())

    archived = await service.list_archived()
    assert [d.id for d in archived] == [other.id]


@pytest.mark.asyncio
async def test_strict_requests_require_cabinet_and_shelf(document_repo, document: Document):
    service = ArchiveService(document_repo, strict_requests=True)

    with pytest.raises(DomainValidationError) as exc_info:
        await service.archive_document(
            document.id, _metadata(storageLocation={"cabinet": "A"})
        )
    assert "storageLocation.shelf" in exc_info.value.errors
    assert (await document_repo.get_by_id(document.id)).archived is False


@pytest.mark.asyncio
async def test_strict_requests_accept_complete_form(document_repo, document: Document):
    service = ArchiveService(document_repo, strict_requests=True)
    archived = await service.archive_document(document.id, _metadata())
    assert archived.archived is True
