"""HTTP tests for /api/archive."""

import pytest
import pytest_asyncio
from httpx import AsyncClient

ARCHIVE_FORM = {
    "title": "x",
    "versionType": "original",
    "storageLocation": {"cabinet": "A", "shelf": "1"},
}


@pytest_asyncio.fixture
async def document_id(client: AsyncClient, template_id: int) -> int:
    response = await client.post(
        "/api/documents", json={"templateId": template_id, "data": {"field_1": "5"}}
    )
    return response.json()["id"]


@pytest.mark.asyncio
async def test_archive_then_unarchive(client: AsyncClient, document_id: int):
    archived = await client.post(f"/api/archive/{document_id}", json=ARCHIVE_FORM)

    assert archived.status_code == 200
    assert archived.json()["archived"] is True
    assert archived.json()["archiveMetadata"]["title"] == "x"
    assert archived.json()["archiveMetadata"]["storageLocation"]["cabinet"] == "A"

    listing = (await client.get("/api/archive")).json()
    assert [d["id"] for d in listing] == [document_id]

    restored = await client.delete(f"/api/archive/{document_id}")

    assert restored.status_code == 200
    assert restored.json()["archived"] is False
    assert restored.json()["archiveMetadata"] is None
    assert (await client.get("/api/archive")).json() == []


@pytest.mark.asyncio
async def test_lenient_metadata_by_default(client: AsyncClient, document_id: int):
    response = await client.post(f"/api/archive/{document_id}", json={"notes": "partial"})

    assert response.status_code == 200
    assert response.json()["archiveMetadata"]["title"] is None


@pytest.mark.asyncio
async def test_strict_requests_reject_incomplete_form(
    client: AsyncClient, document_id: int, app_settings
):
    app_settings.strict_archive_requests = True

    response = await client.post(f"/api/archive/{document_id}", json={"title": "x"})

    assert response.status_code == 400
    assert "versionType" in response.json()["detail"]
    assert (await client.get(f"/api/documents/{document_id}")).json()["archived"] is False


@pytest.mark.asyncio
async def test_bad_version_type_is_400(client: AsyncClient, document_id: int):
    response = await client.post(
        f"/api/archive/{document_id}", json={**ARCHIVE_FORM, "versionType": "draft"}
    )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_archive_missing_document_is_404(client: AsyncClient):
    assert (await client.post("/api/archive/77", json=ARCHIVE_FORM)).status_code == 404
    assert (await client.delete("/api/archive/77")).status_code == 404
