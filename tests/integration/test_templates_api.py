"""HTTP tests for /api/templates."""

import pytest
from httpx import AsyncClient

TEMPLATE = {
    "name": "عقد زواج",
    "description": "نموذج عقد زواج يتضمن بيانات الزوجين والشهود",
    "fields": [
        {"id": "field_1", "name": "معلومات الزوج", "type": "client", "required": True, "clientField": "name"},
        {"id": "field_3", "name": "تاريخ العقد", "type": "date", "required": True, "format": "DMY"},
    ],
    "questions": [
        {"id": "question_1", "text": "هل تم التحقق؟", "type": "yesno", "required": True, "fieldId": "field_1"},
    ],
}


@pytest.mark.asyncio
async def test_create_template_round_trips_definition(client: AsyncClient):
    response = await client.post("/api/templates", json=TEMPLATE)

    assert response.status_code == 201
    body = response.json()
    assert body["fields"][0]["clientField"] == "name"
    assert body["fields"][1]["format"] == "DMY"
    assert body["questions"][0]["fieldId"] == "field_1"

    fetched = (await client.get(f"/api/templates/{body['id']}")).json()
    assert fetched["fields"] == body["fields"]
    assert fetched["questions"] == body["questions"]


@pytest.mark.asyncio
async def test_dangling_question_reference_is_400(client: AsyncClient):
    payload = {**TEMPLATE, "questions": [{"id": "q", "text": "?", "type": "yesno", "fieldId": "nope"}]}
    response = await client.post("/api/templates", json=payload)

    assert response.status_code == 400
    assert "nope" in response.json()["detail"]


@pytest.mark.asyncio
async def test_unknown_field_type_is_400(client: AsyncClient):
    payload = {**TEMPLATE, "fields": [{"id": "f", "name": "F", "type": "signature"}], "questions": []}
    response = await client.post("/api/templates", json=payload)
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_patch_fields_cascades_questions(client: AsyncClient):
    created = (await client.post("/api/templates", json=TEMPLATE)).json()

    response = await client.patch(
        f"/api/templates/{created['id']}",
        json={"fields": [TEMPLATE["fields"][1]]},
    )

    assert response.status_code == 200
    assert [f["id"] for f in response.json()["fields"]] == ["field_3"]
    assert response.json()["questions"] == []


@pytest.mark.asyncio
async def test_delete_template_orphans_documents(client: AsyncClient, template_id: int):
    document = (
        await client.post("/api/documents", json={"templateId": template_id, "data": {"field_1": "5"}})
    ).json()

    assert (await client.delete(f"/api/templates/{template_id}")).status_code == 204
    assert (await client.get(f"/api/templates/{template_id}")).status_code == 404

    orphan = await client.get(f"/api/documents/{document['id']}")
    assert orphan.status_code == 200
    assert orphan.json()["templateId"] == template_id


@pytest.mark.asyncio
async def test_delete_restrict_policy_is_409(client: AsyncClient, template_id: int, app_settings):
    app_settings.template_delete_policy = "restrict"
    await client.post("/api/documents", json={"templateId": template_id, "data": {"field_1": "5"}})

    response = await client.delete(f"/api/templates/{template_id}")

    assert response.status_code == 409
    assert (await client.get(f"/api/templates/{template_id}")).status_code == 200


@pytest.mark.asyncio
async def test_delete_cascade_policy_removes_documents(
    client: AsyncClient, template_id: int, app_settings
):
    app_settings.template_delete_policy = "cascade"
    await client.post("/api/documents", json={"templateId": template_id, "data": {"field_1": "5"}})

    assert (await client.delete(f"/api/templates/{template_id}")).status_code == 204
    assert (await client.get("/api/documents")).json() == []
