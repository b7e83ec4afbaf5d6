"""Unit tests for the DocumentService."""

import pytest
import pytest_asyncio

from docarchive.application.schemas import DocumentCreate, DocumentUpdate
from docarchive.application.services import DocumentService
from docarchive.domain.entities import (
    FieldDefinition,
    FieldType,
    QuestionDefinition,
    QuestionType,
    Template,
)
from docarchive.domain.exceptions import (
    DocumentValidationError,
    EntityNotFoundError,
    TemplateNotFoundError,
)


@pytest_asyncio.fixture
async def template(template_repo) -> Template:
    return await template_repo.create(
        Template(
            name="عقد زواج",
            description="",
            fields=[
                FieldDefinition(id="field_1", name="الزوج", type=FieldType.CLIENT, required=True),
                FieldDefinition(id="field_2", name="المهر", type=FieldType.NUMBER),
            ],
            questions=[
                QuestionDefinition(
                    id="question_1", text="تحقق؟", type=QuestionType.YES_NO, required=True,
                ),
            ],
        )
    )


@pytest.fixture
def service(document_repo, template_repo) -> DocumentService:
    return DocumentService(document_repo, template_repo)


@pytest.mark.asyncio
async def test_create_document(service: DocumentService, template: Template):
    document = await service.create_document(
        DocumentCreate(template_id=template.id, data={"field_1": "5", "q_question_1": True})
    )
    assert document.id is not None
    assert document.archived is False
    assert document.archive_metadata is None
    assert document.data == {"field_1": "5", "q_question_1": True}


@pytest.mark.asyncio
async def test_create_document_normalises_values_and_keeps_unknown_keys(
    service: DocumentService, template: Template
):
    document = await service.create_document(
        DocumentCreate(
            template_id=template.id,
            data={"field_1": 5, "field_2": "1500", "q_question_1": False, "memo": "x"},
        )
    )
    assert document.data == {"field_1": "5", "field_2": 1500, "q_question_1": False, "memo": "x"}


@pytest.mark.asyncio
async def test_create_document_missing_required_key(service: DocumentService, template: Template):
    with pytest.raises(DocumentValidationError, match="field_1"):
        await service.create_document(
            DocumentCreate(template_id=template.id, data={"q_question_1": True})
        )


@pytest.mark.asyncio
async def test_create_document_unknown_template(service: DocumentService):
    with pytest.raises(TemplateNotFoundError, match="Template with id '99' not found"):
        await service.create_document(DocumentCreate(template_id=99, data={}))


@pytest.mark.asyncio
async def test_update_validates_only_sent_keys(service: DocumentService, template: Template):
    created = await service.create_document(
        DocumentCreate(template_id=template.id, data={"field_1": "5", "q_question_1": True})
    )

    updated = await service.update_document(created.id, DocumentUpdate(data={"field_2": "20"}))

    assert updated.data == {"field_1": "5", "q_question_1": True, "field_2": 20}


@pytest.mark.asyncio
async def test_update_rejects_invalid_value(service: DocumentService, template: Template):
    created = await service.create_document(
        DocumentCreate(template_id=template.id, data={"field_1": "5", "q_question_1": True})
    )
    with pytest.raises(DocumentValidationError):
        await service.update_document(created.id, DocumentUpdate(data={"field_1": ""}))


@pytest.mark.asyncio
async def test_update_cannot_change_template(service: DocumentService, template: Template):
    created = await service.create_document(
        DocumentCreate(template_id=template.id, data={"field_1": "5", "q_question_1": True})
    )
    with pytest.raises(DocumentValidationError) as exc_info:
        await service.update_document(created.id, DocumentUpdate(template_id=template.id + 1))
    assert "templateId" in exc_info.value.errors


@pytest.mark.asyncio
async def test_update_orphaned_document_is_stored_unvalidated(
    service: DocumentService, template: Template, template_repo
):
    created = await service.create_document(
        DocumentCreate(template_id=template.id, data={"field_1": "5", "q_question_1": True})
    )
    await template_repo.delete(template.id)

    updated = await service.update_document(created.id, DocumentUpdate(data={"field_2": "n/a"}))

    assert updated.data["field_2"] == "n/a"
    assert updated.template_id == template.id


@pytest.mark.asyncio
async def test_get_missing_document(service: DocumentService):
    with pytest.raises(EntityNotFoundError):
        await service.get_document(1)


@pytest.mark.asyncio
async def test_list_by_template(service: DocumentService, template: Template, document_repo):
    payload = {"field_1": "5", "q_question_1": True}
    await service.create_document(DocumentCreate(template_id=template.id, data=payload))
    await service.create_document(DocumentCreate(template_id=template.id, data=payload))

    documents = await service.list_by_template(template.id)
    assert [d.id for d in documents] == [1, 2]
    assert await service.list_by_template(template.id + 1) == []


@pytest.mark.asyncio
async def test_delete_document(service: DocumentService, template: Template):
    created = await service.create_document(
        DocumentCreate(template_id=template.id, data={"field_1": "5", "q_question_1": True})
    )
    assert await service.delete_document(created.id) is True
    with pytest.raises(EntityNotFoundError):
        await service.delete_document(created.id)
