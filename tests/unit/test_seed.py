"""Unit tests for the sample template seeded at startup."""

import pytest

from docarchive.application.services import DocumentValidator
from docarchive.domain.entities import FieldType, QuestionType
from docarchive.domain.exceptions import DocumentValidationError
from docarchive.infrastructure.database.seed import seed_sample_template


@pytest.mark.asyncio
async def test_seeds_marriage_template_once(template_repo):
    created = await seed_sample_template(template_repo)

    assert created.name == "عقد زواج"
    assert [f.id for f in created.fields] == ["field_1", "field_2", "field_3"]
    assert created.get_field("field_3").type is FieldType.DATE
    assert created.get_field("field_3").format == "DMY"
    assert [q.type for q in created.questions] == [QuestionType.YES_NO, QuestionType.YES_NO]
    assert created.questions[0].field_id == "field_1"

    assert await seed_sample_template(template_repo) is None
    assert len(await template_repo.get_all()) == 1


@pytest.mark.asyncio
async def test_seeded_template_contract(template_repo):
    template = await seed_sample_template(template_repo)
    validator = DocumentValidator()

    validator.validate(
        template,
        {"field_1": "1", "field_2": "2", "field_3": "01/01/2024", "q_question_1": True},
    )
    with pytest.raises(DocumentValidationError) as exc_info:
        validator.validate(template, {"field_1": "1", "field_2": "2", "field_3": "01/01/2024"})
    assert list(exc_info.value.errors) == ["q_question_1"]
