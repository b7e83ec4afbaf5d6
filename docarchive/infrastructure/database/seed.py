"""Sample data inserted into an empty database at startup."""

import logging

from docarchive.application.interfaces import TemplateRepository
from docarchive.domain.entities import (
    ClientAttribute,
    FieldDefinition,
    FieldType,
    QuestionDefinition,
    QuestionType,
    Template,
)

logger = logging.getLogger(__name__)


def marriage_contract_template() -> Template:
    """Marriage contract: two client-bound parties, a contract date and two checks."""
    return Template(
        name="عقد زواج",
        description="نموذج عقد زواج يتضمن بيانات الزوجين والشهود",
        fields=[
            FieldDefinition(
                id="field_1",
                name="معلومات الزوج",
                type=FieldType.CLIENT,
                required=True,
                client_field=ClientAttribute.NAME,
            ),
            FieldDefinition(
                id="field_2",
                name="معلومات الزوجة",
                type=FieldType.CLIENT,
                required=True,
                client_field=ClientAttribute.NAME,
            ),
            FieldDefinition(
                id="field_3",
                name="تاريخ العقد",
                type=FieldType.DATE,
                required=True,
                format="DMY",
            ),
        ],
        questions=[
            QuestionDefinition(
                id="question_1",
                text="هل تم التحقق من هوية الزوجين؟",
                type=QuestionType.YES_NO,
                required=True,
                field_id="field_1",
            ),
            QuestionDefinition(
                id="question_2",
                text="هل هناك شروط خاصة للعقد؟",
                type=QuestionType.YES_NO,
                required=False,
            ),
        ],
    )


async def seed_sample_template(repository: TemplateRepository) -> Template | None:
    """Insert the sample template when no template exists yet.

    Idempotent; returns the created template, or None when nothing was seeded.
    """
    if await repository.get_all():
        logger.debug("Templates already present; skipping sample template")
        return None
    template = marriage_contract_template()
    template.check_references()
    created = await repository.create(template)
    logger.info("Seeded sample template %s '%s'", created.id, created.name)
    return created
