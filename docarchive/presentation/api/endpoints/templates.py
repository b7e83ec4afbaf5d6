"""Template CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from docarchive.application.schemas import TemplateCreate, TemplateResponse, TemplateUpdate
from docarchive.application.services import TemplateService
from docarchive.domain.exceptions import (
    DomainValidationError,
    EntityNotFoundError,
    TemplateInUseError,
)
from docarchive.infrastructure.dependencies import get_template_service

router = APIRouter(prefix="/templates", tags=["Templates"])


@router.get("", response_model=list[TemplateResponse])
async def list_templates(
    service: TemplateService = Depends(get_template_service),
) -> list[TemplateResponse]:
    templates = await service.list_templates()
    return [TemplateResponse.model_validate(t, from_attributes=True) for t in templates]


@router.get("/{template_id}", response_model=TemplateResponse)
async def get_template(
    template_id: int,
    service: TemplateService = Depends(get_template_service),
) -> TemplateResponse:
    try:
        template = await service.get_template(template_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return TemplateResponse.model_validate(template, from_attributes=True)


@router.post("", response_model=TemplateResponse, status_code=status.HTTP_201_CREATED)
async def create_template(
    data: TemplateCreate,
    service: TemplateService = Depends(get_template_service),
) -> TemplateResponse:
    """Create a template. Question references must resolve to its own fields."""
    try:
        template = await service.create_template(data)
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return TemplateResponse.model_validate(template, from_attributes=True)


@router.patch("/{template_id}", response_model=TemplateResponse)
async def update_template(
    template_id: int,
    data: TemplateUpdate,
    service: TemplateService = Depends(get_template_service),
) -> TemplateResponse:
    """Partially update a template.

    Replacing ``fields`` without ``questions`` drops the questions linked to
    removed fields.
    """
    try:
        template = await service.update_template(template_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return TemplateResponse.model_validate(template, from_attributes=True)


@router.delete("/{template_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_template(
    template_id: int,
    service: TemplateService = Depends(get_template_service),
) -> None:
    """Delete a template, applying the configured policy to its documents."""
    try:
        await service.delete_template(template_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except TemplateInUseError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
