"""Document CRUD endpoints. Payloads are validated against the template."""

from fastapi import APIRouter, Depends, HTTPException, status

from docarchive.application.schemas import DocumentCreate, DocumentResponse, DocumentUpdate
from docarchive.application.services import DocumentService
from docarchive.domain.exceptions import (
    DomainValidationError,
    EntityNotFoundError,
    TemplateNotFoundError,
)
from docarchive.infrastructure.dependencies import get_document_service

router = APIRouter(prefix="/documents", tags=["Documents"])


@router.get("", response_model=list[DocumentResponse])
async def list_documents(
    service: DocumentService = Depends(get_document_service),
) -> list[DocumentResponse]:
    documents = await service.list_documents()
    return [DocumentResponse.model_validate(d, from_attributes=True) for d in documents]


@router.get("/template/{template_id}", response_model=list[DocumentResponse])
async def list_documents_by_template(
    template_id: int,
    service: DocumentService = Depends(get_document_service),
) -> list[DocumentResponse]:
    """Documents created from one template, oldest first."""
    documents = await service.list_by_template(template_id)
    return [DocumentResponse.model_validate(d, from_attributes=True) for d in documents]


@router.get("/{document_id}", response_model=DocumentResponse)
async def get_document(
    document_id: int,
    service: DocumentService = Depends(get_document_service),
) -> DocumentResponse:
    try:
        document = await service.get_document(document_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return DocumentResponse.model_validate(document, from_attributes=True)


@router.post("", response_model=DocumentResponse, status_code=status.HTTP_201_CREATED)
async def create_document(
    data: DocumentCreate,
    service: DocumentService = Depends(get_document_service),
) -> DocumentResponse:
    """Create a document. ``data`` must satisfy the template's fields and questions."""
    try:
        document = await service.create_document(data)
    except (TemplateNotFoundError, DomainValidationError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return DocumentResponse.model_validate(document, from_attributes=True)


@router.patch("/{document_id}", response_model=DocumentResponse)
async def update_document(
    document_id: int,
    data: DocumentUpdate,
    service: DocumentService = Depends(get_document_service),
) -> DocumentResponse:
    """Merge a partial payload into the document; only sent keys are validated."""
    try:
        document = await service.update_document(document_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return DocumentResponse.model_validate(document, from_attributes=True)


@router.delete("/{document_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_document(
    document_id: int,
    service: DocumentService = Depends(get_document_service),
) -> None:
    try:
        await service.delete_document(document_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
