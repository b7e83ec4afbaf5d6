"""Archive endpoints — archiving state lives on the document itself."""

from fastapi import APIRouter, Depends, HTTPException, status

from docarchive.application.schemas import ArchiveMetadataSchema, DocumentResponse
from docarchive.application.services import ArchiveService
from docarchive.domain.exceptions import DomainValidationError, EntityNotFoundError
from docarchive.infrastructure.dependencies import get_archive_service

router = APIRouter(prefix="/archive", tags=["Archive"])


@router.get("", response_model=list[DocumentResponse])
async def list_archived(
    service: ArchiveService = Depends(get_archive_service),
) -> list[DocumentResponse]:
    documents = await service.list_archived()
    return [DocumentResponse.model_validate(d, from_attributes=True) for d in documents]


@router.post("/{document_id}", response_model=DocumentResponse)
async def archive_document(
    document_id: int,
    metadata: ArchiveMetadataSchema,
    service: ArchiveService = Depends(get_archive_service),
) -> DocumentResponse:
    """Archive a document, replacing any previous archive metadata."""
    try:
        document = await service.archive_document(document_id, metadata)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return DocumentResponse.model_validate(document, from_attributes=True)


@router.delete("/{document_id}", response_model=DocumentResponse)
async def unarchive_document(
    document_id: int,
    service: ArchiveService = Depends(get_archive_service),
) -> DocumentResponse:
    """Return a document to the active set and discard its archive metadata."""
    try:
        document = await service.unarchive_document(document_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return DocumentResponse.model_validate(document, from_attributes=True)
