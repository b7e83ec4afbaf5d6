"""Pydantic DTOs (Data Transfer Objects) for the Client feature."""

from datetime import datetime

from pydantic import Field

from docarchive.application.schemas.base import CamelModel


class ClientCreate(CamelModel):
    """Schema for registering a new client."""

    name: str = Field(..., min_length=1, max_length=255, examples=["Ahmed Ali"])
    id_number: str = Field(..., min_length=1, max_length=50, examples=["1029384756"])
    id_expiry: str = Field(..., max_length=50, examples=["2030-01-01"])
    mobile: str = Field(..., max_length=50, examples=["0500000000"])
    description: str | None = None
    id_image_url: str | None = Field(None, max_length=2048)


class ClientUpdate(CamelModel):
    """Schema for updating an existing client — all fields optional."""

    name: str | None = Field(None, min_length=1, max_length=255)
    id_number: str | None = Field(None, min_length=1, max_length=50)
    id_expiry: str | None = Field(None, max_length=50)
    mobile: str | None = Field(None, max_length=50)
    description: str | None = None
    id_image_url: str | None = Field(None, max_length=2048)


class ClientResponse(CamelModel):
    """Schema returned to the client."""

    id: int
    name: str
    id_number: str
    id_expiry: str
    mobile: str
    description: str | None
    id_image_url: str | None
    created_at: datetime
    updated_at: datetime
