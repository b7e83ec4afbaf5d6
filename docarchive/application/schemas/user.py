"""Pydantic DTOs for operator accounts."""

from pydantic import Field

from docarchive.application.schemas.base import CamelModel


class UserCreate(CamelModel):
    username: str = Field(..., min_length=1, max_length=150)
    password: str = Field(..., min_length=1)
