"""Domain entity — a registered client (identity record)."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class Client:
    """Core domain entity representing a registered client.

    ``id_number`` is the national identifier and is unique across clients.
    ``id_image_url`` is an opaque reference to a scanned ID; the service
    never stores the image itself.
    """

    name: str
    id_number: str
    id_expiry: str
    mobile: str
    description: str | None = None
    id_image_url: str | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(self, **changes: object) -> None:
        """Apply a partial update and refresh the updated_at timestamp."""
        for name, value in changes.items():
            if not hasattr(self, name) or name in ("id", "created_at", "updated_at"):
                raise AttributeError(f"Client has no mutable attribute '{name}'")
            setattr(self, name, value)
        self.updated_at = datetime.now(timezone.utc)
