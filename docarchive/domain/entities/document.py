"""Domain entities for documents and their archive metadata."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class VersionType(str, Enum):
    ORIGINAL = "original"
    COPY = "copy"


@dataclass
class StorageLocation:
    """Physical location of an archived paper document."""

    cabinet: str | None = None
    shelf: str | None = None
    folder: str | None = None


@dataclass
class ArchiveMetadata:
    """Storage record attached to a document while it is archived.

    Every attribute is optional here: stored records may predate the
    stricter archiving form.
    """

    title: str | None = None
    version_type: VersionType | None = None
    expiry_date: str | None = None
    storage_location: StorageLocation | None = None
    notes: str | None = None

    @property
    def cabinet(self) -> str | None:
        return self.storage_location.cabinet if self.storage_location else None


@dataclass
class Document:
    """A concrete set of answers submitted against one template.

    ``template_id`` is a weak reference: the template is looked up when
    needed and may no longer exist.
    """

    template_id: int
    data: dict[str, Any]
    archived: bool = False
    archived_at: datetime | None = None
    archive_metadata: ArchiveMetadata | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def merge_data(self, data: dict[str, Any]) -> None:
        """Overlay the given keys onto the stored payload."""
        self.data = {**self.data, **data}
        self.updated_at = datetime.now(timezone.utc)

    def archive(self, metadata: ArchiveMetadata) -> None:
        """Move to the archived state, replacing any previous metadata."""
        now = datetime.now(timezone.utc)
        self.archived = True
        self.archive_metadata = metadata
        self.archived_at = now
        self.updated_at = now

    def unarchive(self) -> None:
        """Return to the unarchived state; metadata is discarded."""
        self.archived = False
        self.archive_metadata = None
        self.archived_at = None
        self.updated_at = datetime.now(timezone.utc)
