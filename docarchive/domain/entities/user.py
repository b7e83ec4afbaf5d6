"""Domain entity — an operator account."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class User:
    username: str
    password_hash: str
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
