"""Application service for operator accounts.

Accounts are stored only; no route issues tokens or checks credentials.
"""

import logging
from collections.abc import Callable

from docarchive.application.interfaces import UserRepository
from docarchive.application.schemas import UserCreate
from docarchive.domain.entities import User
from docarchive.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from docarchive.infrastructure.security import hash_password, verify_password

logger = logging.getLogger(__name__)


class UserService:

    def __init__(
        self,
        repository: UserRepository,
        hasher: Callable[[str], str] = hash_password,
        verifier: Callable[[str, str], bool] = verify_password,
    ):
        self._repository = repository
        self._hash = hasher
        self._verify = verifier

    async def get_user(self, user_id: int) -> User:
        user = await self._repository.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError("User", user_id)
        return user

    async def get_user_by_username(self, username: str) -> User | None:
        return await self._repository.get_by_username(username)

    async def create_user(self, data: UserCreate) -> User:
        if await self._repository.get_by_username(data.username) is not None:
            raise DuplicateEntityError("User", "username", data.username)
        user = User(username=data.username, password_hash=self._hash(data.password))
        created = await self._repository.create(user)
        logger.info("Created user %s (%s)", created.id, created.username)
        return created

    async def check_password(self, username: str, password: str) -> bool:
        """True when ``username`` exists and ``password`` matches its hash."""
        user = await self._repository.get_by_username(username)
        return user is not None and self._verify(password, user.password_hash)
