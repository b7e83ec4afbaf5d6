"""Abstract repository interface (port) for User persistence."""

from abc import ABC, abstractmethod

from docarchive.domain.entities import User


class UserRepository(ABC):

    @abstractmethod
    async def get_by_id(self, user_id: int) -> User | None:
        ...

    @abstractmethod
    async def get_by_username(self, username: str) -> User | None:
        ...

    @abstractmethod
    async def create(self, user: User) -> User:
        ...
