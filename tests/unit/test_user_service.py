"""Unit tests for operator accounts."""

import pytest

from docarchive.application.schemas import UserCreate
from docarchive.application.services import UserService
from docarchive.domain.exceptions import DuplicateEntityError, EntityNotFoundError


@pytest.fixture
def service(user_repo) -> UserService:
    return UserService(user_repo)


@pytest.mark.asyncio
async def test_create_user_hashes_password(service: UserService):
    user = await service.create_user(UserCreate(username="admin", password="s3cret"))

    assert user.id == 1
    assert user.password_hash != "s3cret"
    assert await service.check_password("admin", "s3cret") is True
    assert await service.check_password("admin", "wrong") is False


@pytest.mark.asyncio
async def test_duplicate_username(service: UserService):
    await service.create_user(UserCreate(username="admin", password="a"))
    with pytest.raises(DuplicateEntityError, match="already exists"):
        await service.create_user(UserCreate(username="admin", password="b"))


@pytest.mark.asyncio
async def test_lookup(service: UserService):
    created = await service.create_user(UserCreate(username="clerk", password="pw"))

    assert (await service.get_user(created.id)).username == "clerk"
    assert (await service.get_user_by_username("clerk")).id == created.id
    assert await service.get_user_by_username("nobody") is None
    assert await service.check_password("nobody", "pw") is False
    with pytest.raises(EntityNotFoundError):
        await service.get_user(99)
