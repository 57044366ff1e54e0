"""Unit tests for UserRepository on SQLite."""

import uuid

import pytest
from sqlalchemy.exc import OperationalError

from jotter.core.exceptions import ConflictError, UnexpectedError
from jotter.core.repositories.user_repository import UserRepository


def _user_data(username="alice", email="alice@example.com"):
    return {"username": username, "email": email, "password_hash": "hashed"}


async def test_create_and_lookup(test_session):
    repo = UserRepository(test_session)

    user = await repo.create_user(_user_data())

    assert isinstance(user.id, uuid.UUID)
    assert user.created_at is not None
    assert (await repo.get_by_id(user.id)).username == "alice"
    assert (await repo.get_by_username("alice")).id == user.id
    assert (await repo.get_by_email("alice@example.com")).id == user.id
    assert await repo.get_by_username("bob") is None
    assert await repo.get_by_id(uuid.uuid4()) is None


async def test_taken_checks(test_session):
    repo = UserRepository(test_session)
    await repo.create_user(_user_data())

    assert await repo.is_username_taken("alice") is True
    assert await repo.is_username_taken("bob") is False
    assert await repo.is_email_taken("alice@example.com") is True
    assert await repo.is_email_taken("bob@example.com") is False


@pytest.mark.parametrize(
    "second",
    [
        _user_data(email="other@example.com"),
        _user_data(username="bob"),
    ],
)
async def test_duplicate_insert_is_conflict(test_session, second):
    repo = UserRepository(test_session)
    first = await repo.create_user(_user_data())

    with pytest.raises(ConflictError) as exc_info:
        await repo.create_user(second)

    assert exc_info.value.status_code == 409
    # the first account is untouched and the session is usable again
    assert (await repo.get_by_id(first.id)).email == "alice@example.com"


async def test_query_failure_is_unexpected():
    class BrokenSession:
        async def execute(self, stmt):
            raise OperationalError("SELECT", {}, Exception("gone"))

    repo = UserRepository(BrokenSession())

    with pytest.raises(UnexpectedError):
        await repo.get_by_username("alice")
