"""Tests for user service."""

import pytest

from food_diary.adapters.memory_user_repository import InMemoryUserRepository
from food_diary.domain.errors import InvalidInputError, NotFoundError
from food_diary.services.users import UserService


def test_ensure_user_is_idempotent_across_casing() -> None:
    service = UserService(InMemoryUserRepository())

    first = service.ensure_user("Dana")
    second = service.ensure_user("DANA")

    assert first.id == second.id == 1
    assert first.username == "dana"


def test_username_lookup_is_case_insensitive() -> None:
    service = UserService(InMemoryUserRepository())
    created = service.ensure_user("ALICE")

    assert service.get_by_username("Alice") == created
    assert service.get_by_username("alice") == created


def test_ensure_user_allocates_new_ids_for_new_names() -> None:
    service = UserService(InMemoryUserRepository())

    dana = service.ensure_user("dana")
    eli = service.ensure_user("eli")

    assert (dana.id, eli.id) == (1, 2)


@pytest.mark.parametrize("username", ["", "   ", "x" * 51])
def test_ensure_user_rejects_invalid_names(username: str) -> None:
    service = UserService(InMemoryUserRepository())

    with pytest.raises(InvalidInputError):
        service.ensure_user(username)


def test_get_user_raises_for_unknown_id() -> None:
    service = UserService(InMemoryUserRepository())

    with pytest.raises(NotFoundError):
        service.get_user(42)


def test_require_by_username_raises_for_unknown_name() -> None:
    service = UserService(InMemoryUserRepository())

    assert service.get_by_username("ghost") is None
    with pytest.raises(NotFoundError):
        service.require_by_username("ghost")
