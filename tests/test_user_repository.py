"""Tests for the SQLite record store."""

import pytest

from user_management_api.app.core.db import get_connection
from user_management_api.app.core.exceptions import InvalidSortPropertyError, UserAlreadyExistsError
from user_management_api.app.models.user import User
from user_management_api.app.repositories.user_repository import UserRepository


@pytest.fixture
def repo(database):
    conn = get_connection()
    try:
        yield UserRepository(conn)
    finally:
        conn.close()


def test_insert_assigns_id_and_finds_back(repo):
    user = repo.insert(User(email="a@x.com", password="123456", name="Ann"))
    assert user.id == 1
    assert repo.find_by_id(1) == user
    assert repo.find_by_email("a@x.com") == user
    assert repo.exists_by_id(1)
    assert repo.exists_by_email("a@x.com")
    assert not repo.exists_by_email("b@x.com")
    assert repo.find_by_id(2) is None


def test_insert_duplicate_email_raises_conflict(repo):
    repo.insert(User(email="a@x.com", password="123456", name="Ann"))
    with pytest.raises(UserAlreadyExistsError) as exc_info:
        repo.insert(User(email="a@x.com", password="654321", name="Other"))
    assert exc_info.value.email == "a@x.com"


def test_update_to_duplicate_email_raises_conflict(repo):
    repo.insert(User(email="a@x.com", password="123456", name="Ann"))
    bob = repo.insert(User(email="b@x.com", password="123456", name="Bob"))
    bob.email = "a@x.com"
    with pytest.raises(UserAlreadyExistsError):
        repo.update(bob)


def test_delete_by_id(repo):
    repo.insert(User(email="a@x.com", password="123456", name="Ann"))
    repo.delete_by_id(1)
    assert not repo.exists_by_id(1)


def test_find_page_returns_slice_and_total(repo):
    for name in ["Cid", "Ann", "Bob"]:
        repo.insert(User(email=f"{name.lower()}@x.com", password="123456", name=name))
    items, total = repo.find_page(0, 2, [("name", "ASC")])
    assert total == 3
    assert [user.name for user in items] == ["Ann", "Bob"]
    items, total = repo.find_page(1, 2, [("name", "ASC")])
    assert [user.name for user in items] == ["Cid"]


def test_find_page_refuses_unsortable_column(repo):
    with pytest.raises(InvalidSortPropertyError):
        repo.find_page(0, 10, [("password", "ASC")])
