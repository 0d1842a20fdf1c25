"""
Unit tests for the in-memory user repository
"""
from concurrent.futures import ThreadPoolExecutor

from core.entities.user import User
from core.use_cases.user_use_cases import get_user, UserNotFoundError
from infrastructure.db.memory import InMemoryUserRepository, build_user_repository

import pytest


def test_seeded_repository_contains_john_and_jane():
    repo = build_user_repository(seed=True)

    assert [u.name for u in repo.list_users()] == ["John", "Jane"]
    assert repo.get_by_id(1).password == "password123"


def test_unseeded_repository_starts_empty_and_ids_start_at_one():
    repo = build_user_repository(seed=False)

    assert repo.count() == 0
    assert repo.create_user("A", "a@example.com", "pw").id == 1


def test_ids_continue_after_highest_seed():
    repo = InMemoryUserRepository([User(id=10, name="Old", email="old@example.com", password="pw")])

    assert repo.create_user("New", "new@example.com", "pw").id == 11


def test_list_users_returns_a_copy():
    repo = build_user_repository(seed=True)

    users = repo.list_users()
    users.append(User(id=99, name="Ghost", email="g@example.com", password="pw"))

    assert repo.count() == 2


def test_concurrent_creates_get_unique_ids():
    repo = build_user_repository(seed=True)

    with ThreadPoolExecutor(max_workers=8) as pool:
        users = list(pool.map(lambda i: repo.create_user(f"U{i}", f"u{i}@example.com", "pw"), range(200)))

    ids = [u.id for u in users]
    assert len(set(ids)) == 200
    assert repo.count() == 202
    stored_ids = [u.id for u in repo.list_users()]
    assert stored_ids == sorted(stored_ids)


def test_get_user_raises_for_missing_id():
    repo = build_user_repository(seed=True)

    with pytest.raises(UserNotFoundError):
        get_user(repo, 42)
