"""
Pytest configuration and fixtures for testing
"""
import pytest
from fastapi.testclient import TestClient

from main import create_app
from infrastructure.db.memory import build_user_repository
from infrastructure.storage.local_files import LocalFileStorage
from infrastructure.operations.random_operation import RandomAsyncOperation
from infrastructure.web.dependencies import get_user_repo, get_file_storage, get_async_operation


@pytest.fixture
def user_repo():
    """Fresh in-memory repository seeded with John and Jane for every test"""
    return build_user_repository(seed=True)


@pytest.fixture
def uploads_dir(tmp_path):
    path = tmp_path / "uploads"
    path.mkdir()
    return path


@pytest.fixture
def operation():
    """Async operation that never fails unless a test changes failure_rate"""
    return RandomAsyncOperation(failure_rate=0.0)


@pytest.fixture
def app(user_repo, uploads_dir, operation):
    """
    Application with dependencies overridden:
    - isolated user repository
    - temporary upload directory
    - deterministic async operation
    """
    application = create_app()
    application.dependency_overrides[get_user_repo] = lambda: user_repo
    application.dependency_overrides[get_file_storage] = lambda: LocalFileStorage(str(uploads_dir))
    application.dependency_overrides[get_async_operation] = lambda: operation
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app):
    return TestClient(app)
