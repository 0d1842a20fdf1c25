from functools import lru_cache

from config.settings import settings
from core.repositories.user_repository import UserRepository
from core.services.file_storage import FileStorage
from core.services.async_operation import AsyncOperation
from infrastructure.db.memory import build_user_repository
from infrastructure.storage.local_files import LocalFileStorage
from infrastructure.operations.random_operation import build_random_operation


# одно хранилище на процесс: данные живут до перезапуска
@lru_cache(maxsize=None)
def get_user_repo() -> UserRepository:
    return build_user_repository(seed=settings.SEED_USERS)

def get_file_storage() -> FileStorage:
    return LocalFileStorage(settings.UPLOADS_DIR)

def get_async_operation() -> AsyncOperation:
    return build_random_operation()
