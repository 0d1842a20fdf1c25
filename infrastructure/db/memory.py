import itertools
from threading import Lock
from typing import Iterable, List, Optional

from core.entities.user import User
from core.repositories.user_repository import UserRepository


SEED_USERS = (
    User(id=1, name="John", email="john@test.com", password="password123"),
    User(id=2, name="Jane", email="jane@test.com", password="admin"),
)


class InMemoryUserRepository(UserRepository):
    """Пользователи живут в памяти процесса, порядок — порядок вставки.

    Идентификаторы выдаёт монотонный счётчик, а не длина списка,
    поэтому они уникальны и строго возрастают.
    """
    def __init__(self, seed: Iterable[User] = ()):
        self._users: List[User] = []
        self._lock = Lock()
        last_id = 0
        for user in seed:
            self._users.append(User(id=user.id, name=user.name, email=user.email, password=user.password))
            last_id = max(last_id, int(user.id or 0))
        self._ids = itertools.count(last_id + 1)

    def create_user(self, name: str, email: str, password: str) -> User:
        with self._lock:
            user = User(id=next(self._ids), name=name, email=email, password=password)
            self._users.append(user)
        return user

    def get_by_id(self, user_id: int) -> Optional[User]:
        for user in self._users:
            if user.id == user_id:
                return user
        return None

    def list_users(self) -> List[User]:
        with self._lock:
            return list(self._users)

    def count(self) -> int:
        return len(self._users)


def build_user_repository(seed: bool = True) -> InMemoryUserRepository:
    return InMemoryUserRepository(SEED_USERS if seed else ())
