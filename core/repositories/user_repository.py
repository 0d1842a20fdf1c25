from abc import ABC, abstractmethod
from typing import Optional, List
from core.entities.user import User


class UserRepository(ABC):
    @abstractmethod
    def create_user(self, name: str, email: str, password: str) -> User:...

    @abstractmethod
    def get_by_id(self, user_id: int) -> Optional[User]:...

    @abstractmethod
    def list_users(self) -> List[User]:...

    @abstractmethod
    def count(self) -> int:...
