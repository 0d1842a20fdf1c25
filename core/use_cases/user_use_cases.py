import logging
from typing import List
from core.entities.user import User
from core.repositories.user_repository import UserRepository


logger = logging.getLogger(__name__)


class UserNotFoundError(LookupError):
    pass

def get_user(repo: UserRepository, user_id: int) -> User:
    user = repo.get_by_id(user_id)
    if user is None:
        logger.info("User %s not found", user_id)
        raise UserNotFoundError("User not found")
    return user

def create_user(repo: UserRepository, name: str, email: str, password: str) -> User:
    name = name.strip()
    email = email.strip()
    if not name:
        raise ValueError("Name must not be empty")
    if not email:
        raise ValueError("Email must not be empty")
    user = repo.create_user(name=name, email=email, password=password)
    logger.info("Created user id=%s name=%s", user.id, user.name)
    return user

def list_users(repo: UserRepository) -> List[User]:
    return repo.list_users()
