from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from core.entities.user import User
from core.repositories.user_repository import UserRepository
from core.use_cases.user_use_cases import get_user, create_user, list_users, UserNotFoundError
from infrastructure.web.dependencies import get_user_repo


router = APIRouter(prefix="/api", tags=["users"])


class CreateUserRequest(BaseModel):
    name: str = Field(..., description="Имя пользователя")
    email: str
    password: str

class UserResponse(BaseModel):
    id: int
    name: str
    email: str

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(**user.public_dict())


@router.get("/users/{user_id}", response_model=UserResponse)
def read_user(user_id: int, repo: UserRepository = Depends(get_user_repo)):
    try:
        user = get_user(repo, user_id)
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return UserResponse.from_entity(user)

@router.post("/users", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def add_user(payload: CreateUserRequest, repo: UserRepository = Depends(get_user_repo)):
    try:
        user = create_user(repo, name=payload.name, email=payload.email, password=payload.password)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return UserResponse.from_entity(user)

@router.get("/all-users", response_model=List[UserResponse])
def read_all_users(repo: UserRepository = Depends(get_user_repo)):
    return [UserResponse.from_entity(u) for u in list_users(repo)]
