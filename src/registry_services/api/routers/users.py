"""
registry_services.api.routers.users

User registry endpoints.

Responsibilities:
- Map path/body inputs to `UserService` calls.
- Map None results to 404 and validation failures to 400.
- Serve the single-user read the order service enriches from.
"""

from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from starlette.status import HTTP_201_CREATED, HTTP_400_BAD_REQUEST, HTTP_404_NOT_FOUND

from registry_services.api.deps import user_service_dep
from registry_services.domain.models import User
from registry_services.domain.validation import ValidationFailure
from registry_services.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


class CreateUserRequest(BaseModel):
    name: str = ""
    email: str = ""


class UserResponse(BaseModel):
    id: int
    name: str
    email: str
    created: datetime

    @classmethod
    def from_user(cls, user: User) -> UserResponse:
        return cls(id=user.id, name=user.name, email=user.email, created=user.created)


@router.get("", response_model=list[UserResponse])
async def list_users(svc: UserService = Depends(user_service_dep)) -> list[UserResponse]:
    return [UserResponse.from_user(u) for u in svc.list_users()]


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: int, svc: UserService = Depends(user_service_dep)) -> UserResponse:
    user = svc.get(user_id)
    if user is None:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="User not found")
    return UserResponse.from_user(user)


@router.post("", response_model=UserResponse, status_code=HTTP_201_CREATED)
async def create_user(
    body: CreateUserRequest,
    svc: UserService = Depends(user_service_dep),
) -> UserResponse:
    try:
        user = svc.create(name=body.name, email=body.email)
    except ValidationFailure as e:
        raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return UserResponse.from_user(user)
