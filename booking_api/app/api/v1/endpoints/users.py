"""
User endpoints for API v1.

Provide registration, login, the current user's profile and
administrator-only user management.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, status

from booking_api.app.core.db import SQLITE_MAX_INTEGER
from booking_api.app.core.security import Actor, create_access_token, get_current_user, require_roles
from booking_api.app.schemas.user import Role, RoleUpdate, Token, UserCreate, UserLogin, UserRead
from booking_api.app.services.user_service import UserService, UsernameTakenError


router = APIRouter()


@router.post("/", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def register_user(user: UserCreate) -> UserRead:
    """Register a new user.

    The very first account becomes an administrator; all later
    accounts get the ``USER`` role.  A taken username yields 409.
    """
    try:
        return await UserService.create_user(user)
    except UsernameTakenError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e


@router.post("/login", response_model=Token)
async def login_user(credentials: UserLogin) -> Token:
    """Authenticate a user and return a bearer token."""
    db_user = await UserService.authenticate(credentials.username, credentials.password)
    if not db_user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    return Token(access_token=create_access_token({"sub": db_user.username}))


@router.get("/me", response_model=UserRead)
async def read_current_user(current_user: Actor = Depends(get_current_user)) -> UserRead:
    return UserRead(id=current_user.user_id, username=current_user.username, role=current_user.role)


@router.get("/", response_model=List[UserRead])
async def list_users(current_user: Actor = Depends(require_roles(Role.ADMIN))) -> List[UserRead]:
    """List all users.  Administrators only."""
    return await UserService.list_users()


@router.put("/{user_id}/role", response_model=UserRead)
async def update_user_role(
    body: RoleUpdate,
    user_id: int = Path(..., ge=1, le=SQLITE_MAX_INTEGER, description="ID of the user"),
    current_user: Actor = Depends(require_roles(Role.ADMIN)),
) -> UserRead:
    """Change the role of a user.  Administrators only."""
    updated = await UserService.set_role(user_id, body.role)
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"User {user_id} not found")
    return updated
