"""
Business logic for users.

The first account ever registered becomes an administrator so that a
fresh installation can be managed; every later registration gets the
restricted ``USER`` role.  Administrators can promote or demote users
afterwards.
"""

import logging
import sqlite3
from typing import List, Optional

from booking_api.app.core.security import hash_password, verify_password
from booking_api.app.repositories.user_repository import UserRepository
from booking_api.app.schemas.user import Role, UserCreate, UserRead


logger = logging.getLogger(__name__)


class UsernameTakenError(ValueError):
    """Raised when registering a username that already exists."""


class UserService:
    """Service for user accounts and username resolution."""

    @classmethod
    async def create_user(cls, data: UserCreate) -> UserRead:
        """Register a user.

        Raises
        ------
        UsernameTakenError
            If ``data.username`` is already registered.
        """
        role = Role.ADMIN if UserRepository.count() == 0 else Role.USER
        try:
            user_id = UserRepository.create(data.username, hash_password(data.password), role.value)
        except sqlite3.IntegrityError as e:
            raise UsernameTakenError(f"Username {data.username} is already taken") from e
        logger.info("Registered user %s with role %s", data.username, role.value)
        return UserRead(id=user_id, username=data.username, role=role)

    @classmethod
    async def authenticate(cls, username: str, password: str) -> Optional[UserRead]:
        """Return the user if the credentials match, otherwise ``None``."""
        row = UserRepository.find_by_username(username)
        if row is None or not verify_password(password, row["password"]):
            logger.warning("Failed login for %s", username)
            return None
        return UserRead(id=row["id"], username=row["username"], role=Role(row["role"]))

    @classmethod
    async def list_users(cls) -> List[UserRead]:
        return [UserRead(**row) for row in UserRepository.find_all()]

    @classmethod
    async def set_role(cls, user_id: int, role: Role) -> Optional[UserRead]:
        if not UserRepository.update_role(user_id, role.value):
            return None
        logger.info("User %s role changed to %s", user_id, role.value)
        row = UserRepository.find_by_id(user_id)
        return UserRead(id=row["id"], username=row["username"], role=Role(row["role"]))

    @classmethod
    def get_username(cls, user_id: int) -> Optional[str]:
        """Resolve an owner identifier to its display name."""
        row = UserRepository.find_by_id(user_id)
        return row["username"] if row else None
