# ============================================================================
# FILE: openmusic/services/user_service.py
# ============================================================================
from typing import Dict
from sqlalchemy.exc import IntegrityError
from openmusic.core.exceptions import AuthenticationError, InvariantError, NotFoundError
from openmusic.core.ids import new_id
from openmusic.core.security import get_password_hash, verify_password
from openmusic.db.store import Store
import logging

logger = logging.getLogger(__name__)

class UserService:
    """Service layer for user operations"""

    def __init__(self, store: Store):
        self.store = store

    async def add_user(self, username: str, password: str, fullname: str) -> str:
        """Create a new user account"""
        existing = await self.store.query(
            "SELECT id FROM users WHERE username = :username",
            {"username": username},
        )
        if existing.row_count:
            raise InvariantError("Username already registered")

        user_id = new_id("user")
        try:
            result = await self.store.query(
                """
                INSERT INTO users (id, username, password, fullname)
                VALUES (:id, :username, :password, :fullname)
                RETURNING id
                """,
                {
                    "id": user_id,
                    "username": username,
                    "password": get_password_hash(password),
                    "fullname": fullname,
                },
            )
        except IntegrityError:
            raise InvariantError("Username already registered")

        if not result.row_count:
            raise InvariantError("Failed to add user")

        logger.info(f"User created: {username}")
        return result.rows[0]["id"]

    async def get_user_by_id(self, user_id: str) -> Dict:
        """Get user by id"""
        result = await self.store.query(
            "SELECT id, username, fullname FROM users WHERE id = :id",
            {"id": user_id},
        )
        if not result.row_count:
            raise NotFoundError("User not found")
        return result.rows[0]

    async def verify_user_credential(self, username: str, password: str) -> str:
        """Authenticate user with username and password, return the user id"""
        result = await self.store.query(
            "SELECT id, password FROM users WHERE username = :username",
            {"username": username},
        )
        if not result.row_count:
            raise AuthenticationError("Wrong username or password")

        user = result.rows[0]
        if not verify_password(password, user["password"]):
            raise AuthenticationError("Wrong username or password")
        return user["id"]
