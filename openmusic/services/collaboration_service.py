# ============================================================================
# FILE: openmusic/services/collaboration_service.py
# ============================================================================
from sqlalchemy.exc import IntegrityError
from openmusic.core.exceptions import AuthorizationError, InvariantError
from openmusic.core.ids import new_id
from openmusic.db.store import Store
import logging

logger = logging.getLogger(__name__)

class CollaborationService:
    """Users who may edit a playlist they do not own"""

    def __init__(self, store: Store):
        self.store = store

    async def add_collaboration(self, playlist_id: str, user_id: str) -> str:
        """Grant a user access to a playlist and return the collaboration id"""
        try:
            result = await self.store.query(
                """
                INSERT INTO collaborations (id, playlist_id, user_id)
                VALUES (:id, :playlist_id, :user_id)
                RETURNING id
                """,
                {"id": new_id("collab"), "playlist_id": playlist_id, "user_id": user_id},
            )
        except IntegrityError as e:
            logger.warning(f"Collaboration insert rejected: {e}")
            raise InvariantError("Failed to add collaboration")

        if not result.row_count:
            raise InvariantError("Failed to add collaboration")

        logger.info(f"User {user_id} added as collaborator of {playlist_id}")
        return result.rows[0]["id"]

    async def delete_collaboration(self, playlist_id: str, user_id: str) -> None:
        """Revoke a user's access to a playlist"""
        result = await self.store.query(
            """
            DELETE FROM collaborations
            WHERE playlist_id = :playlist_id AND user_id = :user_id
            RETURNING id
            """,
            {"playlist_id": playlist_id, "user_id": user_id},
        )
        if not result.row_count:
            raise InvariantError("Failed to delete collaboration")

        logger.info(f"User {user_id} removed as collaborator of {playlist_id}")

    async def verify_collaborator(self, playlist_id: str, user_id: str) -> None:
        """Raise AuthorizationError unless the user collaborates on the playlist"""
        result = await self.store.query(
            """
            SELECT id FROM collaborations
            WHERE playlist_id = :playlist_id AND user_id = :user_id
            """,
            {"playlist_id": playlist_id, "user_id": user_id},
        )
        if not result.row_count:
            raise AuthorizationError("You are not a collaborator of this playlist")
