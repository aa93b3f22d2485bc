# ============================================================================
# FILE: openmusic/db/models/collaboration.py
# ============================================================================
from sqlalchemy import Column, ForeignKey, String, UniqueConstraint
from openmusic.db.base import Base

class Collaboration(Base):
    """Users allowed to edit a playlist they do not own"""
    __tablename__ = "collaborations"
    __table_args__ = (
        UniqueConstraint("playlist_id", "user_id", name="unique_playlist_id_and_user_id"),
    )
    
    id = Column(String(50), primary_key=True)
    playlist_id = Column(String(50), ForeignKey("playlists.id", ondelete="CASCADE"), nullable=False)
    user_id = Column(String(50), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
