# ============================================================================
# FILE: openmusic/db/models/album.py
# ============================================================================
from sqlalchemy import Column, ForeignKey, Integer, String, Text, UniqueConstraint
from openmusic.db.base import Base

class Album(Base):
    """Album model"""
    __tablename__ = "albums"
    
    id = Column(String(50), primary_key=True)
    name = Column(Text, nullable=False)
    year = Column(Integer, nullable=False)
    # Column name is camelCase in the database, queries must quote it
    cover_url = Column("coverUrl", Text, nullable=True)

class AlbumLike(Base):
    """One like per (album, user) pair"""
    __tablename__ = "album_likes"
    __table_args__ = (
        UniqueConstraint("album_id", "user_id", name="unique_album_id_and_user_id"),
    )
    
    id = Column(String(50), primary_key=True)
    album_id = Column(String(50), ForeignKey("albums.id", ondelete="CASCADE"), nullable=False)
    user_id = Column(String(50), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
