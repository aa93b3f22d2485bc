# ============================================================================
# FILE: openmusic/db/models/song.py
# ============================================================================
from sqlalchemy import Column, ForeignKey, Integer, String, Text
from openmusic.db.base import Base

class Song(Base):
    """Song model, optionally attached to an album"""
    __tablename__ = "songs"
    
    id = Column(String(50), primary_key=True)
    title = Column(Text, nullable=False)
    year = Column(Integer, nullable=False)
    performer = Column(Text, nullable=False)
    genre = Column(Text, nullable=False)
    duration = Column(Integer, nullable=True)  # seconds
    album_id = Column(String(50), ForeignKey("albums.id", ondelete="CASCADE"), nullable=True)
