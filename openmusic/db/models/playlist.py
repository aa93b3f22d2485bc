# ============================================================================
# FILE: openmusic/db/models/playlist.py
# ============================================================================
from sqlalchemy import Column, ForeignKey, String, Text
from openmusic.db.base import Base

class Playlist(Base):
    """Playlist model for user-created playlists"""
    __tablename__ = "playlists"
    
    id = Column(String(50), primary_key=True)
    name = Column(Text, nullable=False)
    owner = Column(String(50), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)

class PlaylistSong(Base):
    """Junction table for playlist songs"""
    __tablename__ = "playlist_songs"
    
    id = Column(String(50), primary_key=True)
    playlist_id = Column(String(50), ForeignKey("playlists.id", ondelete="CASCADE"), nullable=False)
    song_id = Column(String(50), ForeignKey("songs.id", ondelete="CASCADE"), nullable=False)
