# ============================================================================
# FILE: openmusic/db/models/user.py
# ============================================================================
from sqlalchemy import Column, String, Text
from openmusic.db.base import Base

class User(Base):
    """User model for authentication and playlist ownership"""
    __tablename__ = "users"
    
    id = Column(String(50), primary_key=True)
    username = Column(String(50), unique=True, nullable=False)
    password = Column(Text, nullable=False)  # bcrypt hash
    fullname = Column(Text, nullable=False)
