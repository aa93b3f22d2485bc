# ============================================================================
# FILE: openmusic/schemas/common.py
# ============================================================================
from pydantic import BaseModel

class MessageResponse(BaseModel):
    """Envelope for writes that return no data"""
    status: str
    message: str
