# ============================================================================
# FILE: openmusic/core/ids.py
# ============================================================================
from nanoid import generate

def new_id(prefix: str) -> str:
    """Generate a surrogate key like ``album-V1StGXR8_Z5jdHi6``"""
    return f"{prefix}-{generate(size=16)}"
