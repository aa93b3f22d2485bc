# ============================================================================
# FILE: openmusic/services/mappers.py
# ============================================================================
"""Translate raw database rows into the shapes returned by the API"""
from typing import Any, Dict

def map_album_row(row: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "id": row["id"],
        "name": row["name"],
        "year": row["year"],
        "coverUrl": row.get("coverUrl"),
    }

def map_song_row(row: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "id": row["id"],
        "title": row["title"],
        "year": row["year"],
        "performer": row["performer"],
        "genre": row["genre"],
        "duration": row.get("duration"),
        "albumId": row.get("album_id"),
    }

def map_song_summary(row: Dict[str, Any]) -> Dict[str, Any]:
    """Short song shape used in lists and search results"""
    return {
        "id": row["id"],
        "title": row["title"],
        "performer": row["performer"],
    }

def map_playlist_row(row: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "id": row["id"],
        "name": row["name"],
        "username": row.get("username"),
    }
