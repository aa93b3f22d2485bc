"""Unit tests for row -> API shape mappers."""

from openmusic.services.mappers import (
    map_album_row,
    map_playlist_row,
    map_song_row,
    map_song_summary,
)


def test_album_row_keeps_camel_case_cover() -> None:
    row = {"id": "album-1", "name": "A", "year": 2020, "coverUrl": None}
    assert map_album_row(row) == {"id": "album-1", "name": "A", "year": 2020, "coverUrl": None}


def test_song_row_renames_album_id() -> None:
    row = {
        "id": "song-1",
        "title": "T",
        "year": 2020,
        "performer": "P",
        "genre": "Pop",
        "duration": 180,
        "album_id": "album-1",
    }
    song = map_song_row(row)
    assert song["albumId"] == "album-1"
    assert "album_id" not in song


def test_song_summary_only_has_list_fields() -> None:
    row = {"id": "song-1", "title": "T", "performer": "P", "genre": "Pop"}
    assert map_song_summary(row) == {"id": "song-1", "title": "T", "performer": "P"}


def test_playlist_row_without_username() -> None:
    assert map_playlist_row({"id": "playlist-1", "name": "Mix"}) == {
        "id": "playlist-1",
        "name": "Mix",
        "username": None,
    }
