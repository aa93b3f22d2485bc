"""Integration tests for SongService."""

import pytest

from openmusic.core.exceptions import InvariantError, NotFoundError
from openmusic.services.album_service import AlbumService
from openmusic.services.playlist_service import PlaylistService
from openmusic.services.song_service import SongService


class TestSongSearch:
    @pytest.mark.asyncio
    async def test_filters_are_case_insensitive_substrings(self, song_service: SongService) -> None:
        await song_service.add_song("Bohemian Rhapsody", 1975, "Rock", "Queen")
        await song_service.add_song("Radio Ga Ga", 1984, "Rock", "Queen")
        await song_service.add_song("Rhapsody in Blue", 1924, "Jazz", "Gershwin")

        by_title = await song_service.get_songs(title="rhapsody")
        by_both = await song_service.get_songs(title="RHAPSODY", performer="queen")
        everything = await song_service.get_songs()

        assert {song["title"] for song in by_title} == {"Bohemian Rhapsody", "Rhapsody in Blue"}
        assert [song["title"] for song in by_both] == ["Bohemian Rhapsody"]
        assert len(everything) == 3
        assert set(everything[0]) == {"id", "title", "performer"}

    @pytest.mark.asyncio
    async def test_performer_filter_alone(self, song_service: SongService) -> None:
        await song_service.add_song("Radio Ga Ga", 1984, "Rock", "Queen")
        await song_service.add_song("Rhapsody in Blue", 1924, "Jazz", "Gershwin")

        songs = await song_service.get_songs(performer="GERSH")

        assert [song["performer"] for song in songs] == ["Gershwin"]


class TestSongById:
    @pytest.mark.asyncio
    async def test_get_returns_full_song(self, song_service: SongService) -> None:
        song_id = await song_service.add_song("T", 2020, "Pop", "P", duration=180)

        song = await song_service.get_song_by_id(song_id)

        assert song == {
            "id": song_id,
            "title": "T",
            "year": 2020,
            "performer": "P",
            "genre": "Pop",
            "duration": 180,
            "albumId": None,
        }

    @pytest.mark.asyncio
    async def test_creation_does_not_touch_song_key(self, song_service: SongService, redis_client) -> None:
        song_id = await song_service.add_song("T", 2020, "Pop", "P")
        assert f"song:{song_id}" not in redis_client.data

    @pytest.mark.asyncio
    async def test_edit_invalidates_song(self, song_service: SongService) -> None:
        song_id = await song_service.add_song("T", 2020, "Pop", "P")
        await song_service.get_song_by_id(song_id)

        await song_service.edit_song_by_id(song_id, "T2", 2021, "Jazz", "Q", duration=99)

        song = await song_service.get_song_by_id(song_id)
        assert song["title"] == "T2"
        assert song["duration"] == 99

    @pytest.mark.asyncio
    async def test_delete_invalidates_song(self, song_service: SongService) -> None:
        song_id = await song_service.add_song("T", 2020, "Pop", "P")
        await song_service.get_song_by_id(song_id)

        await song_service.delete_song_by_id(song_id)

        with pytest.raises(NotFoundError):
            await song_service.get_song_by_id(song_id)

    @pytest.mark.asyncio
    async def test_unknown_song(self, song_service: SongService) -> None:
        with pytest.raises(NotFoundError):
            await song_service.edit_song_by_id("song-missing", "T", 2020, "Pop", "P")
        with pytest.raises(NotFoundError):
            await song_service.delete_song_by_id("song-missing")
        with pytest.raises(NotFoundError):
            await song_service.verify_song_exists("song-missing")


class TestSongsOfAlbum:
    @pytest.mark.asyncio
    async def test_unknown_album_reference_is_rejected(self, song_service: SongService) -> None:
        with pytest.raises(InvariantError):
            await song_service.add_song("T", 2020, "Pop", "P", album_id="album-missing")

    @pytest.mark.asyncio
    async def test_edit_and_delete_refresh_album_song_list(
        self, song_service: SongService, album_service: AlbumService
    ) -> None:
        album_id = await album_service.add_album("A", 2020)
        song_id = await song_service.add_song("T", 2020, "Pop", "P", album_id=album_id)
        assert [s["title"] for s in await album_service.get_album_songs(album_id)] == ["T"]

        await song_service.edit_song_by_id(song_id, "Renamed", 2020, "Pop", "P", album_id=album_id)
        assert [s["title"] for s in await album_service.get_album_songs(album_id)] == ["Renamed"]

        await song_service.delete_song_by_id(song_id)
        assert await album_service.get_album_songs(album_id) == []

    @pytest.mark.parametrize("moves_to_other_album", [True, False])
    @pytest.mark.asyncio
    async def test_edit_refreshes_the_album_the_song_leaves(
        self, song_service: SongService, album_service: AlbumService, moves_to_other_album: bool
    ) -> None:
        first = await album_service.add_album("A", 2020)
        second = await album_service.add_album("B", 2021)
        song_id = await song_service.add_song("T", 2020, "Pop", "P", album_id=first)
        assert len(await album_service.get_album_songs(first)) == 1
        assert await album_service.get_album_songs(second) == []

        target = second if moves_to_other_album else None
        await song_service.edit_song_by_id(song_id, "T", 2020, "Pop", "P", album_id=target)

        assert await album_service.get_album_songs(first) == []
        expected = [song_id] if moves_to_other_album else []
        assert [s["id"] for s in await album_service.get_album_songs(second)] == expected


class TestSongsOfPlaylist:
    @pytest.mark.asyncio
    async def test_delete_drops_song_from_cached_playlists(
        self, song_service: SongService, playlist_service: PlaylistService, alice: str, bob: str
    ) -> None:
        song_id = await song_service.add_song("T", 2020, "Pop", "P")
        playlists = [
            await playlist_service.add_playlist("Mine", alice),
            await playlist_service.add_playlist("Theirs", bob),
        ]
        for playlist_id in playlists:
            await playlist_service.add_song_to_playlist(playlist_id, song_id)
            assert len(await playlist_service.get_songs_from_playlist(playlist_id)) == 1

        await song_service.delete_song_by_id(song_id)

        for playlist_id in playlists:
            assert await playlist_service.get_songs_from_playlist(playlist_id) == []

    @pytest.mark.asyncio
    async def test_edit_refreshes_cached_playlists(
        self, song_service: SongService, playlist_service: PlaylistService, alice: str
    ) -> None:
        song_id = await song_service.add_song("T", 2020, "Pop", "P")
        playlist_id = await playlist_service.add_playlist("Mine", alice)
        await playlist_service.add_song_to_playlist(playlist_id, song_id)
        await playlist_service.get_songs_from_playlist(playlist_id)

        await song_service.edit_song_by_id(song_id, "Renamed", 2020, "Pop", "Q")

        assert await playlist_service.get_songs_from_playlist(playlist_id) == [
            {"id": song_id, "title": "Renamed", "performer": "Q"}
        ]
