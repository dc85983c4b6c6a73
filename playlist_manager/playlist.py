"""Playlist state: ordered songs with ascending ids, persisted after every change (no UI)."""

import logging
from collections.abc import Iterator

from playlist_manager.song import Song, clean_title
from playlist_manager.storage import PlaylistFile

log = logging.getLogger(__name__)


class Playlist:
    """Ordered song list. Adds are appended to the file, other changes rewrite it."""

    def __init__(self, storage: PlaylistFile | str | None = None) -> None:
        if not isinstance(storage, PlaylistFile):
            storage = PlaylistFile(storage or "")
        self._storage = storage
        self._songs: list[Song] = []
        self._next_id = 1

    @property
    def storage(self) -> PlaylistFile:
        return self._storage

    @property
    def next_id(self) -> int:
        return self._next_id

    def load(self) -> None:
        """Replace the in-memory list with the file contents, keeping file order."""
        songs: list[Song] = []
        seen: set[int] = set()
        for song in self._storage.read_all():
            if song.id in seen:
                log.debug("Skipping duplicate id #%d", song.id)
                continue
            seen.add(song.id)
            songs.append(Song(song.id, clean_title(song.title)))
        self._songs = songs
        # Ids at or below zero in the file still leave the counter at 1 or more.
        self._next_id = max(max(seen, default=0), 0) + 1
        log.info("Loaded %d songs from %s", len(songs), self._storage.path)

    def songs(self) -> list[Song]:
        return list(self._songs)

    def get(self, song_id: int) -> Song | None:
        for song in self._songs:
            if song.id == song_id:
                return song
        return None

    def add(self, title: str) -> Song:
        song = Song(self._next_id, clean_title(title))
        self._next_id += 1
        self._songs.append(song)
        self._storage.append_one(song)
        log.info("Added #%d - %s", song.id, song.title)
        return song

    def remove(self, song_id: int) -> bool:
        i = self._index_of(song_id)
        if i is None:
            return False
        song = self._songs.pop(i)
        self._storage.rewrite_all(self._songs)
        log.info("Removed #%d - %s", song.id, song.title)
        return True

    def move_up(self, song_id: int) -> bool:
        """Swap with the previous song. False if empty, already first, or not found."""
        i = self._index_of(song_id)
        if i is None or i == 0:
            return False
        return self._swap(i - 1, i)

    def move_down(self, song_id: int) -> bool:
        """Swap with the next song. False if fewer than two songs, already last, or not found."""
        if len(self._songs) < 2:
            return False
        i = self._index_of(song_id)
        if i is None or i == len(self._songs) - 1:
            return False
        return self._swap(i, i + 1)

    def clear(self) -> None:
        self._songs.clear()
        self._storage.truncate()
        log.info("Playlist cleared")

    def unload(self) -> None:
        """Drop the in-memory list at exit. The file is left as is."""
        self._songs = []

    def _index_of(self, song_id: int) -> int | None:
        for i, song in enumerate(self._songs):
            if song.id == song_id:
                return i
        return None

    def _swap(self, i: int, j: int) -> bool:
        self._songs[i], self._songs[j] = self._songs[j], self._songs[i]
        self._storage.rewrite_all(self._songs)
        log.debug("Swapped positions %d and %d", i + 1, j + 1)
        return True

    def __iter__(self) -> Iterator[Song]:
        return iter(list(self._songs))

    def __len__(self) -> int:
        return len(self._songs)
