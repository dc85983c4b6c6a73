"""Playlist file persistence: one tab-separated record per line (no UI)."""

import logging
import os
import re

from playlist_manager.song import Song

log = logging.getLogger(__name__)

DEFAULT_FILE_NAME = "playlist.txt"

_ID_RE = re.compile(r"-?[0-9]+")


def default_playlist_path() -> str:
    """PLAYLIST_FILE from the environment, else playlist.txt in the working directory."""
    return os.environ.get("PLAYLIST_FILE") or os.path.join(os.getcwd(), DEFAULT_FILE_NAME)


def format_record(song: Song) -> str:
    return f"{song.id}\t{song.title}\n"


def parse_id(text: str) -> int | None:
    """Decimal id with an optional minus sign, ASCII digits only; None otherwise."""
    if not _ID_RE.fullmatch(text):
        return None
    return int(text)


def parse_record(line: str) -> Song | None:
    """Parse '<id>\\t<title>'. Returns None for lines without a tab or a numeric id."""
    id_field, sep, title = line.partition("\t")
    if not sep:
        return None
    song_id = parse_id(id_field)
    if song_id is None:
        return None
    return Song(song_id, title.rstrip("\r\n"))


class PlaylistFile:
    """Read, append to and rewrite the playlist file. Each call opens and closes it."""

    def __init__(self, path: str = ""):
        self._path = path or default_playlist_path()

    @property
    def path(self) -> str:
        return self._path

    def read_all(self) -> list[Song]:
        if not os.path.isfile(self._path):
            return []
        songs: list[Song] = []
        # Undecodable bytes become U+FFFD; the line itself is kept.
        try:
            with open(self._path, encoding="utf-8", errors="replace") as f:
                for lineno, line in enumerate(f, 1):
                    song = parse_record(line)
                    if song is None:
                        if line.strip():
                            log.debug("Skipping malformed line %d in %s", lineno, self._path)
                        continue
                    songs.append(song)
        except OSError as e:
            log.error("Could not read playlist %s: %s", self._path, e)
            return []
        log.debug("Read %d songs from %s", len(songs), self._path)
        return songs

    def append_one(self, song: Song) -> bool:
        """Append a single record. Used when a song was added at the end."""
        try:
            self._ensure_dir()
            with open(self._path, "a", encoding="utf-8", newline="\n") as f:
                f.write(format_record(song))
        except OSError as e:
            log.error("Could not append song #%d to %s: %s", song.id, self._path, e)
            return False
        return True

    def rewrite_all(self, songs: list[Song]) -> bool:
        """Truncate the file and write every record in order.

        Not atomic: a failure part-way leaves only the records written so far.
        """
        try:
            self._ensure_dir()
            with open(self._path, "w", encoding="utf-8", newline="\n") as f:
                for song in songs:
                    f.write(format_record(song))
        except OSError as e:
            log.error("Could not rewrite %s: %s", self._path, e)
            return False
        log.debug("Rewrote %s with %d songs", self._path, len(songs))
        return True

    def truncate(self) -> bool:
        return self.rewrite_all([])

    def _ensure_dir(self) -> None:
        parent = os.path.dirname(self._path)
        if parent:
            os.makedirs(parent, exist_ok=True)
