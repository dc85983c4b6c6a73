"""Numbered text menu over a Playlist: reads choices, prints results."""

import logging
from collections.abc import Callable

from playlist_manager.playlist import Playlist
from playlist_manager.storage import parse_id

log = logging.getLogger(__name__)

MENU = (
    "\n1) Add song\n2) Remove song by id\n3) Show playlist\n4) Move up\n"
    "5) Move down\n6) Clear playlist\n0) Exit"
)


class PlaylistShell:
    """Translate menu choices into Playlist calls. No playlist logic lives here."""

    def __init__(
        self,
        playlist: Playlist,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
    ) -> None:
        self._playlist = playlist
        self._input = input_func
        self._out = output_func
        self._actions: dict[int, Callable[[], None]] = {
            1: self._add,
            2: self._remove,
            3: self._show,
            4: self._move_up,
            5: self._move_down,
            6: self._clear,
        }

    def run(self) -> None:
        try:
            while True:
                self._out(MENU)
                raw = self._input("Choose: ")
                try:
                    choice = int(raw.strip())
                except ValueError:
                    self._out("Invalid input.")
                    continue
                if choice == 0:
                    break
                action = self._actions.get(choice)
                if action is None:
                    self._out("Invalid.")
                    continue
                action()
        except EOFError:
            log.debug("End of input")
        self._playlist.unload()
        self._out("Exiting.")

    def _read_id(self, prompt: str) -> int | None:
        song_id = parse_id(self._input(prompt).strip())
        if song_id is None:
            self._out("Invalid.")
        return song_id

    def _add(self) -> None:
        title = self._input("Enter song title: ").rstrip("\r\n")
        if not title:
            self._out("Empty title.")
            return
        song = self._playlist.add(title)
        self._out(f"Added: #{song.id} - {song.title}")

    def _remove(self) -> None:
        song_id = self._read_id("Enter song id: ")
        if song_id is None:
            return
        song = self._playlist.get(song_id)
        if song is not None and self._playlist.remove(song_id):
            self._out(f"Removed: #{song.id} - {song.title}")
        else:
            self._out(f"Song #{song_id} not found.")

    def _show(self) -> None:
        songs = self._playlist.songs()
        if not songs:
            self._out("Playlist empty.")
            return
        self._out("\n--- Playlist ---")
        for idx, song in enumerate(songs, 1):
            self._out("%3d) #%d - %s" % (idx, song.id, song.title))

    def _move_up(self) -> None:
        song_id = self._read_id("Enter song id to move up: ")
        if song_id is None:
            return
        if self._playlist.move_up(song_id):
            self._out("Moved up.")
        else:
            self._out("Cannot move up (maybe head or not found).")

    def _move_down(self) -> None:
        song_id = self._read_id("Enter song id to move down: ")
        if song_id is None:
            return
        if self._playlist.move_down(song_id):
            self._out("Moved down.")
        else:
            self._out("Cannot move down (last or not found).")

    def _clear(self) -> None:
        answer = self._input("Confirm clear playlist? (y/N): ")
        if answer[:1] in ("y", "Y"):
            self._playlist.clear()
            self._out("Playlist cleared.")
        else:
            self._out("Cancelled.")
