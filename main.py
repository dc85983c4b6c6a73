"""Entry point: set up logging, load the playlist, then run the text menu."""

import logging
import sys

from playlist_manager import log_config
from playlist_manager.playlist import Playlist
from playlist_manager.shell import PlaylistShell
from playlist_manager.storage import PlaylistFile, default_playlist_path


def resolve_playlist_path(argv: list[str]) -> str:
    """First argument if given, else PLAYLIST_FILE, else ./playlist.txt."""
    if len(argv) > 1 and argv[1]:
        return argv[1]
    return default_playlist_path()


def main(argv: list[str] | None = None) -> None:
    log_config.setup_logging()
    log = logging.getLogger("playlist_manager.main")
    path = resolve_playlist_path(sys.argv if argv is None else argv)
    try:
        playlist = Playlist(PlaylistFile(path))
        playlist.load()
        print("Playlist Manager (persistent)")
        PlaylistShell(playlist).run()
    except Exception:
        log.exception("Playlist manager stopped on an error")
        if log_config.LOG_FILE_PATH:
            print(f"Details in {log_config.LOG_FILE_PATH}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
