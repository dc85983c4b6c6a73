"""Logging for the playlist manager: a debug log file plus warnings on stderr."""

import logging
import os
import sys

LOG_DIR_NAME = "PlaylistManager"

# Set by setup_logging(); main() points the user here after a fatal error.
LOG_FILE_PATH: str | None = None

_FORMAT = logging.Formatter(
    "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


def default_log_path() -> str:
    """app.log in PlaylistManager/ under $TEMP, or under the home directory."""
    base = os.environ.get("TEMP") or os.path.expanduser("~")
    return os.path.join(base, LOG_DIR_NAME, "app.log")


def _open_log_file(path: str) -> logging.Handler | None:
    try:
        os.makedirs(os.path.dirname(path), exist_ok=True)
        handler = logging.FileHandler(path, encoding="utf-8")
    except OSError:
        return None
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(_FORMAT)
    return handler


def setup_logging(console_level: int = logging.WARNING) -> str | None:
    """(Re)configure the playlist_manager logger. Returns the log file path, or None."""
    global LOG_FILE_PATH
    logger = logging.getLogger("playlist_manager")
    logger.setLevel(logging.DEBUG)
    for old in list(logger.handlers):
        old.close()
        logger.removeHandler(old)

    path = default_log_path()
    file_handler = _open_log_file(path)
    if file_handler is not None:
        logger.addHandler(file_handler)
    LOG_FILE_PATH = path if file_handler is not None else None

    # stdout belongs to the menu
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(_FORMAT)
    logger.addHandler(console)

    logger.info("Logging started; file: %s", LOG_FILE_PATH or "(none)")
    return LOG_FILE_PATH
