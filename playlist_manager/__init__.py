"""Playlist manager: ordered song list persisted to a tab-separated text file."""

from playlist_manager.playlist import Playlist
from playlist_manager.song import TITLE_MAX_LEN, Song, clean_title
from playlist_manager.storage import PlaylistFile
from playlist_manager.version import __version__

__all__ = [
    'Playlist',
    'PlaylistFile',
    'Song',
    'TITLE_MAX_LEN',
    '__version__',
    'clean_title',
]
