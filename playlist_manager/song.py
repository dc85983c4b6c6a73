"""Song record shared by the playlist and its file storage."""

from typing import NamedTuple

# Longest title kept; longer titles are cut, not rejected.
TITLE_MAX_LEN = 199

# Tab separates fields and newlines end records in the playlist file.
_RESERVED = str.maketrans({"\t": " ", "\r": " ", "\n": " "})


class Song(NamedTuple):
    id: int
    title: str


def clean_title(title: str) -> str:
    """Replace tab/CR/LF with spaces and cut to TITLE_MAX_LEN characters."""
    return title.translate(_RESERVED)[:TITLE_MAX_LEN]
