import logging

import pytest


@pytest.fixture
def reset_logging(monkeypatch, tmp_path):
    """Point the log directory at tmp_path and drop handlers added by setup_logging()."""
    monkeypatch.setenv("TEMP", str(tmp_path))
    yield tmp_path
    logger = logging.getLogger("playlist_manager")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
