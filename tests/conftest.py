"""Pytest configuration for test isolation.

The package reads its store location, month window and log level from
``FAIRSHARE_*`` environment variables, and the CLI loads ``./.env`` from the
working directory. A developer's shell or a ``.env`` in the checkout would
otherwise leak into test runs, so every test starts with those variables
cleared and the working directory pointed at its own temporary directory.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from fairshare import logging_setup

_ENV_VARS = ("FAIRSHARE_STORE_PATH", "FAIRSHARE_MONTH_WINDOW", "FAIRSHARE_LOG_LEVEL")


@pytest.fixture(autouse=True)
def _isolate_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        # setenv first so monkeypatch also removes values a test's .env adds
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Undo ``configure_logging`` after CLI tests so ``caplog`` sees records."""

    yield
    logger = logging.getLogger("fairshare")
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    logging_setup._CONFIGURED = False
