"""Pytest configuration shared by the package and adapter test suites.

Provides a log capture fixture for the shared ``providers`` logger (which
does not propagate to the root logger, so ``caplog`` cannot see it) and an
environment fixture that keeps a developer's ``.env`` out of settings tests.
"""

from __future__ import annotations

import json
import logging
from typing import Dict, Iterator, List

import pytest

from chatbot_providers.base.logging import BASE_LOGGER_NAME, get_logger


class ListHandler(logging.Handler):
    """Capture log records into a list for assertions."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.records: List[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)

    def events(self, name: str | None = None) -> List[Dict[str, object]]:
        """Return decoded JSON payloads, optionally filtered by event name."""
        out = []
        for record in self.records:
            try:
                payload = json.loads(record.getMessage())
            except ValueError:
                continue
            payload["_level"] = record.levelno
            if name is None or payload.get("event") == name:
                out.append(payload)
        return out


@pytest.fixture()
def provider_logs() -> Iterator[ListHandler]:
    """Attach a ``ListHandler`` to the shared providers logger."""
    logger = get_logger(BASE_LOGGER_NAME)
    handler = ListHandler()
    previous = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    try:
        yield handler
    finally:
        logger.removeHandler(handler)
        logger.setLevel(previous)


@pytest.fixture()
def clean_env(tmp_path) -> Dict[str, str]:
    """Return an empty environment whose ``.env`` lookup points at a missing file."""
    return {"DOTENV_FILE": str(tmp_path / "missing.env")}
