"""Pytest configuration for the gallery_providers test suite.

Every test runs with an isolated configuration environment: no ``.env`` file,
no external config file, no ``GALLERY_*`` overrides and the default log level.
"""

from __future__ import annotations

import logging
import time
from typing import Iterator, List

import pytest

from gallery_providers.base.logging import get_logger
from gallery_providers.config import reset_config_cache
from gallery_providers.config.env import ENV_FIELD_MAP, ENV_RETRY_FIELD_MAP, env_var_name


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Isolate configuration sources and logger level for each test."""

    monkeypatch.setenv("DOTENV_FILE", str(tmp_path / "missing.env"))
    monkeypatch.delenv("PROVIDERS_CONFIG_FILE", raising=False)
    monkeypatch.delenv("PROVIDERS_LOG_LEVEL", raising=False)
    for suffix in (*ENV_FIELD_MAP.values(), *ENV_RETRY_FIELD_MAP.values()):
        monkeypatch.delenv(env_var_name("gallery", suffix), raising=False)
    reset_config_cache()
    get_logger()
    yield
    reset_config_cache()


@pytest.fixture()
def no_sleep(monkeypatch: pytest.MonkeyPatch) -> List[float]:
    """Replace ``time.sleep`` with a recorder so retry backoff is instant."""

    slept: List[float] = []
    monkeypatch.setattr(time, "sleep", slept.append)
    return slept


class _ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.records: List[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture()
def provider_records() -> Iterator[List[logging.LogRecord]]:
    """Collect records reaching the shared ``providers`` logger."""

    logger = get_logger()
    handler = _ListHandler()
    logger.addHandler(handler)
    yield handler.records
    logger.removeHandler(handler)
