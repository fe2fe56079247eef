from __future__ import annotations

import io
import os
from collections.abc import Callable, Iterator

import pytest

from irta_admin.core.config import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Run each test away from any local .env and with a fresh settings cache."""

    monkeypatch.chdir(tmp_path)
    for name in list(os.environ):
        if name.startswith("IRTA_"):
            monkeypatch.delenv(name)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def feed_stdin(monkeypatch: pytest.MonkeyPatch) -> Callable[[str], None]:
    def _feed(data: str) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO(data))

    return _feed
