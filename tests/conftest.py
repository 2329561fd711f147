from __future__ import annotations

import os
from pathlib import Path

import pytest

from core.config import AppSettings

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch) -> AppSettings:
    """Settings built from defaults only (no env vars, no .env files)."""
    for key in list(os.environ):
        if key.upper().startswith("GITHUBDNS_"):
            monkeypatch.delenv(key)
    return AppSettings(_env_file=None)


@pytest.fixture
def lookup_page() -> str:
    """A saved ipaddress.com page for github.com."""
    return (FIXTURES / "github.com.html").read_text(encoding="utf-8")
