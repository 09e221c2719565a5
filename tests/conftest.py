from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

# Keep the mmcard package importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from mmcard.core import config as core_config  # noqa: E402


@pytest.fixture()
def settings_env(monkeypatch):
    """Clear card-related env vars and the cached Settings around each test."""
    for name in ("PUBLIC_BASE_URL", "DATABASE_URL", "QR_FORMAT", "QR_SIZE", "QR_MARGIN", "DEFAULT_LOGO_URL"):
        monkeypatch.delenv(name, raising=False)
    core_config.get_settings.cache_clear()
    yield monkeypatch
    core_config.get_settings.cache_clear()


@pytest.fixture()
def profiles_file(tmp_path):
    """Write a JSON profiles file and return a helper to (re)populate it."""
    path = tmp_path / "profiles.json"

    def _write(profiles: dict) -> Path:
        path.write_text(json.dumps({"profiles": profiles}), encoding="utf-8")
        return path

    _write({})
    return _write
