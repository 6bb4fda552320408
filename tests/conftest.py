from __future__ import annotations

from pathlib import Path

import pytest

from strala.core.runtime_config import set_config_path


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """CWD/HOME を tmp_path に切り替え、config キャッシュを破棄する。"""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    set_config_path(None)
    yield tmp_path
    set_config_path(None)
