import json
import sqlite3
from pathlib import Path

import pytest

from ploom_unlock.core.errors import RegistryError
from ploom_unlock.core.platform import PlatformIntegration


BASE_SETTINGS = {
    "KeyPcVsync": 0,
    "KeyCustomFrameRate": 60,
    "KeyBrightness": 0.5,
    "KeyLanguage": "日本語",
    "KeyNested": {"a": [1, 2.25, True, None]},
}


def compact(data) -> str:
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def make_db(path: Path, value=None, *, table="LocalStorage", key="GameQualitySetting") -> Path:
    conn = sqlite3.connect(path)
    try:
        conn.execute(f"CREATE TABLE {table} (key TEXT PRIMARY KEY, value TEXT)")
        conn.execute(f"INSERT INTO {table} (key, value) VALUES (?, ?)", ("MenuData", "{}"))
        if value is not None:
            conn.execute(f"INSERT INTO {table} (key, value) VALUES (?, ?)", (key, value))
        conn.commit()
    finally:
        conn.close()
    return path


def stored_value(path: Path):
    conn = sqlite3.connect(path)
    try:
        row = conn.execute(
            "SELECT value FROM LocalStorage WHERE key = 'GameQualitySetting'"
        ).fetchone()
    finally:
        conn.close()
    return row[0] if row else None


@pytest.fixture
def settings_db(tmp_path: Path) -> Path:
    return make_db(tmp_path / "LocalStorage.db", compact(BASE_SETTINGS))


class FakePlatform(PlatformIntegration):
    def __init__(self, install_path=None):
        self.install_path = install_path
        self.stripped = []
        self.titles = []

    def read_install_path(self) -> str:
        if self.install_path is None:
            raise RegistryError()
        return self.install_path

    def set_console_title(self, title: str):
        self.titles.append(title)

    def strip_window_menu(self, hwnd: int):
        self.stripped.append(hwnd)
