import sqlite3
import logging
import os
import re
import json
from contextlib import closing
from pathlib import Path
from typing import Optional, Tuple

from ploom_unlock.core.errors import (
    StoreError,
    MalformedSettingsError,
    SettingsFileNotFoundError,
)
from ploom_unlock.core.game_config import (
    TABLE_NAME,
    QUALITY_SETTING_KEY,
    FRAME_RATE_FIELD,
    SUPPORTED_FRAME_RATES,
)

_WS = re.compile(r'[ \t\n\r]*')
_decoder = json.JSONDecoder()


def _skip_ws(text: str, idx: int) -> int:
    return _WS.match(text, idx).end()


def frame_rate_span(text: str) -> Optional[Tuple[int, int]]:
    """Offsets of the top-level frame-rate value inside already validated JSON object text.

    Nested members with the same name are skipped. With duplicate keys the
    last one wins, as in ``json.loads``.
    """
    idx = _skip_ws(text, 0)
    if text[idx] != '{':
        return None
    idx = _skip_ws(text, idx + 1)
    if text[idx] == '}':
        return None

    span = None
    while True:
        key, idx = _decoder.raw_decode(text, idx)
        idx = _skip_ws(text, idx)
        # ':'
        idx = _skip_ws(text, idx + 1)
        _, end = _decoder.raw_decode(text, idx)
        if key == FRAME_RATE_FIELD:
            span = (idx, end)
        idx = _skip_ws(text, end)
        if text[idx] != ',':
            return span
        idx = _skip_ws(text, idx + 1)


class QualitySettingsStore:
    """Reads and patches the GameQualitySetting blob of a LocalStorage.db file.

    A connection is opened per operation and closed before returning.
    Nothing is cached between calls. Patching rewrites only the text of the
    frame-rate value; every other byte of the stored JSON is kept.
    """
    def __init__(self, db_path: str):
        self.logger = logging.getLogger("QualitySettingsStore")
        self.db_path = db_path

    def _ensure_exists(self):
        if not self.db_path or not os.path.exists(self.db_path):
            self.logger.warning(f"Settings database not found: {self.db_path!r}")
            raise SettingsFileNotFoundError(self.db_path)

    def get_connection(self) -> sqlite3.Connection:
        self._ensure_exists()
        # mode=rw never creates the file, even if it vanished after the check
        uri = f"{Path(os.path.abspath(self.db_path)).as_uri()}?mode=rw"
        try:
            return sqlite3.connect(uri, uri=True)
        except sqlite3.Error as e:
            raise StoreError(str(e)) from e

    def _read_quality_setting(self, conn: sqlite3.Connection) -> Tuple[str, dict]:
        """Returns the stored JSON text and its parsed object."""
        try:
            cur = conn.execute(
                f"SELECT value FROM {TABLE_NAME} WHERE key = ?", (QUALITY_SETTING_KEY,)
            )
            row = cur.fetchone()
        except sqlite3.Error as e:
            raise StoreError(str(e)) from e

        if row is None:
            raise StoreError(f"Query returned no rows for key '{QUALITY_SETTING_KEY}'")

        raw = row[0]
        if isinstance(raw, bytes):
            try:
                raw = raw.decode("utf-8")
            except UnicodeDecodeError as e:
                raise MalformedSettingsError(f"value is not valid UTF-8: {e}") from e
        if not isinstance(raw, str):
            raise MalformedSettingsError(f"expected JSON text, got {type(raw).__name__}")

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise MalformedSettingsError(str(e)) from e

        if not isinstance(data, dict):
            raise MalformedSettingsError(f"expected a JSON object, got {type(data).__name__}")
        return raw, data

    def _write_quality_setting(self, conn: sqlite3.Connection, payload: str):
        try:
            with conn:
                conn.execute(
                    f"UPDATE {TABLE_NAME} SET value = ? WHERE key = ?",
                    (payload, QUALITY_SETTING_KEY),
                )
        except sqlite3.Error as e:
            raise StoreError(str(e)) from e

    @staticmethod
    def _frame_rate_of(data: dict) -> int:
        value = data.get(FRAME_RATE_FIELD)
        # bool is an int subclass; JSON true/false is not a frame rate
        if isinstance(value, bool) or not isinstance(value, int):
            raise MalformedSettingsError(f"{FRAME_RATE_FIELD} not found or not an integer")
        return value

    def read_frame_rate(self) -> int:
        with closing(self.get_connection()) as conn:
            _, data = self._read_quality_setting(conn)
        fps = self._frame_rate_of(data)
        self.logger.info(f"Read {FRAME_RATE_FIELD}={fps} from {self.db_path}")
        return fps

    def patch_frame_rate(self, target: int) -> Tuple[bool, str]:
        """Sets the frame-rate field to ``target`` and writes the blob back.

        Returns ``(written, message)``. When the stored value already equals
        ``target`` nothing is written and ``written`` is False.
        """
        if isinstance(target, bool) or target not in SUPPORTED_FRAME_RATES:
            raise ValueError(f"Unsupported frame rate: {target!r} (expected one of {SUPPORTED_FRAME_RATES})")

        with closing(self.get_connection()) as conn:
            raw, data = self._read_quality_setting(conn)
            current = self._frame_rate_of(data)

            if current == target:
                self.logger.info(f"{FRAME_RATE_FIELD} already {target}; nothing written.")
                return False, f"FPS is already set to {target}. No need to patch."

            start, end = frame_rate_span(raw)
            self._write_quality_setting(conn, f"{raw[:start]}{target}{raw[end:]}")

        self.logger.info(f"Patched {FRAME_RATE_FIELD}: {current} -> {target} ({self.db_path})")
        return True, f"FPS successfully unlocked to {target}!"

    def apply_frame_rate(self, target: int) -> str:
        return self.patch_frame_rate(target)[1]


def read_frame_rate(path: Optional[str]) -> int:
    return QualitySettingsStore(path).read_frame_rate()


def apply_frame_rate(path: Optional[str], target: int) -> str:
    return QualitySettingsStore(path).apply_frame_rate(target)


def patch_frame_rate(path: Optional[str], target: int) -> Tuple[bool, str]:
    return QualitySettingsStore(path).patch_frame_rate(target)
