"""Window actions without any Qt code.

Each public method handles one button press: it calls the locator and/or the
settings store and records the result in ``UnlockerState``. Errors are turned
into status text here so the window only has to render state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from ploom_unlock.core.errors import UnlockError, StoreError, SettingsFileNotFoundError
from ploom_unlock.core.game_config import SUPPORTED_FRAME_RATES
from ploom_unlock.core.locator import resolve_by_registry, resolve_by_user_selection
from ploom_unlock.core.platform import PlatformIntegration, get_platform
from ploom_unlock.core import settings_store

log = logging.getLogger(__name__)

OUTCOME_NONE = ""
OUTCOME_SUCCESS = "success"
OUTCOME_INFO = "info"
OUTCOME_ERROR = "error"


@dataclass
class UnlockerState:
    """Last path, last status and last read frame rate."""

    db_path: str = ""
    status: str = ""
    current_fps: Optional[int] = None
    outcome: str = OUTCOME_NONE
    error_kind: Optional[str] = None


class UnlockerController:
    def __init__(self, platform: Optional[PlatformIntegration] = None):
        self.platform = platform or get_platform()
        self.state = UnlockerState()

    def _set_status(self, text: str, outcome: str, error_kind: Optional[str] = None) -> None:
        self.state.status = text
        self.state.outcome = outcome
        self.state.error_kind = error_kind

    def _fail(self, prefix: str, err: UnlockError) -> None:
        log.warning("%s: %s", prefix, err)
        self._set_status(f"{prefix}: {err}", OUTCOME_ERROR, err.kind)

    def _load_path(self, path: str) -> None:
        self.state.db_path = path
        self.state.current_fps = None
        try:
            self.state.current_fps = settings_store.read_frame_rate(path)
        except UnlockError as e:
            self._fail("Error reading FPS setting", e)
            return
        self._set_status("Configuration file loaded.", OUTCOME_INFO)

    def locate(self) -> UnlockerState:
        try:
            path = resolve_by_registry(self.platform)
        except UnlockError as e:
            self._fail("Error locating game", e)
            return self.state
        self._load_path(path)
        return self.state

    def browse(self, picker: Callable[[], Optional[str]]) -> UnlockerState:
        path = resolve_by_user_selection(picker)
        if path is None:
            return self.state
        self._load_path(path)
        return self.state

    def apply(self, target: int) -> UnlockerState:
        if target not in SUPPORTED_FRAME_RATES:
            raise ValueError(f"Unsupported frame rate: {target!r}")

        if not self.state.db_path:
            self._set_status("Error: No configuration file selected.", OUTCOME_ERROR, "not_found")
            return self.state

        try:
            written, message = settings_store.patch_frame_rate(self.state.db_path, target)
        except UnlockError as e:
            # The file can no longer be read; the old value is stale
            if e.kind in (SettingsFileNotFoundError.kind, StoreError.kind):
                self.state.current_fps = None
            self._fail("Error", e)
            return self.state

        self.state.current_fps = target
        self._set_status(message, OUTCOME_SUCCESS if written else OUTCOME_INFO)
        log.info("%s", message)
        return self.state


def already_set_hint(fps: Optional[int]) -> Optional[str]:
    """Hint shown under the current value when it already matches a supported target."""
    if fps in SUPPORTED_FRAME_RATES:
        return f"FPS is already set to {fps}. No need to patch."
    return None


__all__ = [
    "UnlockerState",
    "UnlockerController",
    "already_set_hint",
    "OUTCOME_NONE",
    "OUTCOME_SUCCESS",
    "OUTCOME_INFO",
    "OUTCOME_ERROR",
]
