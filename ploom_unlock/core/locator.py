"""
Ploom FPS Unlock: Locating LocalStorage.db.
Neither function checks that the file exists; the settings store does that.
"""
import logging
from typing import Callable, Optional

from ploom_unlock.core.game_config import build_db_path
from ploom_unlock.core.platform import PlatformIntegration, get_platform

logger = logging.getLogger("Locator")


def resolve_by_registry(platform: Optional[PlatformIntegration] = None) -> str:
    """Builds the database path from the game's registry InstallPath.

    Raises RegistryError when the uninstall key or its InstallPath is missing.
    """
    platform = platform or get_platform()
    install_path = platform.read_install_path()
    db_path = build_db_path(install_path)
    logger.info(f"Resolved settings database via registry: {db_path}")
    return db_path


def resolve_by_user_selection(picker: Callable[[], Optional[str]]) -> Optional[str]:
    """Runs a file picker and returns the chosen path, or None if cancelled."""
    path = picker()
    if not path:
        logger.info("File selection cancelled.")
        return None
    logger.info(f"User selected settings database: {path}")
    return path
