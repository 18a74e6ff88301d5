"""
Ploom FPS Unlock: Fixed game locations and settings keys.
Everything the unlocker knows about the game's install layout lives here.
"""
import os
import ntpath

# Registry (HKEY_LOCAL_MACHINE)
REGISTRY_SUBKEY = (
    "SOFTWARE\\WOW6432Node\\Microsoft\\Windows\\CurrentVersion\\Uninstall\\"
    "KRInstall Wuthering Waves Overseas"
)
REGISTRY_VALUE_NAME = "InstallPath"

# Relative to InstallPath
DB_SUBPATH = ntpath.join(
    "Wuthering Waves Game", "Client", "Saved", "LocalStorage", "LocalStorage.db"
)

# LocalStorage.db layout
TABLE_NAME = "LocalStorage"
QUALITY_SETTING_KEY = "GameQualitySetting"
FRAME_RATE_FIELD = "KeyCustomFrameRate"

SUPPORTED_FRAME_RATES = (120, 165)

# Window
WINDOW_TITLE = "WuWa Ploom 120 & 165 FPS Unlock"
CONSOLE_TITLE = "WuWa Ploom FPS Unlock"
ICON_RELATIVE_PATH = os.path.join("resource", "icon", "ploom.ico")

INSTRUCTIONS = (
    "1) Check and set your FPS limit to 60, then close your game.\n"
    "2) Do not touch FPS or VSync options in-game.\n"
    "3) You can either automatically find it or browse and choose the file."
)

KOFI_URL = "https://ko-fi.com/abellio"


def build_db_path(install_path: str) -> str:
    """Joins the registry InstallPath with the LocalStorage.db subpath (Windows separators)."""
    return ntpath.join(install_path, DB_SUBPATH)
