"""
Ploom FPS Unlock: Platform integration.

Registry access and native window tweaks are Windows only. The rest of the
program talks to a PlatformIntegration object so the settings logic can be
driven without a real registry or window.
"""
import sys
import ctypes
import logging

from ploom_unlock.core.errors import RegistryError
from ploom_unlock.core.game_config import REGISTRY_SUBKEY, REGISTRY_VALUE_NAME

# Win32 Constants
GWL_STYLE = -16
WS_SYSMENU = 0x00080000
WS_MINIMIZEBOX = 0x00020000


class PlatformIntegration:
    """Interface for OS specific side effects."""

    def read_install_path(self) -> str:
        """Returns the game's InstallPath or raises RegistryError."""
        raise NotImplementedError

    def set_console_title(self, title: str):
        raise NotImplementedError

    def strip_window_menu(self, hwnd: int):
        """Removes the system menu and minimize box from a native window."""
        raise NotImplementedError


class NullPlatform(PlatformIntegration):
    """Used where there is no Windows registry. Window calls do nothing."""

    def __init__(self):
        self.logger = logging.getLogger("NullPlatform")

    def read_install_path(self) -> str:
        self.logger.warning(f"No registry on platform '{sys.platform}'.")
        raise RegistryError()

    def set_console_title(self, title: str):
        pass

    def strip_window_menu(self, hwnd: int):
        pass


class WindowsPlatform(PlatformIntegration):
    def __init__(self):
        self.logger = logging.getLogger("WindowsPlatform")

    def read_install_path(self) -> str:
        import winreg

        try:
            with winreg.OpenKey(winreg.HKEY_LOCAL_MACHINE, REGISTRY_SUBKEY) as key:
                value, value_type = winreg.QueryValueEx(key, REGISTRY_VALUE_NAME)
        except OSError as e:
            self.logger.warning(f"Registry lookup failed for HKLM\\{REGISTRY_SUBKEY}: {e}")
            raise RegistryError() from e

        if value_type == winreg.REG_EXPAND_SZ:
            value = winreg.ExpandEnvironmentStrings(value)
        elif value_type != winreg.REG_SZ:
            self.logger.warning(f"{REGISTRY_VALUE_NAME} has unexpected registry type {value_type}")
            raise RegistryError()

        if not value:
            raise RegistryError()

        self.logger.info(f"Found {REGISTRY_VALUE_NAME}: {value}")
        return value

    def set_console_title(self, title: str):
        try:
            ctypes.windll.kernel32.SetConsoleTitleW(title)
        except Exception as e:
            self.logger.error(f"Win32 API Error in set_console_title: {e}")

    def strip_window_menu(self, hwnd: int):
        try:
            user32 = ctypes.windll.user32
            style = user32.GetWindowLongW(hwnd, GWL_STYLE)
            new_style = style & ~(WS_SYSMENU | WS_MINIMIZEBOX)
            user32.SetWindowLongW(hwnd, GWL_STYLE, new_style)
            self.logger.info(f"Window style updated: HWND={hwnd}, {hex(style)} -> {hex(new_style)}")
        except Exception as e:
            self.logger.error(f"Win32 API Error in strip_window_menu: {e}")


def get_platform() -> PlatformIntegration:
    if sys.platform == "win32":
        return WindowsPlatform()
    return NullPlatform()
