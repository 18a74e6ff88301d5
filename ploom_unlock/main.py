import sys
import os
import logging

from PyQt6.QtWidgets import QApplication
from rich.console import Console

from ploom_unlock.main_setup import setup_error_handling
from ploom_unlock.core.game_config import CONSOLE_TITLE, ICON_RELATIVE_PATH
from ploom_unlock.core.platform import get_platform
from ploom_unlock.core.version import APP_NAME, VERSION_STRING
from ploom_unlock.ui.unlocker_window import UnlockerWindow
from ploom_unlock.utils.path_utils import get_resource_path


def main():
    setup_error_handling()
    platform = get_platform()
    platform.set_console_title(CONSOLE_TITLE)

    try:
        app = QApplication(sys.argv)
        app.setApplicationName(APP_NAME)

        window = UnlockerWindow(platform=platform)

        icon_path = get_resource_path(ICON_RELATIVE_PATH)
        if os.path.exists(icon_path):
            if not window.set_window_icon_from_path(icon_path):
                logging.error(f"Failed to load icon: {icon_path}")
        else:
            logging.info(f"No icon at {icon_path}; using default.")

        window.show()
        logging.info(f"Launched {VERSION_STRING}.")

        sys.exit(app.exec())
    except Exception:
        logging.error("Fatal error in main loop", exc_info=True)
        Console().print_exception(show_locals=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
