"""
Shared UI Styles - Button styles, colors and label styles for the unlocker window.

Usage:
    from ploom_unlock.ui.styles import ButtonStyles
    btn.setStyleSheet(ButtonStyles.PRIMARY)
"""

class ButtonStyles:
    """Reusable button stylesheet templates."""

    # Locate / Browse (gray)
    DEFAULT = """
        QPushButton {
            background-color: #3b3b3b;
            color: #fff;
            border: 1px solid #555;
            border-radius: 4px;
            padding: 6px 12px;
        }
        QPushButton:hover {
            background-color: #4a4a4a;
            border-color: #777;
        }
        QPushButton:pressed {
            background-color: #222;
            padding-top: 8px;
            padding-left: 14px;
        }
    """

    # Set FPS (blue)
    PRIMARY = """
        QPushButton {
            background-color: #2980b9;
            color: #fff;
            border: 1px solid #3498db;
            border-radius: 4px;
            padding: 6px 12px;
        }
        QPushButton:hover {
            background-color: #3498db;
            border-color: #fff;
        }
        QPushButton:pressed {
            background-color: #1a5276;
            padding-top: 8px;
            padding-left: 14px;
        }
    """


class Colors:
    """Common color constants."""

    SUCCESS = "#2ecc71"
    DANGER = "#e74c3c"

    TEXT_PRIMARY = "#ffffff"
    TEXT_SECONDARY = "#aaaaaa"

    BORDER_DEFAULT = "#555555"


class LabelStyles:
    HEADING = "font-size: 16pt; font-weight: bold; color: #ffffff;"
    SECTION = "font-weight: bold; color: #dddddd;"
    PATH = f"color: {Colors.TEXT_SECONDARY}; font-family: Consolas, monospace;"
    SEPARATOR = f"background-color: {Colors.BORDER_DEFAULT}; max-height: 1px; border: none;"

    @staticmethod
    def status(outcome: str) -> str:
        color = {
            "success": Colors.SUCCESS,
            "error": Colors.DANGER,
        }.get(outcome, Colors.TEXT_PRIMARY)
        return f"color: {color}; font-weight: bold;"
