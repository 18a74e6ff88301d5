from PyQt6.QtWidgets import QPushButton
from PyQt6.QtGui import QCursor
from PyQt6.QtCore import Qt

class TitleBarButton(QPushButton):
    """
    Flat button for the custom title bar with a hover color.
    """
    def __init__(self, text="", parent=None):
        super().__init__(text, parent)
        self.setFixedSize(30, 30)
        self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))

        self.hover_color = "#3a3a3a"
        self.text_color = "#cccccc"

        self.update_style()

    def set_colors(self, hover=None, text=None):
        if hover: self.hover_color = hover
        if text: self.text_color = text
        self.update_style()

    def update_style(self):
        self.setStyleSheet(f"""
            QPushButton {{
                background-color: transparent;
                border: none;
                color: {self.text_color};
                font-weight: bold;
                font-family: "Segoe UI Emoji", "Segoe UI", sans-serif;
                font-size: 16px;
                padding: 0px;
                margin: 0px;
            }}
            QPushButton:hover {{
                background-color: {self.hover_color};
                border: 1px solid rgba(255,255,255,0.2);
            }}
            QPushButton:pressed {{
                background-color: #2c3e50;
            }}
        """)
