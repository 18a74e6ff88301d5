from PyQt6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel
from PyQt6.QtCore import Qt, QSize
from PyQt6.QtGui import QIcon

from ploom_unlock.core.platform import PlatformIntegration, get_platform
from ploom_unlock.ui.title_bar_button import TitleBarButton
from ploom_unlock.ui.window_mixins import Win32Mixin, DraggableMixin


class FramelessWindow(QMainWindow, Win32Mixin, DraggableMixin):
    """Dark frameless window with a custom title bar (icon, title, close)."""

    def __init__(self, parent=None, platform: PlatformIntegration = None):
        super().__init__(parent)
        self.setWindowFlags(Qt.WindowType.FramelessWindowHint)
        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground)

        self.init_native(platform or get_platform())
        self.init_drag()

        self.border_radius = 8
        self._init_frameless_ui()

    def _init_frameless_ui(self):
        self.container = QWidget()
        self.container.setObjectName("FramelessContainer")
        self._update_stylesheet()
        self.setCentralWidget(self.container)

        self.main_layout = QVBoxLayout(self.container)
        self.main_layout.setContentsMargins(0, 0, 0, 0)
        self.main_layout.setSpacing(0)

        # Title Bar
        self.title_bar = QWidget()
        self.title_bar.setObjectName("TitleBar")
        self.title_bar.setStyleSheet("background-color: transparent;")
        self.title_bar.setFixedHeight(40)

        self.title_bar_layout = QHBoxLayout(self.title_bar)
        self.title_bar_layout.setContentsMargins(10, 5, 10, 5)
        self.title_bar_layout.setSpacing(2)

        self.icon_label = QLabel()
        self.icon_label.setFixedSize(24, 24)
        self.icon_label.setVisible(False)
        self.title_bar_layout.addWidget(self.icon_label)

        self.title_label = QLabel("Application")
        self.title_label.setStyleSheet("padding-left: 5px;")
        self.title_bar_layout.addWidget(self.title_label)

        self.title_bar_layout.addStretch()

        # No minimize/maximize: close only
        self.close_btn = TitleBarButton("✕")
        self.close_btn.set_colors(hover="#c42b1c", text="#cccccc")
        self.close_btn.clicked.connect(self.close)
        self.title_bar_layout.addWidget(self.close_btn)

        self.main_layout.addWidget(self.title_bar)

        self.content_area = QWidget()
        self.main_layout.addWidget(self.content_area)

    def setWindowTitle(self, title: str):
        """Override to sync title_label with window title."""
        super().setWindowTitle(title)
        if hasattr(self, 'title_label'):
            self.title_label.setText(title)

    def _update_stylesheet(self):
        radius = f"{self.border_radius}px"
        self.container.setStyleSheet(f"""
            #FramelessContainer {{
                background-color: rgba(43, 43, 43, 245);
                border: 1px solid #444;
                border-radius: {radius};
            }}
            QLabel {{ color: #dddddd; background: transparent; }}
        """)

    def set_content_widget(self, widget: QWidget):
        if self.content_area.layout():
            QWidget().setLayout(self.content_area.layout())
        layout = QVBoxLayout(self.content_area)
        layout.setContentsMargins(15, 5, 15, 15)
        layout.addWidget(widget)

    def set_window_icon_from_path(self, path: str) -> bool:
        icon = QIcon(path)
        if icon.isNull():
            return False
        self.setWindowIcon(icon)
        self.icon_label.setPixmap(icon.pixmap(QSize(24, 24)))
        self.icon_label.setVisible(True)
        return True

    # -- Event Overrides with Mixins delegation --
    def showEvent(self, event):
        super().showEvent(event)
        self.apply_native_style()

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            pos = self.title_bar.mapFrom(self, event.position().toPoint())
            if self.title_bar.rect().contains(pos):
                self.handle_drag_press(event)
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event):
        self.handle_drag_move(event)
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            self.handle_drag_release(event)
        super().mouseReleaseEvent(event)
