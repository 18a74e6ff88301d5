import logging

from PyQt6.QtCore import Qt, QPoint

from ploom_unlock.core.platform import PlatformIntegration


class Win32Mixin:
    """Native window tweaks, delegated to the platform integration."""

    def init_native(self, platform: PlatformIntegration):
        self.platform = platform
        self._native_applied = False

    def apply_native_style(self):
        """Strips the system menu and minimize box once the native handle exists."""
        if self._native_applied:
            return
        self._native_applied = True
        try:
            hwnd = int(self.winId())
        except Exception as e:
            logging.getLogger(self.__class__.__name__).error(f"Could not get window handle: {e}")
            return
        self.platform.strip_window_menu(hwnd)


class DraggableMixin:
    """Handles dragging logic. Requires 'title_bar' attribute in usage."""

    def init_drag(self):
        self.draggable = False
        self._drag_pos = QPoint()

    def handle_drag_press(self, event):
        self._drag_pos = event.globalPosition().toPoint() - self.pos()
        self.draggable = True

    def handle_drag_move(self, event):
        if self.draggable and event.buttons() == Qt.MouseButton.LeftButton:
            self.move(event.globalPosition().toPoint() - self._drag_pos)

    def handle_drag_release(self, event):
        self.draggable = False
