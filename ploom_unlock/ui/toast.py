"""
Toast Notification Widget - Floating notification for action outcomes.

Usage:
    from ploom_unlock.ui.toast import Toast

    self._toast = Toast(parent=self)
    self._toast.show_message("FPS successfully unlocked to 120!", preset="success")
"""

import logging

from PyQt6.QtWidgets import QLabel, QGraphicsOpacityEffect
from PyQt6.QtCore import Qt, QTimer, QPropertyAnimation, QAbstractAnimation


class Toast(QLabel):
    """Floating notification label shown near the top of its parent."""

    COLORS = {
        'info': '#5dade2',     # Blue
        'success': '#2ecc71',  # Green
        'error': '#e74c3c',    # Red
    }

    def __init__(self, parent, text="", duration=2500, y_offset=60):
        super().__init__(text, parent)
        self._duration = duration
        self._y_offset = y_offset
        self._color = self.COLORS['info']
        self.logger = logging.getLogger("Toast")

        self.opacity_effect = QGraphicsOpacityEffect(self)
        self.setGraphicsEffect(self.opacity_effect)

        self.anim = QPropertyAnimation(self.opacity_effect, b"opacity")
        self.anim.setDuration(300)

        self._hide_timer = QTimer(self)
        self._hide_timer.setSingleShot(True)
        self._hide_timer.timeout.connect(self.fade_out)

        self._apply_style()
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setWordWrap(True)
        self.adjustSize()
        self.hide()

    def _apply_style(self, color=None):
        c = color or self._color
        self.setStyleSheet(f"""
            background: rgba(40, 40, 40, 230);
            color: {c};
            border: 1px solid {c};
            border-radius: 15px;
            padding: 8px 20px;
            font-weight: bold;
            font-size: 11pt;
        """)

    def _disconnect_hide(self):
        try:
            self.anim.finished.disconnect(self.hide)
        except TypeError:
            pass

    def show_message(self, text, preset="info", duration=None):
        self._hide_timer.stop()
        if self.anim.state() == QAbstractAnimation.State.Running:
            self.anim.stop()
        self._disconnect_hide()

        self.setText(text)
        self._color = self.COLORS.get(preset, self.COLORS['info'])
        self._apply_style(self._color)

        parent = self.parentWidget()
        if parent:
            self.setMaximumWidth(max(200, parent.width() - 40))
        self.adjustSize()
        if parent:
            self.move((parent.width() - self.width()) // 2, self._y_offset)

        self.show()
        self.raise_()
        self.logger.debug(f"Toast shown ({preset}): {text}")

        self.opacity_effect.setOpacity(0.0)
        self.anim.setDuration(300)
        self.anim.setStartValue(0.0)
        self.anim.setEndValue(1.0)
        self.anim.start()

        self._hide_timer.start(duration or self._duration)

    def fade_out(self):
        if self.anim.state() == QAbstractAnimation.State.Running:
            self.anim.stop()
        self._disconnect_hide()

        self.anim.setDuration(500)
        self.anim.setStartValue(1.0)
        self.anim.setEndValue(0.0)
        self.anim.finished.connect(self.hide)
        self.anim.start()
