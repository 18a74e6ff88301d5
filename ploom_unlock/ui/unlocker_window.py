import logging

from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QFileDialog, QFrame
)
from PyQt6.QtCore import Qt

from ploom_unlock.core.game_config import (
    WINDOW_TITLE, INSTRUCTIONS, KOFI_URL, FRAME_RATE_FIELD, SUPPORTED_FRAME_RATES
)
from ploom_unlock.core.platform import PlatformIntegration
from ploom_unlock.core.version import AUTHOR, SOURCE_URL
from ploom_unlock.ui.controller import UnlockerController, already_set_hint, OUTCOME_NONE
from ploom_unlock.ui.frameless_window import FramelessWindow
from ploom_unlock.ui.styles import ButtonStyles, LabelStyles
from ploom_unlock.ui.toast import Toast


def _link(url: str) -> str:
    return f'<a href="{url}">{url}</a>'


class UnlockerWindow(FramelessWindow):
    """Main window: four buttons, the resolved path, the current value and the last status."""

    def __init__(self, parent=None, platform: PlatformIntegration = None):
        super().__init__(parent, platform=platform)
        self.logger = logging.getLogger("UnlockerWindow")
        self.controller = UnlockerController(self.platform)

        self.setWindowTitle(WINDOW_TITLE)
        self.setMinimumWidth(640)

        self._init_content()
        self._toast = Toast(parent=self)
        self.refresh()

    def _separator(self) -> QFrame:
        line = QFrame()
        line.setFrameShape(QFrame.Shape.HLine)
        line.setStyleSheet(LabelStyles.SEPARATOR)
        return line

    def _init_content(self):
        content = QWidget()
        layout = QVBoxLayout(content)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(6)

        heading = QLabel(WINDOW_TITLE)
        heading.setStyleSheet(LabelStyles.HEADING)
        heading.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(heading)
        layout.addWidget(self._separator())
        layout.addSpacing(10)

        # Credits
        layout.addWidget(QLabel(f"Made by {AUTHOR}"))
        self.github_label = QLabel(f"Github: {_link(SOURCE_URL)}")
        self.github_label.setOpenExternalLinks(True)
        layout.addWidget(self.github_label)
        layout.addSpacing(10)
        layout.addWidget(QLabel("Support my Gacha addiction:"))
        kofi = QLabel(f"ko-fi: {_link(KOFI_URL)}")
        kofi.setOpenExternalLinks(True)
        layout.addWidget(kofi)
        layout.addSpacing(10)
        layout.addWidget(self._separator())
        layout.addSpacing(10)

        steps = QLabel("Steps:")
        steps.setStyleSheet(LabelStyles.SECTION)
        layout.addWidget(steps)
        layout.addWidget(QLabel(INSTRUCTIONS))
        layout.addWidget(self._separator())

        layout.addWidget(QLabel("Select the SQLite database file:"))
        layout.addSpacing(10)

        btn_row = QHBoxLayout()
        self.locate_btn = QPushButton("Locate Configuration File")
        self.locate_btn.setStyleSheet(ButtonStyles.DEFAULT)
        self.locate_btn.clicked.connect(self._on_locate)
        btn_row.addWidget(self.locate_btn)

        self.browse_btn = QPushButton("Browse for Configuration File")
        self.browse_btn.setStyleSheet(ButtonStyles.DEFAULT)
        self.browse_btn.clicked.connect(self._on_browse)
        btn_row.addWidget(self.browse_btn)

        self.fps_buttons = {}
        for fps in SUPPORTED_FRAME_RATES:
            btn = QPushButton(f"Set FPS to {fps}")
            btn.setStyleSheet(ButtonStyles.PRIMARY)
            btn.clicked.connect(lambda _checked=False, f=fps: self._on_apply(f))
            btn_row.addWidget(btn)
            self.fps_buttons[fps] = btn
        layout.addLayout(btn_row)
        layout.addSpacing(10)

        self.path_label = QLabel()
        self.path_label.setStyleSheet(LabelStyles.PATH)
        self.path_label.setWordWrap(True)
        self.path_label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        layout.addWidget(self.path_label)

        # Current FPS section (hidden until a value is read)
        self.fps_section = QWidget()
        fps_layout = QVBoxLayout(self.fps_section)
        fps_layout.setContentsMargins(0, 0, 0, 0)
        fps_layout.addWidget(self._separator())
        current_title = QLabel("Current FPS Setting:")
        current_title.setStyleSheet(LabelStyles.SECTION)
        fps_layout.addWidget(current_title)
        self.fps_value_label = QLabel()
        fps_layout.addWidget(self.fps_value_label)
        self.fps_hint_label = QLabel()
        fps_layout.addWidget(self.fps_hint_label)
        layout.addWidget(self.fps_section)

        layout.addSpacing(10)
        self.status_label = QLabel()
        self.status_label.setWordWrap(True)
        layout.addWidget(self.status_label)
        layout.addStretch()

        self.set_content_widget(content)

    # -- Actions --
    def _pick_file(self):
        path, _ = QFileDialog.getOpenFileName(
            self, "Select LocalStorage.db", "", "SQLite database (*.db);;All files (*)"
        )
        return path

    def _on_locate(self):
        self.controller.locate()
        self._after_action()

    def _on_browse(self):
        self.controller.browse(self._pick_file)
        self._after_action()

    def _on_apply(self, fps: int):
        self.controller.apply(fps)
        self._after_action()

    def _after_action(self):
        self.refresh()
        state = self.controller.state
        if state.status and state.outcome != OUTCOME_NONE:
            self._toast.show_message(state.status, preset=state.outcome)

    def refresh(self):
        state = self.controller.state
        self.path_label.setText(state.db_path)

        if state.current_fps is None:
            self.fps_section.setVisible(False)
        else:
            self.fps_section.setVisible(True)
            self.fps_value_label.setText(f"{FRAME_RATE_FIELD}: {state.current_fps}")
            hint = already_set_hint(state.current_fps)
            self.fps_hint_label.setText(hint or "")
            self.fps_hint_label.setVisible(hint is not None)

        self.status_label.setText(state.status)
        self.status_label.setStyleSheet(LabelStyles.status(state.outcome))
        self.adjustSize()
