from __future__ import annotations

import logging
import random
from typing import Callable, List, Optional, Tuple

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from skyhop.core.board import TILE_COUNT, TileState, tile_position
from skyhop.core.game import FallPlan, GameController, RunState
from skyhop.core.levels import LevelRepository
from skyhop.ui.colors import SkyColors, text_color_for
from skyhop.ui.sky_background import SkyBackground
from skyhop.ui.tile_widgets import CloudTile

logger = logging.getLogger(__name__)


def _button_style() -> str:
    return f"""
        QPushButton {{
            background: qlineargradient(x1:0, y1:0, x2:1, y2:1,
                stop:0 {SkyColors.PRIMARY_LIGHT}, stop:1 {SkyColors.PRIMARY});
            color: white;
            padding: 10px 28px;
            border: none;
            border-radius: 14px;
            font-weight: 700;
            font-size: 16px;
        }}
        QPushButton:hover {{ background: {SkyColors.PRIMARY}; }}
        QPushButton:disabled {{
            background: rgba(255, 255, 255, 0.35);
            color: rgba(26, 58, 90, 0.45);
        }}
    """


class MainWindow(QMainWindow):
    """Game window: sky, level indicator, message line, cloud grid and buttons.

    Implements the display side of :class:`GameController`; clicks on clouds and
    the Play/Restart buttons are forwarded to the controller.
    """

    def __init__(self, levels: LevelRepository, rng: Optional[random.Random] = None) -> None:
        super().__init__()
        self._levels_repo = levels
        self._tiles: List[CloudTile] = []
        self._timers: List[QTimer] = []

        self._background: Optional[SkyBackground] = None
        self._level_label: Optional[QLabel] = None
        self._message_label: Optional[QLabel] = None
        self._play_button: Optional[QPushButton] = None
        self._restart_button: Optional[QPushButton] = None

        self._build_ui()
        self._controller = GameController(self, levels, rng)
        self._play_button.clicked.connect(self._controller.commit)
        self._restart_button.clicked.connect(self._on_restart)
        for tile in self._tiles:
            tile.clicked.connect(self._controller.select_tile)
        self._controller.start_run()

    def _build_ui(self) -> None:
        self.setWindowTitle("Skyhop")
        self.setMinimumSize(520, 680)

        self._background = SkyBackground(self._levels_repo.sky(1))
        self.setCentralWidget(self._background)

        layout = QVBoxLayout(self._background)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(16)

        self._level_label = QLabel("")
        self._level_label.setAlignment(Qt.AlignCenter)
        self._message_label = QLabel("")
        self._message_label.setAlignment(Qt.AlignCenter)
        self._message_label.setWordWrap(True)
        layout.addWidget(self._level_label)
        layout.addWidget(self._message_label)

        grid_host = QWidget()
        grid = QGridLayout(grid_host)
        grid.setContentsMargins(0, 0, 0, 0)
        grid.setSpacing(8)
        for tile_id in range(TILE_COUNT):
            tile = CloudTile(tile_id)
            self._tiles.append(tile)
            row, column = tile_position(tile_id)
            grid.addWidget(tile, row, column)
        layout.addWidget(grid_host, 1)

        buttons = QHBoxLayout()
        buttons.addStretch(1)
        self._play_button = QPushButton("Play")
        self._play_button.setStyleSheet(_button_style())
        self._play_button.setCursor(Qt.PointingHandCursor)
        self._restart_button = QPushButton("Play Again")
        self._restart_button.setStyleSheet(_button_style())
        self._restart_button.setCursor(Qt.PointingHandCursor)
        self._restart_button.setVisible(False)
        buttons.addWidget(self._play_button)
        buttons.addWidget(self._restart_button)
        buttons.addStretch(1)
        layout.addLayout(buttons)

        self._apply_text_color(self._levels_repo.sky(1))

    def _apply_text_color(self, sky: Tuple[str, str]) -> None:
        color = text_color_for(sky)
        self._level_label.setStyleSheet(f"color: {color}; font-size: 22px; font-weight: 800;")
        self._message_label.setStyleSheet(f"color: {color}; font-size: 16px; font-weight: 600;")

    def _on_restart(self) -> None:
        if self._timers:
            logger.debug("Restart cancels %d pending timers", len(self._timers))
        self._cancel_timers()
        self._controller.restart()

    # Display

    def render_board(self, tiles: List[TileState]) -> None:
        for tile, state in zip(self._tiles, tiles):
            tile.set_state(state)

    def show_message(self, text: str) -> None:
        self._message_label.setText(text)

    def show_level(self, level: int) -> None:
        self._level_label.setText(self._levels_repo.caption(level))
        sky = self._levels_repo.sky(level)
        self._background.set_sky(sky, animate=level != 1)
        self._background.set_show_stars(level >= self._levels_repo.final_level)
        self._apply_text_color(sky)

    def set_commit_enabled(self, enabled: bool) -> None:
        self._play_button.setEnabled(enabled)

    def set_run_state(self, state: RunState) -> None:
        in_progress = state is RunState.IN_PROGRESS
        self._play_button.setVisible(in_progress)
        self._restart_button.setVisible(not in_progress)

    def animate_fall(self, plan: FallPlan, on_finished: Callable[[], None]) -> None:
        for tile_id, delay in plan.tile_delays_ms.items():
            self.schedule(delay, self._tiles[tile_id].start_fall)
        if plan.player_falls:
            for tile in self._tiles:
                self.schedule(plan.player_delay_ms, tile.start_player_fall)
        self.schedule(plan.total_ms, on_finished)

    def hop(self) -> None:
        for tile in self._tiles:
            tile.start_hop()

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> None:
        timer = QTimer(self)
        timer.setSingleShot(True)
        timer.timeout.connect(callback)
        timer.timeout.connect(lambda: self._forget_timer(timer))
        self._timers.append(timer)
        timer.start(max(0, int(delay_ms)))

    def _forget_timer(self, timer: QTimer) -> None:
        if timer in self._timers:
            self._timers.remove(timer)
        timer.deleteLater()

    def _cancel_timers(self) -> None:
        for timer in self._timers:
            timer.stop()
            timer.deleteLater()
        self._timers.clear()

    def closeEvent(self, event: QCloseEvent) -> None:
        self._cancel_timers()
        super().closeEvent(event)
