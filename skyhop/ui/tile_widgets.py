"""Cloud tile widget with hop and fall animations."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import (
    Property,
    QEasingCurve,
    QPropertyAnimation,
    QRectF,
    Qt,
    Signal,
)
from PySide6.QtGui import QColor, QLinearGradient, QPainter, QPainterPath, QPen
from PySide6.QtWidgets import QSizePolicy, QWidget

from skyhop.core.board import TileState
from skyhop.ui.colors import SkyColors

HOP_MS = 400
HOP_HEIGHT = 0.25
FALL_MS = 800
PLAYER_MARKER = "🧍"


class CloudTile(QWidget):
    """One clickable cloud. Paints the player marker when the player stands on it."""

    clicked = Signal(int)

    def __init__(self, tile_id: int, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._tile_id = tile_id
        self._is_fallen = False
        self._has_player = False
        self._fall = 0.0
        self._player_fall = 0.0
        self._hop = 0.0

        self.setMinimumSize(56, 56)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setAttribute(Qt.WidgetAttribute.WA_Hover, True)

        self._fall_anim = QPropertyAnimation(self, b"fall", self)
        self._fall_anim.setDuration(FALL_MS)
        self._fall_anim.setStartValue(0.0)
        self._fall_anim.setEndValue(1.0)
        self._fall_anim.setEasingCurve(QEasingCurve.InQuad)
        self._fall_anim.finished.connect(self.mark_fallen)

        self._player_fall_anim = QPropertyAnimation(self, b"playerFall", self)
        self._player_fall_anim.setDuration(FALL_MS)
        self._player_fall_anim.setStartValue(0.0)
        self._player_fall_anim.setEndValue(1.0)
        self._player_fall_anim.setEasingCurve(QEasingCurve.InQuad)

        self._hop_anim = QPropertyAnimation(self, b"hop", self)
        self._hop_anim.setDuration(HOP_MS)
        self._hop_anim.setKeyValueAt(0.0, 0.0)
        self._hop_anim.setKeyValueAt(0.5, 1.0)
        self._hop_anim.setKeyValueAt(1.0, 0.0)
        self._hop_anim.setEasingCurve(QEasingCurve.OutQuad)

    @property
    def tile_id(self) -> int:
        return self._tile_id

    @property
    def is_fallen(self) -> bool:
        return self._is_fallen

    def set_state(self, state: TileState) -> None:
        self._fall_anim.stop()
        self._player_fall_anim.stop()
        self._is_fallen = state.is_fallen
        self._has_player = state.has_player
        self._fall = 1.0 if state.is_fallen else 0.0
        self._player_fall = 0.0
        self.setCursor(Qt.ArrowCursor if state.is_fallen else Qt.PointingHandCursor)
        self.update()

    def start_fall(self) -> None:
        self._fall_anim.start()

    def mark_fallen(self) -> None:
        """Leave an empty, unclickable slot where the cloud was."""
        self._is_fallen = True
        self._fall = 1.0
        self.setCursor(Qt.ArrowCursor)
        self.update()

    def start_player_fall(self) -> None:
        if self._has_player:
            self._player_fall_anim.start()

    def start_hop(self) -> None:
        if self._has_player:
            self._hop_anim.stop()
            self._hop_anim.start()

    def get_fall(self) -> float:
        return self._fall

    def set_fall(self, value: float) -> None:
        self._fall = value
        self.update()

    fall = Property(float, get_fall, set_fall)

    def get_player_fall(self) -> float:
        return self._player_fall

    def set_player_fall(self, value: float) -> None:
        self._player_fall = value
        self.update()

    playerFall = Property(float, get_player_fall, set_player_fall)

    def get_hop(self) -> float:
        return self._hop

    def set_hop(self, value: float) -> None:
        self._hop = value
        self.update()

    hop = Property(float, get_hop, set_hop)

    def mousePressEvent(self, event) -> None:
        if event.button() == Qt.LeftButton and not self._is_fallen:
            self.clicked.emit(self._tile_id)
        super().mousePressEvent(event)

    def _cloud_path(self, rect: QRectF) -> QPainterPath:
        w, h = rect.width(), rect.height()
        path = QPainterPath()
        path.addRoundedRect(
            QRectF(rect.left(), rect.top() + h * 0.45, w, h * 0.4), h * 0.2, h * 0.2
        )
        path.addEllipse(QRectF(rect.left() + w * 0.08, rect.top() + h * 0.3, w * 0.4, h * 0.45))
        path.addEllipse(QRectF(rect.left() + w * 0.3, rect.top() + h * 0.12, w * 0.45, h * 0.55))
        path.addEllipse(QRectF(rect.left() + w * 0.55, rect.top() + h * 0.3, w * 0.38, h * 0.42))
        return path.simplified()

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)

        side = min(self.width(), self.height()) * 0.9
        rect = QRectF((self.width() - side) / 2, (self.height() - side) / 2, side, side)

        if self._fall < 1.0:
            painter.save()
            painter.setOpacity(1.0 - self._fall)
            painter.translate(0, self._fall * self.height())
            gradient = QLinearGradient(rect.topLeft(), rect.bottomLeft())
            top = SkyColors.CLOUD_SELECTED if self._has_player else SkyColors.CLOUD_TOP
            gradient.setColorAt(0.0, QColor(top))
            gradient.setColorAt(1.0, QColor(SkyColors.CLOUD_BOTTOM))
            painter.setBrush(gradient)
            outline = SkyColors.PRIMARY if self.underMouse() else SkyColors.CLOUD_OUTLINE
            painter.setPen(QPen(QColor(outline), 2))
            painter.drawPath(self._cloud_path(rect))
            painter.restore()

        if self._has_player and self._player_fall < 1.0:
            painter.save()
            painter.setOpacity(1.0 - self._player_fall)
            lift = self._hop * HOP_HEIGHT * side
            drop = self._player_fall * self.height()
            painter.translate(0, drop - lift)
            font = painter.font()
            font.setPointSizeF(max(12.0, side * 0.32))
            painter.setFont(font)
            painter.drawText(rect, Qt.AlignCenter, PLAYER_MARKER)
            painter.restore()
