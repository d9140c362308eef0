"""Sky background: per-level gradient with cross-fade, twinkling stars and satellites."""

from __future__ import annotations

import random
from typing import Optional, Tuple

from PySide6.QtCore import (
    Property,
    QElapsedTimer,
    QEasingCurve,
    QPoint,
    QPropertyAnimation,
    QRectF,
    Qt,
    QTimer,
)
from PySide6.QtGui import QColor, QLinearGradient, QPainter, QRadialGradient
from PySide6.QtWidgets import QWidget

from skyhop.ui.colors import SkyColors, blend_sky
from skyhop.ui.motion import satellite_x, twinkle

CROSS_FADE_MS = 1200
STAR_COUNT = 150
SATELLITE_COUNT = 2
SATELLITE = "🛰️"
FRAME_MS = 50


class SkyBackground(QWidget):
    """Gradient sky that fades from one level's colors to the next."""

    def __init__(self, sky: Tuple[str, str], parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self._from_sky = sky
        self._to_sky = sky
        self._fade = 1.0
        self._show_stars = False

        rng = random.Random()
        # (x, y) as fractions of the widget size, radius in px, base alpha, twinkle phase
        self._stars = [
            (rng.random(), rng.random(), rng.random() + 0.5, rng.randint(120, 255), rng.random())
            for _ in range(STAR_COUNT)
        ]
        # (y fraction, seconds per crossing, seconds before the first pass)
        self._satellites = [
            (0.10 + rng.random() * 0.30, 20.0 + rng.random() * 10.0, rng.random() * 10.0)
            for _ in range(SATELLITE_COUNT)
        ]

        self._clock = QElapsedTimer()
        self._frame_timer = QTimer(self)
        self._frame_timer.setInterval(FRAME_MS)
        self._frame_timer.timeout.connect(self.update)

        self._fade_anim = QPropertyAnimation(self, b"fade", self)
        self._fade_anim.setDuration(CROSS_FADE_MS)
        self._fade_anim.setEasingCurve(QEasingCurve.InOutQuad)

    def current_sky(self) -> Tuple[str, str]:
        return blend_sky(self._from_sky, self._to_sky, self._fade)

    def set_sky(self, sky: Tuple[str, str], animate: bool = True) -> None:
        """Switch to *sky*, cross-fading from whatever is on screen now."""
        self._fade_anim.stop()
        if not animate:
            self._from_sky = sky
            self._to_sky = sky
            self.set_fade(1.0)
            return
        self._from_sky = self.current_sky()
        self._to_sky = sky
        self._fade_anim.setStartValue(0.0)
        self._fade_anim.setEndValue(1.0)
        self._fade_anim.start()

    def set_show_stars(self, show: bool) -> None:
        """Show the night scene; it only animates while visible."""
        if show and not self._show_stars:
            self._clock.start()
            self._frame_timer.start()
        elif not show:
            self._frame_timer.stop()
        self._show_stars = show
        self.update()

    def get_fade(self) -> float:
        return self._fade

    def set_fade(self, value: float) -> None:
        self._fade = value
        self.update()

    fade = Property(float, get_fade, set_fade)

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)

        top, bottom = self.current_sky()
        gradient = QLinearGradient(0, 0, 0, self.height())
        gradient.setColorAt(0.0, QColor(top))
        gradient.setColorAt(1.0, QColor(bottom))
        painter.fillRect(self.rect(), gradient)

        painter.setPen(Qt.NoPen)

        # Soft sun glow
        glow = QRadialGradient(self.width() * 0.85, self.height() * 0.12, 200)
        glow.setColorAt(0, QColor(255, 255, 255, 60))
        glow.setColorAt(1, QColor(255, 255, 255, 0))
        painter.setBrush(glow)
        painter.drawEllipse(QPoint(int(self.width() * 0.85), int(self.height() * 0.12)), 200, 200)

        if self._show_stars:
            self._paint_night(painter)

    def _paint_night(self, painter: QPainter) -> None:
        elapsed_s = self._clock.elapsed() / 1000.0 if self._clock.isValid() else 0.0

        for x, y, radius, alpha, phase in self._stars:
            color = QColor(SkyColors.STAR)
            color.setAlpha(int(alpha * self._fade * twinkle(phase, elapsed_s)))
            painter.setBrush(color)
            painter.drawEllipse(
                QPoint(int(self.width() * x), int(self.height() * y)),
                int(radius + 0.5),
                int(radius + 0.5),
            )

        painter.setOpacity(self._fade)
        font = painter.font()
        font.setPointSize(22)
        painter.setFont(font)
        painter.setPen(QColor(SkyColors.STAR))
        for y, duration_s, delay_s in self._satellites:
            x = satellite_x(elapsed_s, duration_s, delay_s)
            if x is None:
                continue
            rect = QRectF(self.width() * x - 20, self.height() * y - 20, 40, 40)
            painter.drawText(rect, Qt.AlignCenter, SATELLITE)
