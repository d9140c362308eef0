"""Theme colors and color utilities for the UI."""

from typing import Tuple


class SkyColors:
    """Cloud, button and text palette shared by all levels."""

    CLOUD_TOP = "#FFFFFF"
    CLOUD_BOTTOM = "#DDE9F3"
    CLOUD_OUTLINE = "#B0C4D6"
    CLOUD_SELECTED = "#FFE082"

    PRIMARY = "#0288D1"
    PRIMARY_LIGHT = "#4FC3F7"
    PRIMARY_DARK = "#01579B"
    DANGER = "#E57373"

    TEXT_ON_LIGHT = "#1A3A5A"
    TEXT_ON_DARK = "#F5F7FF"

    STAR = "#FFFDE7"


def blend_hex(a: str, b: str, t: float) -> str:
    """Blend two #RRGGBB colors. t=0 -> a, t=1 -> b."""
    try:
        a = a.strip()
        b = b.strip()
        if not (a.startswith("#") and b.startswith("#") and len(a) == 7 and len(b) == 7):
            return a
        t = max(0.0, min(1.0, float(t)))
        ar, ag, ab = int(a[1:3], 16), int(a[3:5], 16), int(a[5:7], 16)
        br, bg, bb = int(b[1:3], 16), int(b[3:5], 16), int(b[5:7], 16)
        r = int(ar + (br - ar) * t)
        g = int(ag + (bg - ag) * t)
        bl = int(ab + (bb - ab) * t)
        return f"#{r:02X}{g:02X}{bl:02X}"
    except ValueError:
        return a


def blend_sky(a: Tuple[str, str], b: Tuple[str, str], t: float) -> Tuple[str, str]:
    """Blend two (top, bottom) gradients stop by stop."""
    return blend_hex(a[0], b[0], t), blend_hex(a[1], b[1], t)


def is_dark(color: str) -> bool:
    """True when *color* is dark enough to need light text on top of it."""
    try:
        r, g, b = int(color[1:3], 16), int(color[3:5], 16), int(color[5:7], 16)
    except (ValueError, IndexError):
        return False
    # ITU-R BT.601 luma
    return (0.299 * r + 0.587 * g + 0.114 * b) < 128


def text_color_for(sky: Tuple[str, str]) -> str:
    return SkyColors.TEXT_ON_DARK if is_dark(blend_hex(sky[0], sky[1], 0.5)) else SkyColors.TEXT_ON_LIGHT
