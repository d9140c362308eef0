from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import yaml

from skyhop.core.board import TILE_COUNT

logger = logging.getLogger(__name__)

DEFAULT_SAFE_COUNT = 1
DEFAULT_SKY: Tuple[str, str] = ("#87CEEB", "#E0F7FA")

_HEX_COLOR = re.compile(r"^#[0-9A-Fa-f]{6}$")


@dataclass(frozen=True)
class Level:
    number: int
    safe_count: int
    title: str = ""
    sky: Tuple[str, str] = DEFAULT_SKY


class LevelRepository:
    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path or Path(__file__).resolve().parent.parent / "data" / "levels.yaml"
        self._levels = self._load_levels()

    def all(self) -> List[Level]:
        return list(self._levels.values())

    def get(self, number: int) -> Level:
        return self._levels[number]

    def safe_count(self, number: int) -> int:
        """Clouds kept standing on level *number*; levels past the table keep one."""
        level = self._levels.get(number)
        return level.safe_count if level is not None else DEFAULT_SAFE_COUNT

    def title(self, number: int) -> str:
        level = self._levels.get(number)
        return level.title if level is not None else ""

    def caption(self, number: int) -> str:
        """Level indicator text, e.g. "Level: 2 · Noon breeze"."""
        title = self.title(number)
        return f"Level: {number} · {title}" if title else f"Level: {number}"

    def sky(self, number: int) -> Tuple[str, str]:
        level = self._levels.get(number)
        return level.sky if level is not None else DEFAULT_SKY

    @property
    def final_level(self) -> int:
        return max(self._levels)

    def _load_levels(self) -> Dict[int, Level]:
        if not self._path.exists():
            raise FileNotFoundError(f"Level table not found: {self._path}")

        raw = yaml.safe_load(self._path.read_text(encoding="utf-8"))
        if not raw or not isinstance(raw, dict):
            raise ValueError(f"{self._path.name}: expected YAML with a 'levels' list")
        entries = raw.get("levels")
        if not isinstance(entries, list) or not entries:
            raise ValueError(f"{self._path.name}: 'levels' must be a non-empty list")

        levels: Dict[int, Level] = {}
        previous = TILE_COUNT
        for number, entry in enumerate(entries, start=1):
            where = f"{self._path.name}: level {number}"
            if not isinstance(entry, dict):
                raise ValueError(f"{where}: expected a mapping")

            title = entry.get("title", "")
            if not isinstance(title, str):
                raise ValueError(f"{where}: invalid 'title'")

            safe_count = entry.get("safe_count")
            if not isinstance(safe_count, int) or isinstance(safe_count, bool):
                raise ValueError(f"{where}: missing or invalid 'safe_count'")
            if not 1 <= safe_count <= TILE_COUNT:
                raise ValueError(f"{where}: 'safe_count' must be between 1 and {TILE_COUNT}")
            # The previous level leaves exactly its safe count standing.
            if safe_count > previous:
                raise ValueError(
                    f"{where}: 'safe_count' {safe_count} exceeds the {previous} clouds left standing"
                )
            previous = safe_count

            sky = entry.get("sky", list(DEFAULT_SKY))
            if (
                not isinstance(sky, list)
                or len(sky) != 2
                or not all(isinstance(c, str) and _HEX_COLOR.match(c) for c in sky)
            ):
                raise ValueError(f"{where}: 'sky' must be two #RRGGBB colors")

            levels[number] = Level(
                number=number,
                safe_count=safe_count,
                title=title.strip(),
                sky=(sky[0], sky[1]),
            )

        logger.debug("Loaded %d levels from %s", len(levels), self._path)
        return levels
