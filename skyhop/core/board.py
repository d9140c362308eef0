"""Board constants, tile view records and the safe-tile draw."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import AbstractSet, List, Optional, Set, Tuple

BOARD_SIZE = 5
TILE_COUNT = BOARD_SIZE * BOARD_SIZE
ALL_TILES = frozenset(range(TILE_COUNT))


@dataclass(frozen=True)
class TileState:
    """What the display needs to draw one cloud."""

    id: int
    is_fallen: bool
    has_player: bool


def tile_position(tile_id: int) -> Tuple[int, int]:
    """(row, column) of *tile_id* on the grid."""
    return divmod(tile_id, BOARD_SIZE)


def draw_safe_tiles(rng: random.Random, count: int, fallen: AbstractSet[int]) -> Set[int]:
    """Pick *count* standing tiles uniformly at random, without replacement.

    Raises ``ValueError`` when fewer than *count* tiles are still standing.
    """
    if count < 0:
        raise ValueError(f"safe count must not be negative, got {count}")
    available = sorted(ALL_TILES - set(fallen))
    if count > len(available):
        raise ValueError(
            f"cannot keep {count} tiles safe: only {len(available)} of {TILE_COUNT} are standing"
        )
    return set(rng.sample(available, count))


def board_view(fallen: AbstractSet[int], current: Optional[int]) -> List[TileState]:
    """Return the 25 tile records in id order."""
    return [
        TileState(id=i, is_fallen=i in fallen, has_player=i == current)
        for i in range(TILE_COUNT)
    ]
