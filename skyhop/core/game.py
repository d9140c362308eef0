"""Game controller: run state, safe-tile draws and level transitions.

The controller never touches Qt. It talks to a :class:`Display` and is driven
by three inputs (tile click, Play, Restart). Animations are requested from the
display together with a completion callback; the controller only resolves a
level once that callback fires.
"""

from __future__ import annotations

import enum
import logging
import random
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Protocol, Set

from skyhop.core.board import ALL_TILES, TileState, board_view, draw_safe_tiles
from skyhop.core.levels import LevelRepository

logger = logging.getLogger(__name__)

MAX_FALL_DELAY_MS = 500
PLAYER_FALL_DELAY_MS = 200
SETTLE_MS = 1000
LEVEL_ADVANCE_PAUSE_MS = 1500

MSG_PICK = "Level {level}: Pick a safe cloud!"
MSG_PICK_AGAIN = "Level {level}: Pick a new cloud or click yours to stay!"
MSG_READY = "Press Play to see if you're safe!"
MSG_SAFE = "Safe! Moving to next level..."
MSG_WON = "You Won! Clouds Conquered! 🎉"
MSG_FELL = "Oops! You fell! ☁️💀"


class RunState(enum.Enum):
    IN_PROGRESS = "in_progress"
    ENDED = "ended"


@dataclass
class GameState:
    level: int = 1
    current_tile: Optional[int] = None
    safe_tiles: Set[int] = field(default_factory=set)
    fallen_tiles: Set[int] = field(default_factory=set)
    is_over: bool = False
    awaiting_selection: bool = False


@dataclass(frozen=True)
class FallPlan:
    """Which clouds fall after a commit, and when."""

    tile_delays_ms: Dict[int, int]
    player_falls: bool
    player_delay_ms: int = PLAYER_FALL_DELAY_MS
    settle_ms: int = SETTLE_MS

    @property
    def tile_ids(self) -> List[int]:
        return sorted(self.tile_delays_ms)

    @property
    def total_ms(self) -> int:
        """Time until the last falling cloud has finished."""
        longest = max(self.tile_delays_ms.values(), default=0)
        if self.player_falls:
            longest = max(longest, self.player_delay_ms)
        return longest + self.settle_ms


class Display(Protocol):
    def render_board(self, tiles: List[TileState]) -> None: ...

    def show_message(self, text: str) -> None: ...

    def show_level(self, level: int) -> None: ...

    def set_commit_enabled(self, enabled: bool) -> None: ...

    def set_run_state(self, state: RunState) -> None: ...

    def animate_fall(self, plan: FallPlan, on_finished: Callable[[], None]) -> None: ...

    def hop(self) -> None: ...

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> None: ...


class GameController:
    """Owns one :class:`GameState` and drives a :class:`Display` through a run."""

    def __init__(
        self,
        display: Display,
        levels: LevelRepository,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._display = display
        self._levels = levels
        self._rng = rng or random.Random()
        self._state = GameState()
        # Bumped on every new run so callbacks from an older run are dropped.
        self._generation = 0

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def final_level(self) -> int:
        return self._levels.final_level

    def start_run(self) -> None:
        """Reset everything to the start of level 1."""
        self._generation += 1
        self._state = GameState()
        self._state.safe_tiles = self._draw_safe_tiles()
        self._state.awaiting_selection = True
        logger.info("New run started (%d safe clouds)", len(self._state.safe_tiles))

        self._display.set_run_state(RunState.IN_PROGRESS)
        self._display.show_level(self._state.level)
        self._render()
        self._display.set_commit_enabled(False)
        self._display.show_message(MSG_PICK.format(level=self._state.level))

    restart = start_run

    def select_tile(self, tile_id: int) -> None:
        state = self._state
        if not state.awaiting_selection or state.is_over:
            logger.debug("Ignoring click on tile %s: not accepting a selection", tile_id)
            return
        if tile_id not in ALL_TILES:
            logger.debug("Ignoring click on unknown tile %s", tile_id)
            return
        if tile_id in state.fallen_tiles:
            logger.debug("Ignoring click on fallen tile %s", tile_id)
            return

        state.current_tile = tile_id
        self._render()
        self._display.hop()
        self._display.set_commit_enabled(True)
        self._display.show_message(MSG_READY)

    def commit(self) -> None:
        state = self._state
        if state.is_over or state.current_tile is None or not state.awaiting_selection:
            logger.debug("Ignoring Play: nothing to commit")
            return

        state.awaiting_selection = False
        self._display.set_commit_enabled(False)

        newly_fallen = ALL_TILES - state.safe_tiles - state.fallen_tiles
        state.fallen_tiles |= newly_fallen
        survived = state.current_tile in state.safe_tiles
        logger.debug(
            "Level %d: %d clouds fall, player on %d %s",
            state.level,
            len(newly_fallen),
            state.current_tile,
            "survives" if survived else "falls",
        )

        plan = self._plan_fall(newly_fallen, player_falls=not survived)
        generation = self._generation
        resolved = False

        def on_finished() -> None:
            nonlocal resolved
            if resolved or generation != self._generation:
                return
            resolved = True
            self.on_outcome(survived)

        self._display.animate_fall(plan, on_finished)

    def on_outcome(self, survived: bool) -> None:
        state = self._state
        if not survived:
            state.is_over = True
            logger.info("Player fell on level %d", state.level)
            self._display.show_message(MSG_FELL)
            self._display.set_run_state(RunState.ENDED)
            return

        if state.level >= self.final_level:
            state.is_over = True
            logger.info("Player conquered all %d levels", state.level)
            self._display.show_message(MSG_WON)
            self._display.hop()
            self._display.set_run_state(RunState.ENDED)
            return

        self._display.show_message(MSG_SAFE)
        self._display.hop()
        generation = self._generation

        def advance() -> None:
            if generation == self._generation:
                self._advance_level()

        self._display.schedule(LEVEL_ADVANCE_PAUSE_MS, advance)

    def _advance_level(self) -> None:
        state = self._state
        state.level += 1
        state.safe_tiles = self._draw_safe_tiles()
        state.awaiting_selection = True
        logger.info(
            "Advanced to level %d (%d safe of %d standing)",
            state.level,
            len(state.safe_tiles),
            len(ALL_TILES) - len(state.fallen_tiles),
        )

        self._display.show_level(state.level)
        self._render()
        # The player must click a cloud, even their own, before Play again.
        self._display.set_commit_enabled(False)
        self._display.show_message(MSG_PICK_AGAIN.format(level=state.level))

    def _draw_safe_tiles(self) -> Set[int]:
        count = self._levels.safe_count(self._state.level)
        safe = draw_safe_tiles(self._rng, count, self._state.fallen_tiles)
        logger.debug("Level %d safe clouds: %s", self._state.level, sorted(safe))
        return safe

    def _plan_fall(self, tiles: Set[int], player_falls: bool) -> FallPlan:
        delays = {tile: int(self._rng.random() * MAX_FALL_DELAY_MS) for tile in sorted(tiles)}
        return FallPlan(tile_delays_ms=delays, player_falls=player_falls)

    def _render(self) -> None:
        self._display.render_board(board_view(self._state.fallen_tiles, self._state.current_tile))
