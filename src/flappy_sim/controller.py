"""
controller.py: The game state machine that drives one simulation.

Each tick runs spawn check, actor physics and the obstacle pass in that order,
then reports the changes to the observer. Commands that do not apply to the
current phase are ignored.
"""

import itertools
import logging
from typing import Callable, Optional, Tuple

from .clock import SimulationClock
from .config import GameConfig, DEFAULT_CONFIG
from .data_models import Phase, SimulationState
from .events import GameObserver
from .geometry import Rect
from .physics_core import PhysicsCore
from .spawn_policy import SpawnPolicy

logger = logging.getLogger(__name__)

MeasureActor = Callable[[], Optional[Tuple[float, float]]]


class GameController:
    """
    Owns the SimulationState and the clock, and is the only thing that mutates
    either. Hosts push layout and input in; the observer gets state out.
    """

    def __init__(self, config: Optional[GameConfig] = None,
                 observer: Optional[GameObserver] = None,
                 random: Optional[Callable[[], float]] = None,
                 clock: Optional[SimulationClock] = None,
                 measure_actor: Optional[MeasureActor] = None):
        self.config = config or DEFAULT_CONFIG
        self.observer = observer or GameObserver()
        self.measure_actor = measure_actor

        self.state = SimulationState()
        self.physics = PhysicsCore(self.config)
        self.spawner = SpawnPolicy(self.config, random)

        self.clock = clock or SimulationClock(self.config.tick_interval_ms)
        self.clock.bind(self._on_clock_tick)

        self._obstacle_ids = itertools.count(1)
        self._pending_start = False

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #
    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def pending_start(self) -> bool:
        return self._pending_start

    @property
    def actor_x(self) -> float:
        return self.config.actor_x_fraction * self.state.play_width

    @property
    def actor_rect(self) -> Rect:
        return self.state.actor.rect(self.actor_x)

    # ------------------------------------------------------------------ #
    # Host commands
    # ------------------------------------------------------------------ #
    def on_resize(self, width: float, height: float):
        """Accepts a new play-area size and replays a deferred start."""
        if width <= 0 or height <= 0:
            logger.debug("Ignoring non-positive play area %sx%s.", width, height)
            return

        self.state.play_width = width
        self.state.play_height = height
        logger.debug("Play area is now %sx%s.", width, height)

        self._measure_actor()

        if self.state.phase is Phase.IDLE and self.state.actor.y == 0:
            self.state.center_actor()
        self.observer.actor_moved(self.actor_rect)

        if self._pending_start:
            self._pending_start = False
            logger.info("Layout available, running deferred start.")
            self.start()

    def request_start(self):
        """
        Starts a new game from IDLE or GAME_OVER.
        Without a known play area the request is remembered and replayed by
        the next valid on_resize().
        """
        if self.state.phase is Phase.RUNNING:
            logger.debug("Start ignored: game already running.")
            return

        if not self.state.has_layout:
            self._pending_start = True
            logger.info("Start deferred until the play area is known.")
            return

        self._measure_actor()

        for pair in self.state.obstacles:
            self.observer.obstacle_removed(pair.id)
        self.state.reset()
        self.spawner.reset(self.state)

        self.state.phase = Phase.RUNNING
        self.observer.score_changed(self.state.score)
        self.observer.actor_moved(self.actor_rect)
        self.clock.start()

        logger.info("Game started on a %sx%s play area.",
                    self.state.play_width, self.state.play_height)
        self.observer.game_started()

    start = request_start

    def jump(self):
        if not self.state.running:
            return
        self.state.actor.velocity = self.physics.jump()

    # ------------------------------------------------------------------ #
    # Simulation
    # ------------------------------------------------------------------ #
    def _on_clock_tick(self, tick_number: int):
        self.tick()

    def tick(self):
        """Advances the world by one nominal interval."""
        if not self.state.running:
            return
        state = self.state

        # 1. Spawn check
        if self.spawner.advance(state, self.clock.interval_ms):
            pair = self.spawner.build_pair(state, next(self._obstacle_ids))
            if pair is not None:
                state.obstacles.append(pair)
                self.observer.obstacle_spawned(pair.id, pair.top_rect, pair.bottom_rect)

        # 2. Actor physics; the floor is lethal
        hit_floor = self.physics.step_actor(state.actor, state.play_height)
        self.observer.actor_moved(self.actor_rect)
        if hit_floor:
            self.game_over()
            return

        # 3. Obstacles: move, score, collide, cull
        if self.physics.step_obstacles(state, self.actor_x, self.observer):
            self.game_over()

    def game_over(self):
        """Stops the clock and freezes the state. Repeated calls do nothing."""
        if not self.state.running:
            return
        self.state.phase = Phase.GAME_OVER
        self.clock.stop()
        logger.info("Game over with score %d.", self.state.score)
        self.observer.game_over()

    def _measure_actor(self):
        actor = self.state.actor
        if actor.measured:
            return

        size = self.measure_actor() if self.measure_actor is not None else None
        width, height = size if size is not None else (0, 0)

        actor.width = width if width > 0 else self.config.default_actor_width
        actor.height = height if height > 0 else self.config.default_actor_height
        actor.measured = True
        logger.debug("Actor measured as %sx%s.", actor.width, actor.height)
