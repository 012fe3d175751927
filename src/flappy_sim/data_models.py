"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from .constants import DEFAULT_ACTOR_WIDTH, DEFAULT_ACTOR_HEIGHT
from .geometry import Rect


class Phase(Enum):
    """Lifecycle of a single game."""
    IDLE = "idle"
    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass
class ActorState:
    """The bird. Its x is derived from the play width, so only y is stored."""
    y: float = 0.0
    velocity: float = 0.0
    width: float = DEFAULT_ACTOR_WIDTH
    height: float = DEFAULT_ACTOR_HEIGHT
    measured: bool = False

    def rect(self, x: float) -> Rect:
        return Rect(x, self.y, self.width, self.height)


@dataclass
class ObstaclePair:
    """A top and bottom pipe sharing one gap, scored as a unit."""
    id: int
    x: float
    width: float
    height: float
    gap_top: float
    gap_bottom: float
    passed: bool = False

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top_rect(self) -> Rect:
        return Rect(self.x, self.gap_top - self.height, self.width, self.height)

    @property
    def bottom_rect(self) -> Rect:
        return Rect(self.x, self.gap_bottom, self.width, self.height)


@dataclass
class SimulationState:
    """
    The authoritative world model owned by the controller.

    Obstacles are kept in spawn order, which is also their left-to-right
    order on screen. Score only ever grows between resets.
    """
    actor: ActorState = field(default_factory=ActorState)
    obstacles: List[ObstaclePair] = field(default_factory=list)
    score: int = 0
    phase: Phase = Phase.IDLE
    time_since_last_spawn: float = 0.0
    play_width: float = 0.0
    play_height: float = 0.0

    @property
    def running(self) -> bool:
        return self.phase is Phase.RUNNING

    @property
    def has_layout(self) -> bool:
        return self.play_width > 0 and self.play_height > 0

    def center_actor(self):
        """Places the actor at the vertical centre of the play area."""
        self.actor.y = self.play_height / 2 - self.actor.height / 2

    def reset(self):
        """Clears the world for a new game. Phase is left to the controller."""
        self.obstacles.clear()
        self.score = 0
        self.time_since_last_spawn = 0.0
        self.center_actor()
        self.actor.velocity = 0.0
