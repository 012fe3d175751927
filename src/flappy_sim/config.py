"""
config.py: Injectable game tuning, defaulting to the values in constants.py.
"""

from dataclasses import dataclass, replace as dataclass_replace

from .constants import (
    TICK_INTERVAL_MS, PIPE_SPAWN_INTERVAL_MS, GRAVITY, JUMP_STRENGTH,
    ACTOR_X_FRACTION, DEFAULT_ACTOR_WIDTH, DEFAULT_ACTOR_HEIGHT,
    PIPE_SPEED, PIPE_GAP, PIPE_MIN_WIDTH, PIPE_WIDTH_FRACTION,
    GAP_CENTER_MIN_FRACTION, GAP_CENTER_MAX_FRACTION, PIPE_REMOVAL_MARGIN
)


@dataclass(frozen=True)
class GameConfig:
    """
    Tunable constants for one controller.
    The core trusts these values; sane numbers are the host's responsibility.
    """
    tick_interval_ms: float = TICK_INTERVAL_MS
    pipe_spawn_interval_ms: float = PIPE_SPAWN_INTERVAL_MS
    gravity: float = GRAVITY
    jump_strength: float = JUMP_STRENGTH
    actor_x_fraction: float = ACTOR_X_FRACTION
    default_actor_width: float = DEFAULT_ACTOR_WIDTH
    default_actor_height: float = DEFAULT_ACTOR_HEIGHT
    pipe_speed: float = PIPE_SPEED
    pipe_gap: float = PIPE_GAP
    pipe_min_width: float = PIPE_MIN_WIDTH
    pipe_width_fraction: float = PIPE_WIDTH_FRACTION
    gap_center_min_fraction: float = GAP_CENTER_MIN_FRACTION
    gap_center_max_fraction: float = GAP_CENTER_MAX_FRACTION
    pipe_removal_margin: float = PIPE_REMOVAL_MARGIN

    def replace(self, **changes) -> "GameConfig":
        """Returns a copy with the given fields changed."""
        return dataclass_replace(self, **changes)


DEFAULT_CONFIG = GameConfig()
