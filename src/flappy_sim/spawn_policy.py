"""
spawn_policy.py: Decides when a new pipe pair appears and where its gap sits.
"""

import logging
import random as random_module
from typing import Callable, Optional

from .config import GameConfig, DEFAULT_CONFIG
from .data_models import ObstaclePair, SimulationState

logger = logging.getLogger(__name__)


class SpawnPolicy:
    """
    Time-based pipe spawner.
    The accumulator lives on SimulationState so a reset clears it with the rest
    of the world.
    """

    def __init__(self, config: GameConfig = DEFAULT_CONFIG,
                 random: Optional[Callable[[], float]] = None):
        self.config = config
        # Uniform source in [0, 1); injectable for deterministic gaps
        self.random = random or random_module.random

    def reset(self, state: SimulationState):
        state.time_since_last_spawn = 0.0

    def advance(self, state: SimulationState, elapsed_ms: float) -> bool:
        """
        Accumulates elapsed time and reports whether a spawn is due this tick.
        At most one spawn per call; overshoot is discarded.
        """
        state.time_since_last_spawn += elapsed_ms
        if state.time_since_last_spawn >= self.config.pipe_spawn_interval_ms:
            state.time_since_last_spawn = 0.0
            return True
        return False

    def build_pair(self, state: SimulationState, obstacle_id: int) -> Optional[ObstaclePair]:
        """Creates a pair just off the right edge, or None without a play area."""
        if not state.has_layout:
            return None

        cfg = self.config
        width = max(cfg.pipe_min_width, state.play_width * cfg.pipe_width_fraction)
        height = state.play_height

        min_gap_y = state.play_height * cfg.gap_center_min_fraction
        max_gap_y = state.play_height * cfg.gap_center_max_fraction
        gap_center = self.random() * (max_gap_y - min_gap_y) + min_gap_y

        pair = ObstaclePair(
            id=obstacle_id,
            x=state.play_width + width,
            width=width,
            height=height,
            gap_top=gap_center - cfg.pipe_gap / 2,
            gap_bottom=gap_center + cfg.pipe_gap / 2,
        )
        logger.debug("Spawned pipe %d with gap [%.1f, %.1f]",
                     pair.id, pair.gap_top, pair.gap_bottom)
        return pair
