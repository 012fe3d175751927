"""
physics_core.py: The deterministic per-tick kinematics, collision and scoring logic.
"""

from .config import GameConfig, DEFAULT_CONFIG
from .data_models import ActorState, SimulationState
from .events import GameObserver


class PhysicsCore:
    """
    Shared deterministic physics used by the controller.
    All quantities are per tick; there is no wall-clock dependence.
    """

    def __init__(self, config: GameConfig = DEFAULT_CONFIG):
        self.config = config

    def apply_gravity_and_movement(self, y: float, velocity: float) -> tuple[float, float]:
        """Calculates new position and velocity after one tick."""
        velocity += self.config.gravity
        y += velocity
        return y, velocity

    def jump(self) -> float:
        """Returns the velocity assigned by a jump."""
        return self.config.jump_strength

    def step_actor(self, actor: ActorState, play_height: float) -> bool:
        """
        Integrates the actor for one tick and clamps it to the play area.
        Returns True when the actor hit the floor.
        """
        actor.y, actor.velocity = self.apply_gravity_and_movement(actor.y, actor.velocity)

        floor = play_height - actor.height
        if actor.y < 0:
            # Ceiling stops without bouncing
            actor.y = 0.0
            actor.velocity = 0.0
        elif actor.y > floor:
            actor.y = floor
            return True
        return False

    def step_obstacles(self, state: SimulationState, actor_x: float,
                       observer: GameObserver) -> bool:
        """
        Moves, scores and culls every obstacle for one tick.
        Iterates newest to oldest so removal is safe in place.
        Returns True on collision; remaining obstacles are left untouched.
        """
        cfg = self.config
        obstacles = state.obstacles

        for i in range(len(obstacles) - 1, -1, -1):
            pair = obstacles[i]

            # 1. Move (derived rects follow x)
            pair.x -= cfg.pipe_speed
            observer.obstacle_moved(pair.id, pair.top_rect, pair.bottom_rect)

            # 2. Score once the trailing edge is behind the actor
            if not pair.passed and pair.right < actor_x:
                pair.passed = True
                state.score += 1
                observer.score_changed(state.score)

            # 3. Collision ends the tick; the score above is kept
            actor_rect = state.actor.rect(actor_x)
            if actor_rect.intersects(pair.top_rect) or actor_rect.intersects(pair.bottom_rect):
                return True

            # 4. Cull once fully off-screen
            if pair.right < -cfg.pipe_removal_margin:
                del obstacles[i]
                observer.obstacle_removed(pair.id)

        return False
