"""
flappy_sim: A fixed-tick side-scrolling arcade simulation with an observer-driven host API.
"""

from .clock import SimulationClock, ThreadedClock
from .config import GameConfig, DEFAULT_CONFIG
from .controller import GameController
from .data_models import ActorState, ObstaclePair, Phase, SimulationState
from .events import GameObserver, ObserverGroup
from .geometry import Rect, intersects
from .physics_core import PhysicsCore
from .spawn_policy import SpawnPolicy

__all__ = [
    "ActorState", "DEFAULT_CONFIG", "GameConfig", "GameController", "GameObserver",
    "ObserverGroup", "ObstaclePair", "Phase", "PhysicsCore", "Rect",
    "SimulationClock", "SimulationState", "SpawnPolicy", "ThreadedClock",
    "intersects",
]
