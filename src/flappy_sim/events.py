"""
events.py: The outbound notification channel from the simulation to its host.
"""

from typing import Iterable, List

from .geometry import Rect


class GameObserver:
    """
    Receives state changes for rendering.
    Every hook is a no-op; hosts override the ones they care about.
    """

    def actor_moved(self, rect: Rect):
        pass

    def obstacle_spawned(self, obstacle_id: int, top_rect: Rect, bottom_rect: Rect):
        pass

    def obstacle_moved(self, obstacle_id: int, top_rect: Rect, bottom_rect: Rect):
        pass

    def obstacle_removed(self, obstacle_id: int):
        pass

    def score_changed(self, score: int):
        pass

    def game_over(self):
        pass

    def game_started(self):
        pass


class ObserverGroup(GameObserver):
    """Forwards each notification to several observers, in registration order."""

    def __init__(self, observers: Iterable[GameObserver] = ()):
        self.observers: List[GameObserver] = list(observers)

    def add(self, observer: GameObserver):
        self.observers.append(observer)

    def remove(self, observer: GameObserver):
        self.observers.remove(observer)

    def actor_moved(self, rect):
        for observer in self.observers:
            observer.actor_moved(rect)

    def obstacle_spawned(self, obstacle_id, top_rect, bottom_rect):
        for observer in self.observers:
            observer.obstacle_spawned(obstacle_id, top_rect, bottom_rect)

    def obstacle_moved(self, obstacle_id, top_rect, bottom_rect):
        for observer in self.observers:
            observer.obstacle_moved(obstacle_id, top_rect, bottom_rect)

    def obstacle_removed(self, obstacle_id):
        for observer in self.observers:
            observer.obstacle_removed(obstacle_id)

    def score_changed(self, score):
        for observer in self.observers:
            observer.score_changed(score)

    def game_over(self):
        for observer in self.observers:
            observer.game_over()

    def game_started(self):
        for observer in self.observers:
            observer.game_started()
