#!/usr/bin/env python3
"""
flappy_client.py

pygame host for the simulation: renders observer notifications and feeds
input, resize events and clock ticks to a GameController.
"""

import logging
from typing import Dict, Optional, Tuple

import pygame

from .config import GameConfig
from .constants import SCREEN_WIDTH, SCREEN_HEIGHT
from .controller import GameController
from .data_models import Phase
from .events import GameObserver
from .geometry import Rect
from .logging_config import setup_logging

logger = logging.getLogger(__name__)

SKY_COLOR = (0, 191, 255)
PIPE_COLOR = (0, 150, 0)
BIRD_COLOR = (255, 215, 0)
WHITE = (255, 255, 255)
RED = (255, 50, 50)


# ----------------- Renderer (observer) -----------------

class PygameRenderer(GameObserver):
    """Keeps the latest notified rectangles and draws them on demand."""

    def __init__(self, actor_sprite: Optional[pygame.Surface] = None):
        self.actor_sprite = actor_sprite
        self.actor: Optional[Rect] = None
        self.obstacles: Dict[int, Tuple[Rect, Rect]] = {}
        self.score = 0
        self.show_play_prompt = True
        self.show_game_over = False
        self._large_font: Optional[pygame.font.Font] = None
        self._font: Optional[pygame.font.Font] = None

    def measure_actor(self) -> Optional[Tuple[float, float]]:
        if self.actor_sprite is None:
            return None
        return self.actor_sprite.get_size()

    # --- GameObserver ---
    def actor_moved(self, rect):
        self.actor = rect

    def obstacle_spawned(self, obstacle_id, top_rect, bottom_rect):
        self.obstacles[obstacle_id] = (top_rect, bottom_rect)

    def obstacle_moved(self, obstacle_id, top_rect, bottom_rect):
        self.obstacles[obstacle_id] = (top_rect, bottom_rect)

    def obstacle_removed(self, obstacle_id):
        self.obstacles.pop(obstacle_id, None)

    def score_changed(self, score):
        self.score = score

    def game_over(self):
        self.show_game_over = True

    def game_started(self):
        self.show_play_prompt = False
        self.show_game_over = False

    # --- Drawing ---
    def _fonts(self):
        if self._font is None:
            pygame.font.init()
            self._large_font = pygame.font.Font(None, 40)
            self._font = pygame.font.Font(None, 24)
        return self._large_font, self._font

    def draw(self, surface: pygame.Surface):
        surface.fill(SKY_COLOR)
        width, height = surface.get_size()

        for top_rect, bottom_rect in self.obstacles.values():
            pygame.draw.rect(surface, PIPE_COLOR, top_rect.as_tuple())
            pygame.draw.rect(surface, PIPE_COLOR, bottom_rect.as_tuple())

        if self.actor is not None:
            if self.actor_sprite is not None:
                surface.blit(self.actor_sprite, (self.actor.x, self.actor.y))
            else:
                pygame.draw.ellipse(surface, BIRD_COLOR, self.actor.as_tuple())

        large_font, font = self._fonts()

        score_text = large_font.render(str(self.score), True, WHITE)
        surface.blit(score_text, (width // 2 - score_text.get_width() // 2, 20))

        if self.show_game_over:
            over = large_font.render("Game Over", True, RED)
            surface.blit(over, (width // 2 - over.get_width() // 2, height // 2 - 40))
            retry = font.render("Space / Click = Retry", True, WHITE)
            surface.blit(retry, (width // 2 - retry.get_width() // 2, height // 2))
        elif self.show_play_prompt:
            play = font.render("Space / Click = Play", True, WHITE)
            surface.blit(play, (width // 2 - play.get_width() // 2, height // 2))


# ----------------- Game Client (window / input / frame loop) -----------------

class FlappyClient:
    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT,
                 config: Optional[GameConfig] = None,
                 actor_sprite: Optional[pygame.Surface] = None):
        pygame.init()
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption("Flappy Sim")

        self.renderer = PygameRenderer(actor_sprite)
        self.controller = GameController(
            config=config,
            observer=self.renderer,
            measure_actor=self.renderer.measure_actor,
        )
        self.frame_clock = pygame.time.Clock()
        self.tick_rate = int(round(1000 / self.controller.clock.interval_ms))

        self.controller.on_resize(*self.screen.get_size())

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Routes one pygame event. Returns False when the window should close."""
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            return False

        if event.type == pygame.VIDEORESIZE:
            self.controller.on_resize(event.w, event.h)
        elif (event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE) \
                or event.type == pygame.MOUSEBUTTONDOWN:
            self._on_tap()
        return True

    def _on_tap(self):
        if self.controller.phase is Phase.RUNNING:
            self.controller.jump()
        else:
            self.controller.start()

    def step(self):
        """One frame: a single simulation tick, then render."""
        self.controller.clock.fire()
        self.renderer.draw(self.screen)

    def run(self):
        """The main client execution loop."""
        running = True
        while running:
            self.frame_clock.tick(self.tick_rate)

            for event in pygame.event.get():
                if not self.handle_event(event):
                    running = False

            self.step()
            pygame.display.flip()

        self.controller.clock.stop()
        pygame.quit()


def main():
    setup_logging()
    logger.info("Starting pygame host.")
    FlappyClient().run()


if __name__ == "__main__":
    main()
