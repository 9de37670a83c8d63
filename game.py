import logging
import random
from typing import Optional

import pygame

from controls import InputCollector
from render import draw_frame
from settings import ASPECT_RATIO, CAPTION, DEFAULT_HEIGHT, DEFAULT_WIDTH, FPS
from simulation import GameStatus, Simulation
from sound import SoundEffects

logger = logging.getLogger(__name__)

START_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)
QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)


def fit_window(max_width: int, max_height: int) -> tuple:
    """Largest 4:3 window that fits in 80% of the display."""
    target_width = int(max_width * 0.8)
    target_height = int(target_width / ASPECT_RATIO)
    if target_height > max_height * 0.8:
        target_height = int(max_height * 0.8)
        target_width = int(target_height * ASPECT_RATIO)
    return target_width, target_height


class Game:
    def __init__(self, width: Optional[int] = None, height: Optional[int] = None,
                 fps: int = FPS, seed: Optional[int] = None, mute: bool = False) -> None:
        pygame.init()
        if mute:
            pygame.mixer.quit()

        if width is None or height is None:
            info = pygame.display.Info()
            if info.current_w > 0 and info.current_h > 0:
                width, height = fit_window(info.current_w, info.current_h)
            else:
                width, height = DEFAULT_WIDTH, DEFAULT_HEIGHT

        self.fps = fps
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption(CAPTION)
        logger.info("Window opened at %dx%d, %d FPS", width, height, fps)

        self.clock = pygame.time.Clock()
        self.simulation = Simulation(width, height, random.Random(seed))
        self.input = InputCollector()
        self.sound_effects = SoundEffects(enabled=not mute)
        self.running = False

    def start_or_restart(self) -> None:
        self.sound_effects.resume()
        self.input.reset()
        self.simulation.start_or_restart()

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.stop()
        elif event.type == pygame.VIDEORESIZE:
            self.screen = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
            self.simulation.resize(event.w, event.h)
        elif event.type == pygame.KEYDOWN and event.key in QUIT_KEYS:
            self.stop()
        elif (event.type == pygame.KEYDOWN and event.key in START_KEYS
              and self.simulation.session.status is not GameStatus.PLAYING):
            self.start_or_restart()
        else:
            self.input.handle_event(event)

    def step(self) -> None:
        """Advance one frame: simulate, play cues, draw."""
        events = self.simulation.advance(self.input.controls())
        self.sound_effects.handle_events(events)
        draw_frame(self.screen, self.simulation.snapshot())
        pygame.display.flip()

    def stop(self) -> None:
        self.running = False
        self.simulation.cancel_respawn()
        self.sound_effects.stop_all()

    def run(self) -> None:
        self.running = True
        try:
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                if not self.running:
                    break
                self.step()
                self.clock.tick(self.fps)
        finally:
            pygame.quit()
