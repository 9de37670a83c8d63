from dataclasses import dataclass

import pygame


@dataclass(frozen=True)
class Controls:
    left: bool = False
    right: bool = False
    thrust: bool = False
    fire: bool = False


KEY_BINDINGS = {
    pygame.K_LEFT: "left",
    pygame.K_a: "left",
    pygame.K_RIGHT: "right",
    pygame.K_d: "right",
    pygame.K_UP: "thrust",
    pygame.K_w: "thrust",
    pygame.K_SPACE: "fire",
}


class InputCollector:
    """Tracks which controls are held, fed by KEYDOWN/KEYUP events.

    The state is overwritten by every event and sampled once per tick, so a
    key pressed and released between two ticks is never seen.
    """

    def __init__(self) -> None:
        self.held = {name: False for name in set(KEY_BINDINGS.values())}

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Update held controls; returns True when the event was a bound key."""
        if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
            return False
        name = KEY_BINDINGS.get(event.key)
        if name is None:
            return False
        self.held[name] = event.type == pygame.KEYDOWN
        return True

    def reset(self) -> None:
        for name in self.held:
            self.held[name] = False

    def controls(self) -> Controls:
        return Controls(**self.held)
