# scheduler.py
"""Repeating tick timers that the controller can cancel and re-arm."""
from typing import Callable, Optional
import logging

import pygame  # type: ignore

logger = logging.getLogger(__name__)

# Custom pygame event posted once per tick; carries `generation`.
TICK_EVENT = pygame.USEREVENT + 1


class TickScheduler:
    """
    At most one repeating schedule is outstanding. `arm` replaces whatever
    was scheduled before; `cancel` stops it. Every tick reports the
    generation it was armed with so the receiver can drop stale ones.
    """

    def arm(self, interval_ms: int, generation: int) -> None:
        raise NotImplementedError

    def cancel(self) -> None:
        raise NotImplementedError


class PygameTickScheduler(TickScheduler):
    """Drives ticks through pygame.time.set_timer; the event loop forwards them."""

    def __init__(self, event_type: int = TICK_EVENT):
        self.event_type = event_type

    def arm(self, interval_ms: int, generation: int) -> None:
        event = pygame.event.Event(self.event_type, generation=generation)
        # set_timer on an event type already in use replaces the old timer
        pygame.time.set_timer(event, interval_ms)
        logger.debug("Tick timer armed: every %dms (generation %d)", interval_ms, generation)

    def cancel(self) -> None:
        pygame.time.set_timer(self.event_type, 0)
        logger.debug("Tick timer cancelled")


class ManualTickScheduler(TickScheduler):
    """
    Scheduler that never fires by itself. Call `fire()` to deliver one tick
    to `callback`. Useful for tests and headless play.
    """

    def __init__(self, callback: Optional[Callable[[int], None]] = None):
        self.callback = callback
        self.interval_ms: Optional[int] = None
        self.generation: Optional[int] = None
        self.arm_count = 0

    @property
    def armed(self) -> bool:
        return self.interval_ms is not None

    def arm(self, interval_ms: int, generation: int) -> None:
        self.interval_ms = interval_ms
        self.generation = generation
        self.arm_count += 1

    def cancel(self) -> None:
        self.interval_ms = None
        self.generation = None

    def fire(self) -> bool:
        """Deliver one tick if armed. Returns whether a tick was delivered."""
        if not self.armed or self.callback is None:
            return False
        self.callback(self.generation)
        return True
