
"""pygame-backed tick scheduler for the engine"""
from typing import Callable, Optional
import pygame


class PygameTickTimer:
    """Posts a timer event every interval_ms; handle() turns it into a tick.

    Ticks arrive through the pygame event queue, so they run in the same
    loop as key presses and never overlap an operation in progress.
    """
    def __init__(self, event_type: Optional[int] = None):
        self.event_type = event_type if event_type is not None else pygame.event.custom_type()
        self.interval_ms = 0
        self._callback: Optional[Callable[[], None]] = None

    @property
    def running(self) -> bool:
        return self._callback is not None

    def start(self, callback: Callable[[], None], interval_ms: int):
        if interval_ms <= 0:
            raise ValueError(f"interval must be positive, got {interval_ms}")
        self._callback = callback
        self.interval_ms = interval_ms
        pygame.time.set_timer(self.event_type, interval_ms)

    def stop(self):
        pygame.time.set_timer(self.event_type, 0)
        self._callback = None
        self.interval_ms = 0

    def handle(self, event) -> bool:
        if event.type != self.event_type or self._callback is None:
            return False
        self._callback()
        return True
