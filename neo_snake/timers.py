"""Tick timers owned by a game session."""

import logging

import pygame

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1


class ManualTimer:
    """Timer that only records whether it is armed; ticks are driven by hand."""

    def __init__(self):
        self.running = False
        self.interval_ms = None

    def start(self, interval_ms):
        self.running = True
        self.interval_ms = interval_ms

    def stop(self):
        self.running = False


class PygameTimer(ManualTimer):
    """Posts TICK_EVENT onto the pygame event queue every interval_ms."""

    def start(self, interval_ms):
        if self.running and self.interval_ms == interval_ms:
            return
        pygame.time.set_timer(TICK_EVENT, interval_ms)
        logger.debug("tick timer armed at %d ms", interval_ms)
        super().start(interval_ms)

    def stop(self):
        if not self.running:
            return
        pygame.time.set_timer(TICK_EVENT, 0)
        logger.debug("tick timer stopped")
        super().stop()
