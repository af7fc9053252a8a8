import logging

logger = logging.getLogger(__name__)


class Timers:
    def __init__(self):
        self.delay = 0      # delay timer, active when non-zero
        self.sound = 0      # sound timer, the buzzer sounds while non-zero

    @property
    def sound_active(self):
        return self.sound > 0

    def tick(self):
        """decrement both timers by one, never going below zero"""
        if self.delay > 0:
            self.delay -= 1
        if self.sound > 0:
            self.sound -= 1
            if self.sound == 0:
                logger.debug("Sound timer expired")
