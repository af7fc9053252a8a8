from .config import SCREEN_WIDTH, SCREEN_HEIGHT


class Framebuffer:
    """64x32 monochrome pixel grid stored row-major, True means the pixel is ON"""

    def __init__(self, w=SCREEN_WIDTH, h=SCREEN_HEIGHT):
        self.w, self.h = w, h
        self.buffer = [False] * h * w

    def clear(self):
        self.buffer = [False] * self.h * self.w

    def flip(self, x, y):
        """
        toggle the pixel at (x, y), coordinates wrap around both axes
        return True if the pixel was ON and has been turned OFF (collision)
        """
        i = (y % self.h) * self.w + (x % self.w)
        was_on = self.buffer[i]
        self.buffer[i] = not was_on
        return was_on

    @property
    def pixels(self):
        return tuple(self.buffer)
