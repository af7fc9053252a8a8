from .config import NUM_KEYS
from .errors import InvalidKeyError


class Keypad:
    """16 key latches, set and cleared by the host"""

    def __init__(self):
        self.keys = [False] * NUM_KEYS

    def _check(self, key):
        if not 0 <= key < NUM_KEYS:
            raise InvalidKeyError(key)

    def __getitem__(self, key):
        self._check(key)
        return self.keys[key]

    def __setitem__(self, key, pressed):
        self._check(key)
        self.keys[key] = bool(pressed)

    def __repr__(self):
        return f"Keypad(pressed={[hex(k) for k, p in enumerate(self.keys) if p]})"

    def first_pressed(self):
        """get the lowest index among the pressed keys, None if no key is down"""
        for key, pressed in enumerate(self.keys):
            if pressed:
                return key
        return None

    def release_all(self):
        self.keys = [False] * NUM_KEYS
