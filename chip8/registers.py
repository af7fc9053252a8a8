from .config import NUM_REGISTERS
from .errors import InvalidRegisterError


class Registers:
    """the 16 general purpose 8 bit registers V0-VF, VF doubles as the flag register"""

    def __init__(self):
        self.inner = [0] * NUM_REGISTERS

    def _check(self, register):
        if not 0 <= register < NUM_REGISTERS:
            raise InvalidRegisterError(register)

    def __len__(self):
        return NUM_REGISTERS

    def __iter__(self):
        return iter(self.inner)

    def __repr__(self):
        return repr(self.inner)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self.inner[index]
        self._check(index)
        return self.inner[index]

    def __setitem__(self, index, value):
        self._check(index)
        self.inner[index] = value & 0xFF
