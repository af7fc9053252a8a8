import logging

from .config import MEMORY_SIZE, ROM_START_ADDRESS, MAX_ROM_SIZE
from .errors import AddressError, RomTooLargeError

logger = logging.getLogger(__name__)


C8_FONTS = [0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
            0x20, 0x60, 0x20, 0x20, 0x70,  # 1
            0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
            0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
            0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
            0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
            0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
            0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
            0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
            0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
            0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
            0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
            0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
            0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
            0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
            0xF0, 0x80, 0xF0, 0x80, 0x80]  # F


# ********** WRAPS A BYTEARRAY TO REPRESENT THE MAIN MEMORY WITH A LIMITED SIZE OF 4KB
class Memory:
    def __init__(self):
        self.inner = bytearray(MEMORY_SIZE)
        self.inner[0x00:0x00+len(C8_FONTS)] = bytes(C8_FONTS)

    def __len__(self):
        return len(self.inner)

    def __getitem__(self, index):
        return self.fetch_byte(index)

    def __setitem__(self, key, value):
        self.write_byte(key, value)

    def _check(self, address):
        if not 0 <= address < MEMORY_SIZE:
            raise AddressError(address)

    def check_range(self, address, length):
        """make sure the whole block address..address+length-1 is addressable"""
        if length > 0:
            self._check(address)
            self._check(address + length - 1)

    def fetch_byte(self, address):
        self._check(address)
        return self.inner[address]

    def write_byte(self, address, value):
        self._check(address)
        self.inner[address] = value & 0xFF

    def fetch_instruction(self, address):
        """combine the bytes at address and address+1 into a big-endian 16 bit word"""
        self._check(address)
        self._check(address + 1)
        return self.inner[address] << 8 | self.inner[address + 1]

    def load(self, rom):
        """
        copy the ROM bytes into memory starting at 0x200
        a ROM that does not fit is rejected as a whole, nothing gets written
        """
        if len(rom) > MAX_ROM_SIZE:
            raise RomTooLargeError(len(rom), MAX_ROM_SIZE)
        self.inner[ROM_START_ADDRESS:ROM_START_ADDRESS+len(rom)] = bytes(rom)
        logger.debug("Loaded %d bytes at 0x%04x", len(rom), ROM_START_ADDRESS)
