import unittest

from chip8.config import MAX_ROM_SIZE, MEMORY_SIZE
from chip8.errors import AddressError, Chip8Error, RomTooLargeError
from chip8.memory import C8_FONTS, Memory


class TestMemory(unittest.TestCase):
    def setUp(self):
        self.mem = Memory()

    def test_fonts_preloaded(self):
        self.assertEqual(len(C8_FONTS), 80)
        self.assertEqual([self.mem[i] for i in range(80)], C8_FONTS)
        self.assertEqual(self.mem[80], 0)

    def test_load_at_origin(self):
        self.mem.load(b"\x60\x12\x70\x03")
        self.assertEqual(self.mem.fetch_instruction(0x200), 0x6012)
        self.assertEqual(self.mem.fetch_instruction(0x202), 0x7003)
        self.assertEqual(self.mem[0x1FF], 0)

    def test_load_exactly_full(self):
        rom = bytes([0xAB]) * MAX_ROM_SIZE
        self.mem.load(rom)
        self.assertEqual(self.mem[MEMORY_SIZE - 1], 0xAB)
        self.assertEqual(self.mem[0], C8_FONTS[0])

    def test_load_oversized_rejected_untouched(self):
        with self.assertRaises(RomTooLargeError) as ctx:
            self.mem.load(bytes([0xAB]) * (MAX_ROM_SIZE + 1))
        self.assertIsInstance(ctx.exception, Chip8Error)
        self.assertEqual(ctx.exception.size, MAX_ROM_SIZE + 1)
        self.assertEqual(self.mem[0x200], 0)

    def test_byte_access(self):
        self.mem.write_byte(0x300, 0x1FF)
        self.assertEqual(self.mem.fetch_byte(0x300), 0xFF)
        self.mem[0x301] = 7
        self.assertEqual(self.mem[0x301], 7)

    def test_check_range(self):
        self.mem.check_range(MEMORY_SIZE - 3, 3)
        self.mem.check_range(MEMORY_SIZE, 0)
        with self.assertRaises(AddressError) as ctx:
            self.mem.check_range(MEMORY_SIZE - 2, 3)
        self.assertEqual(ctx.exception.address, MEMORY_SIZE)

    def test_out_of_range(self):
        with self.assertRaises(AddressError):
            self.mem.fetch_byte(MEMORY_SIZE)
        with self.assertRaises(AddressError):
            self.mem.write_byte(-1, 0)
        with self.assertRaises(AddressError):
            self.mem.fetch_instruction(MEMORY_SIZE - 1)


if __name__ == "__main__":
    unittest.main()
