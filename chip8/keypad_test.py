import unittest

from chip8.errors import InvalidKeyError
from chip8.keypad import Keypad


class TestKeypad(unittest.TestCase):
    def setUp(self):
        self.keypad = Keypad()

    def test_latches(self):
        self.assertIsNone(self.keypad.first_pressed())
        self.keypad[0xA] = True
        self.assertTrue(self.keypad[0xA])
        self.assertFalse(self.keypad[0xB])
        self.keypad[0xA] = False
        self.assertFalse(self.keypad[0xA])

    def test_first_pressed_in_index_order(self):
        self.assertIsNone(self.keypad.first_pressed())
        self.keypad[0xC] = True
        self.keypad[0x3] = True
        self.assertEqual(self.keypad.first_pressed(), 0x3)
        # reading is not consuming
        self.assertEqual(self.keypad.first_pressed(), 0x3)

    def test_release_all(self):
        self.keypad[1] = True
        self.keypad[2] = True
        self.keypad.release_all()
        self.assertIsNone(self.keypad.first_pressed())

    def test_out_of_range(self):
        with self.assertRaises(InvalidKeyError):
            self.keypad[16] = True
        with self.assertRaises(InvalidKeyError):
            self.keypad[-1]


if __name__ == "__main__":
    unittest.main()
