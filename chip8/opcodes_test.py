import unittest

from chip8.errors import UnknownOpcodeError
from chip8.opcodes import decode


class TestDecode(unittest.TestCase):
    def test_fields(self):
        ins = decode(0xD12F)
        self.assertEqual(ins.mnemonic, "DRW")
        self.assertEqual((ins.x, ins.y, ins.n, ins.nn, ins.nnn), (0x1, 0x2, 0xF, 0x2F, 0x12F))

    def test_families(self):
        cases = {
            0x0000: "NOP",
            0x00E0: "CLS",
            0x00EE: "RET",
            0x1234: "JP",
            0x2345: "CALL",
            0x3A12: "SE",
            0x4A12: "SNE",
            0x5AB0: "SE_REG",
            0x6A12: "LD",
            0x7A12: "ADD",
            0x8AB0: "LD_REG",
            0x8AB1: "OR",
            0x8AB2: "AND",
            0x8AB3: "XOR",
            0x8AB4: "ADD_REG",
            0x8AB5: "SUB",
            0x8AB6: "SHR",
            0x8AB7: "SUBN",
            0x8ABE: "SHL",
            0x9AB0: "SNE_REG",
            0xA123: "LD_I",
            0xB123: "JP_V0",
            0xCA12: "RND",
            0xDAB5: "DRW",
            0xEA9E: "SKP",
            0xEAA1: "SKNP",
            0xFA07: "LD_DT_READ",
            0xFA0A: "LD_K",
            0xFA15: "LD_DT",
            0xFA18: "LD_ST",
            0xFA1E: "ADD_I",
            0xFA29: "LD_F",
            0xFA33: "LD_B",
            0xFA55: "LD_STORE",
            0xFA65: "LD_LOAD",
        }
        for opcode, mnemonic in cases.items():
            with self.subTest(opcode=hex(opcode)):
                self.assertEqual(decode(opcode).mnemonic, mnemonic)

    def test_unknown(self):
        for opcode in (0x0123, 0x00E1, 0x5AB1, 0x8AB8, 0x9AB1, 0xEA00, 0xFA00, 0xFFFF):
            with self.subTest(opcode=hex(opcode)):
                with self.assertRaises(UnknownOpcodeError) as ctx:
                    decode(opcode)
                self.assertEqual(ctx.exception.opcode, opcode)

    def test_asm(self):
        self.assertEqual(str(decode(0x6012)), "LD V0, 0x12")
        self.assertEqual(str(decode(0xDAB5)), "DRW VA, VB, 5")
        self.assertEqual(str(decode(0x2300)), "CALL 0x300")


if __name__ == "__main__":
    unittest.main()
