"""
decoding of CHIP-8 instruction words

every instruction is 2 bytes long and is split into four nibbles, the first one selects the
opcode family and, depending on the family, the last nibble or the last byte select the operation
    x   = second nibble, index of a variable register
    y   = third nibble, index of a variable register
    n   = fourth nibble
    nn  = lowest byte
    nnn = lowest 12 bits, a memory address
"""
from collections import namedtuple

from .errors import UnknownOpcodeError


# WATCH OUT: masks order is important!!!
# the loop in decode stops at the first mask yielding a known pattern so the most specific comes first
MASKS = {
    0xFFFF: {
        0x0000: "NOP",
        0x00E0: "CLS",
        0x00EE: "RET",
    },
    0xF0FF: {
        0xE09E: "SKP",
        0xE0A1: "SKNP",
        0xF007: "LD_DT_READ",
        0xF00A: "LD_K",
        0xF015: "LD_DT",
        0xF018: "LD_ST",
        0xF01E: "ADD_I",
        0xF029: "LD_F",
        0xF033: "LD_B",
        0xF055: "LD_STORE",
        0xF065: "LD_LOAD",
    },
    0xF00F: {
        0x5000: "SE_REG",
        0x8000: "LD_REG",
        0x8001: "OR",
        0x8002: "AND",
        0x8003: "XOR",
        0x8004: "ADD_REG",
        0x8005: "SUB",
        0x8006: "SHR",
        0x8007: "SUBN",
        0x800E: "SHL",
        0x9000: "SNE_REG",
    },
    0xF000: {
        0x1000: "JP",
        0x2000: "CALL",
        0x3000: "SE",
        0x4000: "SNE",
        0x6000: "LD",
        0x7000: "ADD",
        0xA000: "LD_I",
        0xB000: "JP_V0",
        0xC000: "RND",
        0xD000: "DRW",
    },
}

ASM = {
    "NOP": "NOP",
    "CLS": "CLS",
    "RET": "RET",
    "JP": "JP 0x{nnn:03x}",
    "CALL": "CALL 0x{nnn:03x}",
    "SE": "SE V{x:X}, 0x{nn:02x}",
    "SNE": "SNE V{x:X}, 0x{nn:02x}",
    "SE_REG": "SE V{x:X}, V{y:X}",
    "LD": "LD V{x:X}, 0x{nn:02x}",
    "ADD": "ADD V{x:X}, 0x{nn:02x}",
    "LD_REG": "LD V{x:X}, V{y:X}",
    "OR": "OR V{x:X}, V{y:X}",
    "AND": "AND V{x:X}, V{y:X}",
    "XOR": "XOR V{x:X}, V{y:X}",
    "ADD_REG": "ADD V{x:X}, V{y:X}",
    "SUB": "SUB V{x:X}, V{y:X}",
    "SHR": "SHR V{x:X}",
    "SUBN": "SUBN V{x:X}, V{y:X}",
    "SHL": "SHL V{x:X}",
    "SNE_REG": "SNE V{x:X}, V{y:X}",
    "LD_I": "LD I, 0x{nnn:03x}",
    "JP_V0": "JP V0, 0x{nnn:03x}",
    "RND": "RND V{x:X}, 0x{nn:02x}",
    "DRW": "DRW V{x:X}, V{y:X}, {n}",
    "SKP": "SKP V{x:X}",
    "SKNP": "SKNP V{x:X}",
    "LD_DT_READ": "LD V{x:X}, DT",
    "LD_K": "LD V{x:X}, K",
    "LD_DT": "LD DT, V{x:X}",
    "LD_ST": "LD ST, V{x:X}",
    "ADD_I": "ADD I, V{x:X}",
    "LD_F": "LD F, V{x:X}",
    "LD_B": "LD B, V{x:X}",
    "LD_STORE": "LD [I], V{x:X}",
    "LD_LOAD": "LD V{x:X}, [I]",
}


class Instruction(namedtuple("Instruction", ["mnemonic", "opcode", "x", "y", "n", "nn", "nnn"])):
    __slots__ = ()

    def __str__(self):
        return ASM[self.mnemonic].format(**self._asdict())


def decode(opcode):
    """split the opcode into its fields and tag it with the mnemonic of its family"""
    for mask, patterns in MASKS.items():
        mnemonic = patterns.get(opcode & mask)
        if mnemonic is not None:
            return Instruction(
                mnemonic=mnemonic,
                opcode=opcode,
                x=(opcode & 0x0F00) >> 8,
                y=(opcode & 0x00F0) >> 4,
                n=opcode & 0x000F,
                nn=opcode & 0x00FF,
                nnn=opcode & 0x0FFF,
            )
    raise UnknownOpcodeError(opcode)
