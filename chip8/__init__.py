from .cpu import Chip8
from .errors import (
    Chip8Error,
    RomTooLargeError,
    AddressError,
    StackOverflowError,
    StackUnderflowError,
    UnknownOpcodeError,
    InvalidKeyError,
    InvalidRegisterError,
)
from .config import SCREEN_WIDTH, SCREEN_HEIGHT

__all__ = [
    "Chip8",
    "Chip8Error",
    "RomTooLargeError",
    "AddressError",
    "StackOverflowError",
    "StackUnderflowError",
    "UnknownOpcodeError",
    "InvalidKeyError",
    "InvalidRegisterError",
    "SCREEN_WIDTH",
    "SCREEN_HEIGHT",
]
