class Chip8Error(Exception):
    """base class for every failure raised by the interpreter core"""


class RomTooLargeError(Chip8Error, ValueError):
    def __init__(self, size, limit):
        super().__init__(f"ROM is {size} bytes long but only {limit} bytes are available")
        self.size = size
        self.limit = limit


class AddressError(Chip8Error, IndexError):
    def __init__(self, address):
        super().__init__(f"Memory address 0x{address:04x} is out of range")
        self.address = address


class StackOverflowError(Chip8Error, IndexError):
    pass


class StackUnderflowError(Chip8Error, IndexError):
    pass


class UnknownOpcodeError(Chip8Error, NotImplementedError):
    def __init__(self, opcode):
        super().__init__(f"The opcode 0x{opcode:04x} is not a CHIP-8 instruction")
        self.opcode = opcode


class InvalidKeyError(Chip8Error, IndexError):
    def __init__(self, key):
        super().__init__(f"Key index {key} is out of range, the keypad has keys 0x0-0xF")
        self.key = key


class InvalidRegisterError(Chip8Error, IndexError):
    def __init__(self, register):
        super().__init__(f"Register index {register} is out of range, registers are V0-VF")
        self.register = register
