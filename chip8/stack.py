from .config import STACK_SIZE
from .errors import StackOverflowError, StackUnderflowError


# ********** WRAPS A LIST TO REPRESENT A STACK WITH A LIMITED SIZE OF 16 ADDRESSES
class Stack:
    def __init__(self):
        self.addr_list = [0] * STACK_SIZE
        self.size = 0   # next free slot

    def __len__(self):
        return self.size

    def __repr__(self):
        return f"Stack({[hex(a) for a in self.addr_list[:self.size]]})"

    def push(self, address):
        if self.size >= STACK_SIZE:
            raise StackOverflowError(f"The CHIP-8 stack can contain at most {STACK_SIZE} addresses. Limit exceeded")
        self.addr_list[self.size] = address & 0xFFFF
        self.size += 1

    def pop(self):
        if self.size == 0:
            raise StackUnderflowError("Tried to return from a subroutine while the stack is empty")
        self.size -= 1
        return self.addr_list[self.size]
