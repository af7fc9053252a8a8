import logging
import random

from .config import ROM_START_ADDRESS, FONT_GLYPH_SIZE
from .framebuffer import Framebuffer
from .keypad import Keypad
from .memory import Memory
from .opcodes import decode
from .registers import Registers
from .stack import Stack
from .timers import Timers

logger = logging.getLogger(__name__)


class Chip8:
    """
    the CHIP-8 interpreter, owner of the whole machine state

    the host loads a program, then calls tick() a few times per rendered frame,
    tick_timers() once per frame (60Hz), forwards key events through keypress()
    and renders the display snapshot
    """

    def __init__(self, rng=None):
        self.mem = Memory()
        self.stack = Stack()
        self.v_regs = Registers()
        self.screen = Framebuffer()
        self.keypad = Keypad()
        self.timers = Timers()
        self.pc = ROM_START_ADDRESS
        self.idx = 0    # specify where the sprites reside in memory
        self.rng = rng if rng is not None else random.Random()
        self.instructions = {
            "NOP": self._no_operation,
            "CLS": self._clear_screen,
            "RET": self._return,
            "JP": self._jump,
            "CALL": self._call_addr,
            "SE": self._skip_if_eq,
            "SNE": self._skip_if_not_eq,
            "SE_REG": self._skip_if_eq_regs,
            "LD": self._set_vx,
            "ADD": self._add_to_vx,
            "LD_REG": self._set_vx_to_vy,
            "OR": self._set_vx_or_vy,
            "AND": self._set_vx_and_vy,
            "XOR": self._set_vx_xor_vy,
            "ADD_REG": self._add_vx_vy,
            "SUB": self._sub_vx_vy,
            "SHR": self._shr,
            "SUBN": self._subn_vx_vy,
            "SHL": self._shl,
            "SNE_REG": self._skip_if_not_eq_regs,
            "LD_I": self._set_idx,
            "JP_V0": self._jump_plus,
            "RND": self._random_byte_and,
            "DRW": self._draw_sprite,
            "SKP": self._skip_if_pressed,
            "SKNP": self._skip_if_not_pressed,
            "LD_DT_READ": self._set_vx_dt,
            "LD_K": self._wait_keypress,
            "LD_DT": self._set_dt_vx,
            "LD_ST": self._set_st_vx,
            "ADD_I": self._add_to_idx,
            "LD_F": self._select_char,
            "LD_B": self._bcd_repr,
            "LD_STORE": self._store_vregs,
            "LD_LOAD": self._load_vregs,
        }

    def __str__(self):
        registers = f"PC_REGISTER:0x{self.pc:04x} | IDX_REGISTER:0x{self.idx:04x} | VARIABLE_REGISTERS:{self.v_regs}"
        stack = f"STACK:{self.stack}"
        timers = f"DT:{self.timers.delay} | ST:{self.timers.sound}"
        return f"{registers}\n{stack}\n{timers}\nKEYPAD:{self.keypad}"

    # ******************** HOST ENTRY POINTS
    def load(self, rom):
        """install the program at 0x200, must be called before the first tick"""
        self.mem.load(rom)

    def tick(self):
        """emulate one machine cycle: fetch, decode and execute a single instruction"""
        mem_addr = self.pc
        # fetch (each instruction is two bytes long)
        opcode = self.mem.fetch_instruction(self.pc)
        self._goto_next_instruction()
        # decode + execute
        instruction = decode(opcode)
        logger.debug("0x%04x    %s", mem_addr, instruction)
        self.instructions[instruction.mnemonic](instruction)

    def tick_timers(self):
        self.timers.tick()

    def keypress(self, index, pressed):
        self.keypad[index] = pressed
        logger.debug("Key 0x%x %s", index, "pressed" if pressed else "released")

    @property
    def display(self):
        """row-major snapshot of the 64x32 framebuffer"""
        return self.screen.pixels

    @property
    def sound_active(self):
        return self.timers.sound_active

    # ******************** INSTRUCTIONS
    def _goto_next_instruction(self):
        self.pc += 0x2

    def _no_operation(self, ins):
        pass

    def _clear_screen(self, ins):
        self.screen.clear()

    def _return(self, ins):
        """return from a subroutine"""
        self.pc = self.stack.pop()

    def _jump(self, ins):
        self.pc = ins.nnn

    def _call_addr(self, ins):
        self.stack.push(self.pc)
        self.pc = ins.nnn

    def _skip_if_eq(self, ins):
        if self.v_regs[ins.x] == ins.nn:
            self._goto_next_instruction()

    def _skip_if_not_eq(self, ins):
        if self.v_regs[ins.x] != ins.nn:
            self._goto_next_instruction()

    def _skip_if_eq_regs(self, ins):
        if self.v_regs[ins.x] == self.v_regs[ins.y]:
            self._goto_next_instruction()

    def _skip_if_not_eq_regs(self, ins):
        if self.v_regs[ins.x] != self.v_regs[ins.y]:
            self._goto_next_instruction()

    def _set_vx(self, ins):
        """set the value of one of the 16 variable registers, Vx"""
        self.v_regs[ins.x] = ins.nn

    def _add_to_vx(self, ins):
        """add to the value already present in Vx, the carry flag is not touched"""
        self.v_regs[ins.x] = (self.v_regs[ins.x] + ins.nn) & 0xFF

    def _set_vx_to_vy(self, ins):
        self.v_regs[ins.x] = self.v_regs[ins.y]

    def _set_vx_or_vy(self, ins):
        self.v_regs[ins.x] = self.v_regs[ins.x] | self.v_regs[ins.y]

    def _set_vx_and_vy(self, ins):
        self.v_regs[ins.x] = self.v_regs[ins.x] & self.v_regs[ins.y]

    def _set_vx_xor_vy(self, ins):
        self.v_regs[ins.x] = self.v_regs[ins.x] ^ self.v_regs[ins.y]

    # the arithmetic instructions below store the result before the flag,
    # when Vx is VF the flag is what survives
    def _add_vx_vy(self, ins):
        """set Vx = Vx + Vy, VF = carry"""
        total = self.v_regs[ins.x] + self.v_regs[ins.y]
        self.v_regs[ins.x] = total & 0xFF
        self.v_regs[0xF] = 1 if total > 0xFF else 0

    def _sub_vx_vy(self, ins):
        """set Vx = Vx - Vy, VF = NOT borrow"""
        vx, vy = self.v_regs[ins.x], self.v_regs[ins.y]
        self.v_regs[ins.x] = (vx - vy) & 0xFF
        self.v_regs[0xF] = 1 if vx >= vy else 0

    def _subn_vx_vy(self, ins):
        """set Vx = Vy - Vx, VF = NOT borrow"""
        vx, vy = self.v_regs[ins.x], self.v_regs[ins.y]
        self.v_regs[ins.x] = (vy - vx) & 0xFF
        self.v_regs[0xF] = 1 if vy >= vx else 0

    def _shr(self, ins):
        """set Vx = Vx SHR 1, VF = bit shifted out"""
        lsb = self.v_regs[ins.x] & 0x1
        self.v_regs[ins.x] = self.v_regs[ins.x] >> 1
        self.v_regs[0xF] = lsb

    def _shl(self, ins):
        """set Vx = Vx SHL 1, VF = bit shifted out"""
        msb = (self.v_regs[ins.x] & 0x80) >> 7
        self.v_regs[ins.x] = (self.v_regs[ins.x] << 1) & 0xFF
        self.v_regs[0xF] = msb

    def _set_idx(self, ins):
        self.idx = ins.nnn

    def _jump_plus(self, ins):
        self.pc = ins.nnn + self.v_regs[0x0]

    def _random_byte_and(self, ins):
        self.v_regs[ins.x] = self.rng.randint(0, 255) & ins.nn

    def _draw_sprite(self, ins):
        """display n-byte sprite starting at memory location I at (Vx, Vy), set VF = collision"""
        self.mem.check_range(self.idx, ins.n)
        x, y = self.v_regs[ins.x], self.v_regs[ins.y]
        self.v_regs[0xF] = 0
        collision = False
        for row in range(ins.n):
            sprite_byte = self.mem.fetch_byte(self.idx + row)
            for col in range(8):
                # most significant bit first
                if (sprite_byte >> (7 - col)) & 0x1:
                    # sprites are XORed onto the screen, wrapping around both axes
                    collision |= self.screen.flip(x + col, y + row)
        if collision:
            self.v_regs[0xF] = 1

    def _skip_if_pressed(self, ins):
        """skip the following instruction if the key corresponding to the hex value stored in Vx is pressed"""
        if self.keypad[self.v_regs[ins.x]]:
            self._goto_next_instruction()

    def _skip_if_not_pressed(self, ins):
        """skip the following instruction if the key corresponding to the hex value stored in Vx is NOT pressed"""
        if not self.keypad[self.v_regs[ins.x]]:
            self._goto_next_instruction()

    def _set_vx_dt(self, ins):
        self.v_regs[ins.x] = self.timers.delay

    def _wait_keypress(self, ins):
        """wait for a key press and store its value in Vx"""
        key = self.keypad.first_pressed()
        if key is None:
            self.pc -= 0x2      # stay on the same instruction until a key is pressed
        else:
            self.v_regs[ins.x] = key

    def _set_dt_vx(self, ins):
        self.timers.delay = self.v_regs[ins.x]

    def _set_st_vx(self, ins):
        self.timers.sound = self.v_regs[ins.x]

    def _add_to_idx(self, ins):
        self.idx = (self.idx + self.v_regs[ins.x]) & 0xFFFF

    def _select_char(self, ins):
        """set I to location of sprite for digit Vx"""
        self.idx = self.v_regs[ins.x] * FONT_GLYPH_SIZE

    def _bcd_repr(self, ins):
        """store the hundreds digit of Vx at I, the tens digit at I+1, the ones digit at I+2"""
        self.mem.check_range(self.idx, 3)
        value = self.v_regs[ins.x]
        self.mem.write_byte(self.idx, value // 100)
        self.mem.write_byte(self.idx + 1, (value // 10) % 10)
        self.mem.write_byte(self.idx + 2, value % 10)

    def _store_vregs(self, ins):
        """store registers V0 through Vx (included) in memory starting at location I"""
        self.mem.check_range(self.idx, ins.x + 1)
        for i in range(ins.x + 1):
            self.mem.write_byte(self.idx + i, self.v_regs[i])

    def _load_vregs(self, ins):
        """read registers V0 through Vx (included) from memory starting at location I"""
        self.mem.check_range(self.idx, ins.x + 1)
        for i in range(ins.x + 1):
            self.v_regs[i] = self.mem.fetch_byte(self.idx + i)
