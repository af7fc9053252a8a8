import argparse
import logging
import sys
from pathlib import Path

import os
os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "no welcome message"   # this env var disable pygame's welcome message when imported
import pygame
from pygame.locals import (
    K_1, K_2, K_3, K_4,
    K_q, K_w, K_e, K_r,
    K_a, K_s, K_d, K_f,
    K_z, K_x, K_c, K_v,
)

from .config import (
    DEBUG, SCREEN_WIDTH, SCREEN_HEIGHT, SCALE,
    BACKGROUND, FOREGROUND, TICKS_PER_FRAME, FPS,
)
from .cpu import Chip8
from .errors import Chip8Error

logger = logging.getLogger(__name__)


# COSMAC VIP keypad layout laid over the left side of a QWERTY keyboard
#   1 2 3 C        1 2 3 4
#   4 5 6 D   <->  Q W E R
#   7 8 9 E        A S D F
#   A 0 B F        Z X C V
KEY_MAPPINGS = {
    K_1: 0x1, K_2: 0x2, K_3: 0x3, K_4: 0xC,
    K_q: 0x4, K_w: 0x5, K_e: 0x6, K_r: 0xD,
    K_a: 0x7, K_s: 0x8, K_d: 0x9, K_f: 0xE,
    K_z: 0xA, K_x: 0x0, K_c: 0xB, K_v: 0xF,
}


# ******************** UTILITIES SECTION
def load_rom(path):
    """read the ROM file from the user specified path, raise an exception if it can't be read"""
    rom = Path(path).read_bytes()
    logger.debug("The ROM at path %s has been read (%d bytes)", path, len(rom))
    return rom

def get_args(argv=None):
    parser = argparse.ArgumentParser(prog="chip8", description="CHIP-8 interpreter")
    parser.add_argument("-f", "--file", required=True, help="input rom file")
    parser.add_argument("--ticks-per-frame", type=int, default=TICKS_PER_FRAME,
                        help="instructions executed for each rendered frame")
    parser.add_argument("--fps", type=int, default=FPS, help="frames (and timer decrements) per second")
    parser.add_argument("--scale", type=int, default=SCALE, help="size in pixels of a CHIP-8 pixel")
    return parser.parse_args(argv)


# ******************** I/O SECTION
class Screen:
    def __init__(self, w=SCREEN_WIDTH, h=SCREEN_HEIGHT, s=SCALE, bg_color=BACKGROUND, fg_color=FOREGROUND):
        self.w, self.h, self.scale = w, h, s
        self.background = pygame.Color(*bg_color)
        self.foreground = pygame.Color(*fg_color)
        self.surface = pygame.display.set_mode((w * self.scale, h * self.scale))
        self.surface.fill(self.background)

    def render(self, pixels):
        """draw a row-major snapshot of the framebuffer and show it"""
        self.surface.fill(self.background)
        for i, on in enumerate(pixels):
            if on:
                x, y = i % self.w, i // self.w
                pygame.draw.rect(
                    self.surface,
                    self.foreground,
                    (x * self.scale, y * self.scale, self.scale, self.scale)
                )
        pygame.display.flip()


def handle_events(chip):
    """forward key events to the interpreter, return False when the user asked to quit"""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            if event.key in KEY_MAPPINGS:
                chip.keypress(KEY_MAPPINGS[event.key], True)
        elif event.type == pygame.KEYUP:
            if event.key in KEY_MAPPINGS:
                chip.keypress(KEY_MAPPINGS[event.key], False)
        elif event.type == pygame.WINDOWFOCUSLOST:
            chip.keypad.release_all()
    return True

def run_frame(chip, ticks_per_frame):
    """one host frame: run a batch of instructions then decrement the timers once"""
    for _ in range(ticks_per_frame):
        chip.tick()
    chip.tick_timers()

def emulate(chip, screen, clock, ticks_per_frame, fps):
    """emulation loop, stops before running another frame as soon as the user quits"""
    while handle_events(chip):
        run_frame(chip, ticks_per_frame)
        screen.render(chip.display)
        clock.tick(fps)


# ******************** ENTRY POINT SECTION
def main(argv=None):
    logging.basicConfig(
        level=logging.DEBUG if DEBUG else logging.INFO,
        format="[%(levelname)s] %(name)s: %(message)s",
    )
    args = get_args(argv)
    chip = Chip8()
    try:
        chip.load(load_rom(args.file))
    except (OSError, Chip8Error) as e:
        sys.exit(f"Unable to load {args.file}: {e}")

    # pygame initialization
    pygame.init()
    pygame.display.set_caption(Path(args.file).name)
    clock = pygame.time.Clock()
    screen = Screen(s=args.scale)
    try:
        emulate(chip, screen, clock, args.ticks_per_frame, args.fps)
    except Chip8Error as e:
        logger.error("%s", e)
        sys.exit(f"********** THE EMULATOR CRASHED WITH THE FOLLOWING STATE\n{chip}")
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
