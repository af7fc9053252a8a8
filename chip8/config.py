import os


# ******************** MACHINE
MEMORY_SIZE = 4096
ROM_START_ADDRESS = 0x200
MAX_ROM_SIZE = MEMORY_SIZE - ROM_START_ADDRESS
STACK_SIZE = 16
NUM_REGISTERS = 16
NUM_KEYS = 16
FONT_GLYPH_SIZE = 5     # bytes per built-in hex digit sprite

# ******************** DISPLAY
SCREEN_HEIGHT = 32
SCREEN_WIDTH = 64
SCALE = 15
BACKGROUND = (80, 69, 155)
FOREGROUND = (136, 126, 203)

# ******************** HOST LOOP
TICKS_PER_FRAME = 10    # instructions executed per rendered frame
FPS = 60                # frames per second, also the timers decrement rate

DEBUG = True if int(os.getenv('DEBUG', 0)) >= 1 else False
