"""
Hard-coded colours, native geometry & fonts so every module can import them
without circular dependencies.
"""
from pathlib import Path

# -------- colours (RGB) --------
GREEN      = (0, 180, 0)
BACKGROUND = (30, 30, 30)
STATUS_BG  = (15, 15, 15)
TRAIL_BASE = 200                        # green channel of the newest trail line
TRAIL_FADE = 5                          # per age step
BLIP_BASE  = 255                        # red channel of the newest blip
BLIP_FADE  = 7                          # per age step

# -------- native layout --------
WIDTH, HEIGHT = 240, 140                # five 20px rings + padding & status bar
SIZE   = (WIDTH, HEIGHT)
SCALE  = 3                              # presentation-only upscale factor
DISPLAY_SIZE = (WIDTH * SCALE, HEIGHT * SCALE)
ORIGIN = (WIDTH // 2, HEIGHT - 20)      # bottom-centre of the drawing area

RING_COUNT, RING_STEP, RING_UNITS = 5, 20, 10
GUIDE_STEP, GUIDE_LEN = 30, 104
TRAIL_LEN = 100
DOT_R     = 3

STATUS_TOP     = HEIGHT - 20
DEGREE_POS     = (5, HEIGHT - 5)        # text baselines
DISTANCE_POS   = (WIDTH // 2 - 20, HEIGHT - 5)
DEGREE_VAL_DX, DISTANCE_VAL_DX = 55, 65

CAPTION = "Radar"

# -------- fonts (built by the renderer) --------
FONT_NAME  = "monospace"
FONT_SIZE, SMALL_FONT_SIZE = 11, 8

# -------- dirs --------
ROOT      = Path(__file__).resolve().parent.parent
CFG_PATH  = ROOT / "radar_config.json"
