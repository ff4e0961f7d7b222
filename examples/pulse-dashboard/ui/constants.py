"""Layout constants and color definitions."""

# Timing
FPS = 60
TPS = 1

# Layout dimensions
SCREEN_W = 640
SCREEN_H = 420
CLOCK_H = 180
SIDEBAR_W = 220
STATUS_H = 36
NOTICE_ROWS = 6

# Credits bought per top-up
CREDIT_PACK = 10
START_CREDITS = 15

# Colors
BG_COLOR = (20, 20, 30)
SIDEBAR_BG = (25, 25, 38)
STATUS_BG = (35, 35, 50)
BORDER = (50, 50, 70)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
LABEL_COLOR = (180, 180, 200)

CLOCK_IDLE = (200, 200, 210)
CLOCK_WARN = (255, 190, 40)
PULSE_NORMAL = (60, 220, 80)
PULSE_RARE = (220, 80, 220)
PULSE_CAPTURED = (0, 220, 220)

# Notice level → color
LEVEL_COLORS: dict[str, tuple[int, int, int]] = {
    "info": (120, 160, 255),
    "success": (60, 220, 80),
    "warning": (255, 190, 40),
    "error": (240, 80, 80),
}
