W, H = 360, 540
FPS = 60

BG = (52, 128, 64)
TURF_STRIPE = (58, 138, 70)
WHITE = (235, 235, 235)
NET = (244, 246, 235)
POST = (221, 221, 221)
GRAY = (130, 130, 130)
YELLOW = (253, 222, 58)
METER = (255, 211, 23)
METER_EDGE = (5, 105, 81)
KEEPER_KIT = (23, 74, 152)
KEEPER_SKIN = (253, 232, 144)
KEEPER_ARM = (253, 211, 125)
BALL_PATCH = (68, 68, 68)

# Scoring aperture: x, y, width, height
GOAL = (50, 80, 260, 28)
POST_W = 8

KICK_SPOT = (W / 2, 480)
BALL_R = 18

KEEPER_Y_OFFSET = 8
KEEPER_W = 45
KEEPER_H = 18
KEEPER_SPAN = 0.7
KEEPER_SPEED = (1.2, 2.2)
KEEPER_DIVE_LEFT_P = 0.4
KEEPER_DIVE_CENTER_P = 0.5  # of the remaining 0.6
KEEPER_LOOKAHEAD = 15
KEEPER_EASE = 0.058
KEEPER_DEADZONE = 5

AIM_CAPTURE_MARGIN = 15
AIM_MIN_DIST = 35
AIM_MAX_DIST = 160
POWER_DIV = 26
GAIN_X = 1.31
GAIN_Y = 1.29

DECAY = 0.992
STALL_SPEED = 0.2
EXIT_MARGIN = 20

BLOCK_MARGIN_X = 8
BLOCK_MARGIN_Y = 16

RESTART_DELAY_MS = 600

PROMPT = "Drag & Release"
