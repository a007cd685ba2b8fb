"""
constants.py: Reference tuning for the game, taken from the original watch app.
All distances are in pixels, all velocities in pixels per tick.
"""

# -------- Timing --------
TICK_INTERVAL_MS = 16           # ~60 Hz reference cadence
RENDER_FPS = 60

# -------- Field --------
FIELD_WIDTH = 300.0
FIELD_HEIGHT = 300.0
GROUND_HEIGHT = 30              # Drawn only, not part of the collision bounds

# -------- Actor --------
ACTOR_SIZE = 30.0
ACTOR_X_FRACTION = 1 / 3        # Fixed horizontal center as a share of field width

# -------- Physics (per tick) --------
GRAVITY = 0.5
JUMP_VELOCITY = -10.0           # Absolute velocity set on a tap

# -------- Obstacles --------
OBSTACLE_WIDTH = 60.0
GAP_HEIGHT = 150.0
MIN_MARGIN = 50.0               # Minimum distance between a gap and the field edge
SCROLL_SPEED = 2.0
SPAWN_THRESHOLD = 200.0         # Spawn once the last obstacle is left of width - threshold
SPAWN_AHEAD_OFFSET = 50.0       # New obstacles appear at width + offset
INITIAL_OFFSETS = (100.0, 300.0)
