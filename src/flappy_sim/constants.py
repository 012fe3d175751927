"""
constants.py: Centralized default tuning for the simulation and the pygame host.
"""

# -------- Timing --------
TICK_INTERVAL_MS = 16             # Nominal tick length (~60 Hz)
PIPE_SPAWN_INTERVAL_MS = 1500     # Spawn accumulator threshold

# -------- Physics Config (layout units / tick) --------
GRAVITY = 0.25                    # Added to velocity every tick
JUMP_STRENGTH = -7.0              # Velocity assigned on jump (negative is up)

# -------- Actor Config --------
ACTOR_X_FRACTION = 0.3            # Fixed horizontal position as a fraction of play width
DEFAULT_ACTOR_WIDTH = 34          # Fallback when the host cannot measure the actor
DEFAULT_ACTOR_HEIGHT = 24

# -------- Pipe Config --------
PIPE_SPEED = 2.25                 # Horizontal movement per tick
PIPE_GAP = 140                    # Vertical opening between top and bottom pipe
PIPE_MIN_WIDTH = 48
PIPE_WIDTH_FRACTION = 0.12        # Pipe width as a fraction of play width
GAP_CENTER_MIN_FRACTION = 0.18    # Gap centre range, as fractions of play height
GAP_CENTER_MAX_FRACTION = 0.72
PIPE_REMOVAL_MARGIN = 10          # Removed once right edge < -margin

# -------- Host Window --------
SCREEN_WIDTH = 400
SCREEN_HEIGHT = 600
