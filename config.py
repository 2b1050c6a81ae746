"""
Simulation tuning knobs.
"""

# Environment
SCREEN_W, SCREEN_H = 980, 720
WATER_LEVEL_FRAC = 0.7  # water starts at this fraction of world height
EDGE_MARGIN = 50.0

# Runtime pacing
TARGET_FPS = 60  # ~16ms per tick

# Movement
MOVEMENT_SPEED = 3.0  # units per tick

# Starting vitals
START_HUNGER = 80.0
START_CHILL = 50.0
START_ENERGY = 90.0
STAT_MIN = 0.0
STAT_MAX = 100.0

# Per-tick stat rules
HUNGER_DECAY = 0.02
ENERGY_SLEEP_GAIN = 0.1
ENERGY_MOVE_COST = 0.01
CHILL_MEDITATE_GAIN = 0.1
CHILL_SWIM_GAIN = 0.05
CHILL_STARVING_LOSS = 0.05
STARVING_BELOW = 20.0

# Food
EAT_REACH = 50.0
EAT_LOCK_MS = 1000
ORANGE_HUNGER = 15.0
WATERMELON_HUNGER = 30.0
MEAL_ENERGY = 5.0
WATERMELON_CHANCE = 0.2
FOOD_START_COUNT = 2
FOOD_SPAWN_INTERVAL_MS = 10000
FOOD_PADDING = 50.0

# Thoughts
THOUGHT_DEBOUNCE_MS = 5000
THOUGHT_DISPLAY_MS = 6000
THOUGHT_TIMEOUT_S = 15.0
GEMINI_MODEL = "gemini-2.5-flash"
GEMINI_URL = "https://generativelanguage.googleapis.com/v1beta/models"
