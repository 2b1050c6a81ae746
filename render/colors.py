"""
capy_sim module: render/colors.py

Central color palette.
"""

GRASS = (134, 190, 98)
SAND = (222, 203, 148)
WATER = (86, 160, 214)
WATER_EDGE = (160, 210, 236)

CAPY_BODY = (150, 98, 58)
CAPY_DARK = (96, 60, 34)
CAPY_EYE = (20, 20, 20)

ORANGE = (246, 146, 30)
MELON_RIND = (58, 140, 64)
MELON_FLESH = (232, 70, 82)

PANEL = (255, 255, 255)
PANEL_EDGE = (214, 211, 209)
TEXT = (68, 64, 60)
TEXT_MUTED = (120, 113, 108)
BAR_BG = (231, 229, 228)
HUNGER = (251, 146, 60)
CHILL = (192, 132, 252)
ENERGY = (96, 165, 250)

BUTTON = (255, 255, 255)
BUTTON_ACTIVE_MEDITATE = (147, 51, 234)
BUTTON_ACTIVE_SLEEP = (37, 99, 235)
BUTTON_DISABLED = (200, 198, 196)
