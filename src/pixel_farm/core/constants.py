"""Simulation-wide constants for the Pixel Farm core.

Fixed rules of the game that are not meant to be tuned per deployment.
Tunable rates (spawn chances, tick period) live in core.config instead.
"""

from __future__ import annotations

# =============================================================================
# Grid Geometry
# =============================================================================

GRID_SIZE = 18
"""Side length of the full farm grid."""

TOTAL_PLOTS = GRID_SIZE * GRID_SIZE
"""Number of plots in the full grid (324)."""

LEGACY_GRID_SIZE = 12
"""Side length of the grid used by older save files."""

LEGACY_TOTAL_PLOTS = LEGACY_GRID_SIZE * LEGACY_GRID_SIZE
"""Plot count that identifies an older save file (144)."""

LEGACY_OFFSET = (GRID_SIZE - LEGACY_GRID_SIZE) // 2
"""Row/column shift applied when remapping a legacy grid (3)."""

LEGACY_EXPANSION_LEVEL = 2
"""Expansion level granted to migrated saves so the old 12x12 area stays unlocked."""

MILLISECOND_TIMESTAMP_FLOOR = 1e11
"""Timestamps above this are milliseconds (older saves); seconds stay below it until the year 5138."""

INNER_RING_SIZE = 8
"""Side length of the always-unlocked central box (ring 0)."""

MAX_TIER = 5
"""Outermost land ring."""

# =============================================================================
# Land Expansion
# =============================================================================

EXPANSION_COSTS = [1000, 5000, 15000, 40000, 100000]
"""Cost to reach expansion level 1..5 (index 0 buys level 1)."""

MAX_EXPANSION_LEVEL = len(EXPANSION_COSTS)

# =============================================================================
# Market Orders
# =============================================================================

NORMAL_MONEY_MULTIPLIER = 1.5
NORMAL_XP_MULTIPLIER = 0.5
NORMAL_ORDER_SECONDS = 5 * 60

EMERGENCY_MONEY_MULTIPLIER = 2.5
EMERGENCY_XP_MULTIPLIER = 1.0
EMERGENCY_ORDER_SECONDS = 2 * 60

ORDER_MIN_LINES = 1
ORDER_MAX_LINES = 3
CROP_REQUEST_MIN = 3
CROP_REQUEST_MAX = 7

REQUESTER_NAMES = [
    "Mayor Thomas", "Granny Smith", "Chef Pierre", "Wizard Zale", "Merchant Goro",
    "Little Timmy", "Farmer Joe", "Witch Hazel", "Captain Redbeard", "Lady Victoria",
    "Carpenter Robin", "Blacksmith Clint", "Dr. Harvey", "Artist Leah", "Fisherman Willy",
]

REQUESTER_QUOTES = [
    "I need these for my secret recipe!",
    "The festival is starting soon, hurry!",
    "I'm starving, please help.",
    "Will pay extra for fresh goods.",
    "Don't ask why I need so many...",
    "My guests will be arriving any minute!",
    "The spirits demanded this offering.",
    "Just a little snack for the road.",
    "I bet you can't grow these in time.",
    "Quality ingredients make quality meals.",
    "My cat loves these, strangely enough.",
    "It's for a science experiment!",
]

# =============================================================================
# Modifiers
# =============================================================================

TIER_YIELD_STEP = 0.2
"""Extra yield multiplier per land ring."""

LUCKY_DOUBLE_CHANCE = 0.15
SPEED_BASIC_FACTOR = 0.75
SPEED_BASIC_MAX_LEVEL = 5
SPEED_ADVANCED_FACTOR = 0.8
SPEED_ADVANCED_MIN_LEVEL = 10
CRAFT_SPEED_FACTOR = 0.8
XP_BOOST_FACTOR = 1.2
MONEY_BOOST_FACTOR = 1.2

# =============================================================================
# Weather and Clock
# =============================================================================

HOURS_PER_DAY = 24
INITIAL_GAME_HOUR = 8.0
DAYTIME_START_HOUR = 6
DAYTIME_END_HOUR = 20
INITIAL_WEATHER_SECONDS = 3 * 60
WEATHER_MIN_MINUTES = 2
WEATHER_MAX_MINUTES = 5

# =============================================================================
# Starting State
# =============================================================================

STARTING_MONEY = 50
OFFLINE_NOTICE_SECONDS = 60
"""Absences shorter than this produce no 'you were away' message."""
