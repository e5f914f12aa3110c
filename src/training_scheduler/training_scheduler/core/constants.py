"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

HEATMAP_WEEKS = 12
MIN_PASSWORD_LENGTH = 8
MAX_NAME_LENGTH = 255
SELF_REGISTERABLE_ROLES = ("athlete", "trainer")
