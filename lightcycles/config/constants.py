"""Centralized game constants.

Values mirror the arcade defaults: a 1280x720 field, four cycles, and four
sub-steps per rendered frame. Consuming modules import from here rather
than defining their own literals.
"""

from __future__ import annotations

SCREEN_WIDTH = 1280
"""Default field width in cells (one cell per screen pixel)."""

SCREEN_HEIGHT = 720
"""Default field height in cells."""

SPEED = 4
"""Simulation sub-steps performed per rendered frame."""

PLAYER_WIDTH = 3
"""Side length, in pixels, of the square drawn for each trail cell and head."""

MAX_PLAYERS = 4
"""Number of player slots; slots beyond the active count sit idle."""

TEXT_SIZE = 40
"""Font size of the end-of-round banner."""

FRAME_INTERVAL = 1.0 / 60.0
"""Seconds the interactive renderer yields between frames."""

WINDOW_TITLE = "lightCycles"
"""Title of the interactive game window."""

FLUSH_THRESHOLD = 8_192
"""Flush trail-log rows to Parquet once this in-memory row count is reached."""
