"""Parquet schema definitions for recorded rounds.

Every module that reads or writes round recordings works against these
column contracts.
"""

from __future__ import annotations

import pyarrow as pa

TRAIL_LOG_SCHEMA_VERSION = 1

# One row per claimed cell, in claim order within each round.
TRAIL_LOG_SCHEMA = pa.schema(
    [
        ("round_id", pa.string()),
        ("frame", pa.int64()),
        ("order", pa.int64()),
        ("player", pa.int64()),
        ("x", pa.int64()),
        ("y", pa.int64()),
    ]
)

# One row per recorded round. ``winner`` is a 0-based slot, null for a draw
# or for a round cut off while still running.
ROUND_SUMMARY_SCHEMA = pa.schema(
    [
        ("round_id", pa.string()),
        ("seed", pa.int64()),
        ("player_count", pa.int64()),
        ("width", pa.int64()),
        ("height", pa.int64()),
        ("frames", pa.int64()),
        ("ended", pa.bool_()),
        ("winner", pa.int64()),
        ("trail_length", pa.int64()),
    ]
)
