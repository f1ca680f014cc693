"""Parquet persistence helpers for recorded trail logs."""

from __future__ import annotations

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from lightcycles.io.schemas import TRAIL_LOG_SCHEMA


def new_trail_columns() -> dict[str, list[int | str]]:
    return {f.name: [] for f in TRAIL_LOG_SCHEMA}


def flush_trail_columns(
    trail_columns: dict[str, list[int | str]],
    trail_log_path: Path,
    trail_writer: pq.ParquetWriter | None,
) -> pq.ParquetWriter | None:
    """Write accumulated trail rows to Parquet and clear in-memory buffers."""
    if not trail_columns["round_id"]:
        return trail_writer
    table = pa.Table.from_pydict(trail_columns, schema=TRAIL_LOG_SCHEMA)
    if trail_writer is None:
        trail_writer = pq.ParquetWriter(trail_log_path, TRAIL_LOG_SCHEMA)
    trail_writer.write_table(table)
    for values in trail_columns.values():
        values.clear()
    return trail_writer
