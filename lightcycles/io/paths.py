"""Path construction helpers for recording output directories."""

from __future__ import annotations

from pathlib import Path


def resolve_within_base(path: Path, base_dir: Path) -> Path:
    """Resolve *path* and ensure it stays within the trusted *base_dir*.

    Raises :exc:`ValueError` if the resolved path escapes the base directory.
    """
    candidate = path if path.is_absolute() else base_dir / path
    resolved = candidate.resolve()
    base_resolved = base_dir.resolve()
    if resolved != base_resolved and base_resolved not in resolved.parents:
        raise ValueError(f"Path escapes base_dir: {path}")
    return resolved


def logs_dir(out_dir: Path) -> Path:
    """Return path to the logs subdirectory within an output directory."""
    return out_dir / "logs"


def trail_log_path(out_dir: Path) -> Path:
    """Return path to the trail log Parquet file."""
    return logs_dir(out_dir) / "trail_log.parquet"


def round_summary_path(out_dir: Path) -> Path:
    """Return path to the round summary Parquet file."""
    return logs_dir(out_dir) / "round_summary.parquet"
