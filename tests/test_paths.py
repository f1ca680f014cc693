from __future__ import annotations

from pathlib import Path

import pytest

from lightcycles.io.paths import logs_dir, resolve_within_base, round_summary_path, trail_log_path


def test_resolve_within_base_relative(tmp_path: Path) -> None:
    assert resolve_within_base(Path("logs/a.parquet"), tmp_path) == (
        tmp_path / "logs" / "a.parquet"
    ).resolve()


def test_resolve_within_base_accepts_base_itself(tmp_path: Path) -> None:
    assert resolve_within_base(tmp_path, tmp_path) == tmp_path.resolve()


def test_resolve_within_base_rejects_escape(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="escapes"):
        resolve_within_base(Path("../outside.gif"), tmp_path)


def test_output_layout(tmp_path: Path) -> None:
    assert logs_dir(tmp_path) == tmp_path / "logs"
    assert trail_log_path(tmp_path) == tmp_path / "logs" / "trail_log.parquet"
    assert round_summary_path(tmp_path) == tmp_path / "logs" / "round_summary.parquet"
