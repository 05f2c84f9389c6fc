"""ts_baselines.io

Filesystem contracts and IO helpers.

Design principle
----------------
The TypeScript checkout layout is an external contract we do not control.
Every "where do baselines live" rule is centralized here so discovery,
show and review cannot drift apart.
"""

from __future__ import annotations

from .fs import read_baseline_text, write_json_atomic, write_text_atomic
from .layout import (
    BASELINE_SUFFIX,
    TEST_CATEGORIES,
    ArtifactWriteError,
    BaselineLayoutError,
    BaselineReadError,
    TsRepoPaths,
    discover_baselines,
    get_ts_repo_paths,
    resolve_baseline_path,
    scan_test_corpus,
)

__all__ = [
    "ArtifactWriteError",
    "BASELINE_SUFFIX",
    "TEST_CATEGORIES",
    "BaselineLayoutError",
    "BaselineReadError",
    "TsRepoPaths",
    "discover_baselines",
    "get_ts_repo_paths",
    "read_baseline_text",
    "resolve_baseline_path",
    "scan_test_corpus",
    "write_json_atomic",
    "write_text_atomic",
]
