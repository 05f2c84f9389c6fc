"""pipeline.models

Lightweight data structures used across the pipeline.

Why this exists
---------------
The original script read ``TS_REPO_DIR`` / ``OUTPUT_DIR`` / ``DEBUG`` from the
environment wherever it needed them. That makes the extraction logic hard to
test without patching ``os.environ``.

These dataclasses give the orchestrator a small, explicit vocabulary instead:
- where inputs live and where the artifact goes (PipelineConfig)
- what one extraction run produced (ExtractionResult)
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

from ts_baselines.domain.code_index import CodeIndex
from ts_baselines.io.layout import TEST_CATEGORIES, TsRepoPaths, get_ts_repo_paths
from ts_baselines.report import output_filename


@dataclass(frozen=True)
class PipelineConfig:
    """Resolved configuration for one invocation.

    Built by :func:`pipeline.wiring.build_config`; never read from the
    environment after construction.
    """

    ts_repo_dir: Path
    output_dir: Path
    verbose: bool = False
    categories: Tuple[str, ...] = TEST_CATEGORIES

    @property
    def paths(self) -> TsRepoPaths:
        return get_ts_repo_paths(self.ts_repo_dir)

    @property
    def baselines_dir(self) -> Path:
        return self.paths.baselines_dir

    @property
    def cases_dir(self) -> Path:
        return self.paths.cases_dir

    @property
    def output_path(self) -> Path:
        return self.output_dir / output_filename(verbose=self.verbose)

    @property
    def verbose_output_path(self) -> Path:
        """Where the JSON artifact lives; ``review`` reads from here by default."""
        return self.output_dir / output_filename(verbose=True)


@dataclass
class ExtractionResult:
    """Counts and outputs of one extraction run (for progress + tests)."""

    baseline_count: int
    test_id_count: int
    test_file_count: int
    target_baselines: List[str]
    index: CodeIndex
    output_path: Path

    @property
    def code_count(self) -> int:
        return len(self.index)
