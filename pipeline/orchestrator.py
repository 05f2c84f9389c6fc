"""pipeline.orchestrator

High-level orchestration entrypoints for the diagnostic code audit.

Goal
----
Keep ``codes_cli.py`` thin: it parses args, builds a
:class:`~pipeline.models.PipelineConfig` and calls one function here.

Design principles
-----------------
- Every input comes from the config value passed in; nothing here reads the
  environment.
- Stages run strictly forward: discover -> group -> scan corpus -> filter
  variants -> extract -> aggregate -> write.
- All baselines are read before the artifact is written, so a read failure
  aborts the run without touching the previous artifact.

This module is intentionally "boring": it wires together existing components.
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Optional

from pipeline.models import ExtractionResult, PipelineConfig
from ts_baselines.domain.code_index import CodeIndex
from ts_baselines.domain.diagnostics import extract_error_codes, strip_ansi
from ts_baselines.domain.test_ids import group_baselines
from ts_baselines.domain.variants import select_target_baselines
from ts_baselines.io.fs import read_baseline_text, read_json
from ts_baselines.io.layout import (
    BASELINE_SUFFIX,
    BaselineLayoutError,
    discover_baselines,
    resolve_baseline_path,
    scan_test_corpus,
)
from ts_baselines.report import write_report
from ts_baselines.review import collect_no_marked_messages, render_review_listing


def _stage(title: str) -> None:
    print("🍀", title)


def run_extraction(config: PipelineConfig) -> ExtractionResult:
    """Build the code index from the TypeScript baselines and write the artifact.

    Raises
    ------
    BaselineLayoutError if the checkout layout is missing.
    BaselineReadError if any selected baseline cannot be read.
    ArtifactWriteError if the artifact cannot be written.
    """
    baselines_dir = config.baselines_dir
    rel_baselines = baselines_dir.relative_to(config.paths.ts_repo_dir).as_posix()

    # At this point, baselines of other suites (fourslash, ...) are still included.
    _stage(f"Collecting all `*{BASELINE_SUFFIX}` files from `{rel_baselines}`...")
    baselines = discover_baselines(baselines_dir)
    print(f"Found {len(baselines)} files.")

    # One test may own several baselines, one per `@option` variation.
    groups = group_baselines(baselines)

    categories = "|".join(config.categories)
    _stage(f"Collecting all test files from `tests/cases/{categories}`...")
    test_paths = scan_test_corpus(config.cases_dir, config.categories)
    print(f"Found {len(test_paths)} files.")

    _stage(f"Checking each test file has `{BASELINE_SUFFIX}` files...")
    targets = select_target_baselines(test_paths, groups)
    print(f"Found {len(targets)} `{BASELINE_SUFFIX}` files to be checked.")

    _stage(f"Extracting diagnostic error codes from target `{BASELINE_SUFFIX}` files...")
    index = CodeIndex()
    for rel_path in targets:
        index.add_all(extract_error_codes(read_baseline_text(baselines_dir, rel_path)), rel_path)
    print(f"Extracted {len(index)} unique diagnostic error codes from target `{BASELINE_SUFFIX}` files.")

    _stage("Writing the error codes to the output file...")
    out_path = write_report(index, config.output_dir, verbose=config.verbose)
    print(f"Saved the output to {out_path}")

    return ExtractionResult(
        baseline_count=len(baselines),
        test_id_count=len(groups),
        test_file_count=len(test_paths),
        target_baselines=targets,
        index=index,
        output_path=out_path,
    )


def show_baseline(config: PipelineConfig, rel_path: str) -> str:
    """Return one baseline with terminal colouring removed.

    Raises
    ------
    ValueError for an empty path or one that escapes the baselines directory.
    BaselineReadError if the file cannot be read.
    """
    resolved = resolve_baseline_path(config.baselines_dir, rel_path)
    rel = resolved.relative_to(config.baselines_dir.resolve()).as_posix()
    return strip_ansi(read_baseline_text(config.baselines_dir, rel))


def load_code_files(codes_json: Path) -> Mapping[str, list]:
    """Load the verbose artifact written by :func:`run_extraction`."""
    codes_json = Path(codes_json)
    if not codes_json.exists():
        raise BaselineLayoutError(
            f"Verbose artifact not found: {codes_json} (run extract with --verbose first)"
        )
    data = read_json(codes_json)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object in {codes_json}")
    return data


def run_review(
    config: PipelineConfig,
    reviewed: Mapping[str, str],
    *,
    codes_json: Optional[Path] = None,
) -> Optional[str]:
    """Render the listing for codes marked ``no``.

    Returns None when nothing is marked ``no``.
    """
    if not any(status == "no" for status in reviewed.values()):
        return None

    code_files = load_code_files(codes_json or config.verbose_output_path)
    entries = collect_no_marked_messages(reviewed, code_files, config.baselines_dir)
    return render_review_listing(entries)
