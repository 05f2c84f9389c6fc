"""ts_baselines.io.layout

Canonical TypeScript checkout layout.

This module centralizes:

* where baselines live (``tests/baselines/reference``)
* where test sources live (``tests/cases/{compiler,conformance}``)
* baseline discovery (flat listing, ``*.errors.txt`` only)
* test corpus scanning (recursive)

The goal is to ensure that the extraction pipeline, ``show`` and ``review``
do **not** re-implement their own path heuristics.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence, Union

from ts_baselines.domain.test_ids import baseline_path_to_test_id


BASELINE_SUFFIX = ".errors.txt"
BASELINES_REL_DIR = Path("tests") / "baselines" / "reference"
CASES_REL_DIR = Path("tests") / "cases"

# Test categories whose failures we care about. Other suites (fourslash,
# project, ...) also produce baselines, but their sources are never scanned.
TEST_CATEGORIES: tuple[str, ...] = ("compiler", "conformance")


class BaselineLayoutError(RuntimeError):
    """The TypeScript checkout does not have the expected directory layout."""


class ArtifactWriteError(RuntimeError):
    """The output artifact could not be written."""


class BaselineReadError(RuntimeError):
    """A selected baseline file could not be read."""

    def __init__(self, rel_path: str, reason: str = "") -> None:
        self.rel_path = rel_path
        msg = f"Failed to read file: {rel_path}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)


@dataclass(frozen=True)
class TsRepoPaths:
    """Resolved directories inside one TypeScript checkout."""

    ts_repo_dir: Path
    baselines_dir: Path
    cases_dir: Path


def get_ts_repo_paths(ts_repo_dir: Union[str, Path]) -> TsRepoPaths:
    root = Path(ts_repo_dir).expanduser().resolve()
    return TsRepoPaths(
        ts_repo_dir=root,
        baselines_dir=root / BASELINES_REL_DIR,
        cases_dir=root / CASES_REL_DIR,
    )


def _require_dir(path: Path, what: str) -> None:
    if not path.exists() or not path.is_dir():
        raise BaselineLayoutError(f"{what} directory not found: {path}")


def discover_baselines(baselines_dir: Path) -> List[str]:
    """Return ``*.errors.txt`` file names directly under *baselines_dir*.

    Nested directories are intentionally not searched: baselines under
    ``reference/project/...`` and friends belong to suites whose sources are
    not part of the corpus scan.

    Discovery order is made stable across platforms (``iterdir`` order is
    filesystem dependent): by test id, the plain baseline before its
    variants, then by name.
    """
    baselines_dir = Path(baselines_dir)
    _require_dir(baselines_dir, "Baselines")

    try:
        entries = list(baselines_dir.iterdir())
    except OSError as e:
        raise BaselineLayoutError(f"Cannot list baselines directory {baselines_dir}: {e}") from e

    try:
        names = [p.name for p in entries if p.name.endswith(BASELINE_SUFFIX) and p.is_file()]
    except OSError as e:
        raise BaselineLayoutError(f"Cannot inspect baselines directory {baselines_dir}: {e}") from e
    names.sort(key=lambda n: (baseline_path_to_test_id(n), n.endswith(")" + BASELINE_SUFFIX), n))
    return names


def scan_test_corpus(
    cases_dir: Path,
    categories: Sequence[str] = TEST_CATEGORIES,
) -> List[str]:
    """Return every test source file under the given categories (recursive).

    Paths are POSIX-style and relative to *cases_dir*, e.g.
    ``conformance/es6/decorators/class/property/decoratorOnClassProperty1.es6.ts``.
    A category directory that does not exist contributes nothing.
    """
    cases_dir = Path(cases_dir)
    _require_dir(cases_dir, "Test cases")

    out: List[str] = []
    for category in categories:
        base = cases_dir / category
        try:
            if not base.is_dir():
                continue
            found = _walk_files(base)
        except OSError as e:
            raise BaselineLayoutError(f"Cannot scan test cases under {base}: {e}") from e
        out.extend(sorted(p.relative_to(cases_dir).as_posix() for p in found))
    return out


def _raise_walk_error(err: OSError) -> None:
    raise err


def _walk_files(base: Path) -> List[Path]:
    # os.walk reports unreadable subdirectories through onerror; rglob skips them.
    files: List[Path] = []
    for dirpath, _dirnames, filenames in os.walk(base, onerror=_raise_walk_error):
        files.extend(Path(dirpath) / name for name in filenames)
    return files


def resolve_baseline_path(baselines_dir: Path, rel_path: str) -> Path:
    """Resolve a client supplied baseline path, refusing anything outside the root."""
    if not rel_path or not str(rel_path).strip():
        raise ValueError("No file path provided")

    root = Path(baselines_dir).resolve()
    candidate = (root / rel_path).resolve()
    try:
        candidate.relative_to(root)
    except ValueError:
        raise ValueError(f"Path escapes the baselines directory: {rel_path}") from None
    return candidate
