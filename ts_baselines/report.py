"""ts_baselines.report

Render the code index into the audit artifact.

Two formats share one base name (``diagnostic-error-codes``):

* ``.txt`` (default): instructions header, ``---``, one code per line. Plain
  lines keep diffs of the checked-in list readable and avoid trailing commas.
* ``.json`` (verbose/debug): code -> sorted baseline files, for digging into
  why a code is on the list.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

from ts_baselines import OUTPUT_BASENAME
from ts_baselines.domain.code_index import CodeIndex
from ts_baselines.io.fs import write_json_atomic, write_text_atomic
from ts_baselines.io.layout import ArtifactWriteError

COMPACT_HEADER: tuple[str, ...] = (
    "If there are any changes to this list, determine whether the related error should be supported by OXC or NOT.",
    "And if necessary, add it to the `NOT_SUPPORTED_ERROR_CODES` list for TS coverage tests.",
    "---",
)


def output_filename(*, verbose: bool) -> str:
    return f"{OUTPUT_BASENAME}{'.json' if verbose else '.txt'}"


def render_compact(index: CodeIndex) -> str:
    lines: List[str] = [*COMPACT_HEADER, *(str(code) for code in index.sorted_codes())]
    return "\n".join(lines)


def write_report(index: CodeIndex, output_dir: Path, *, verbose: bool) -> Path:
    """Render *index* and atomically replace the artifact in *output_dir*.

    Raises
    ------
    ArtifactWriteError if the directory or the file cannot be written.
    """
    out_path = Path(output_dir) / output_filename(verbose=verbose)
    try:
        if verbose:
            # Keys stay in numeric order; sort_keys would order them as strings.
            write_json_atomic(out_path, index.to_sorted_dict())
        else:
            write_text_atomic(out_path, render_compact(index))
    except OSError as e:
        raise ArtifactWriteError(f"Cannot write {out_path}: {e}") from e
    return out_path
