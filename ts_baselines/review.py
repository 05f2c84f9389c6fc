"""ts_baselines.review

Messages for codes a reviewer marked as "not supported".

Reviewers walk the verbose artifact and mark each code ``yes`` (the checker
should report it) or ``no``. For the ``no`` codes we want a ready-to-paste
list with a human readable hint::

    "1005", // ',' expected.

Only the first baseline listed for a code is opened. Any baseline of that
code carries the same message text, so one file is enough.

Failures are per code. An unreadable file, or an artifact entry pointing
outside the baselines directory, is logged and skipped. A file without a
matching line is reported with :data:`NO_MESSAGE_FOUND`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping, Sequence

from ts_baselines.domain.diagnostics import extract_error_message
from ts_baselines.io.fs import read_baseline_text, read_json
from ts_baselines.io.layout import BaselineReadError, resolve_baseline_path

logger = logging.getLogger(__name__)

NO_MESSAGE_FOUND = "NO MESSAGE FOUND"
REVIEW_STATUSES = ("yes", "no")


@dataclass(frozen=True)
class ReviewEntry:
    code: int
    message: str


def _parse_reviewed(payload: Any) -> Dict[str, str]:
    if isinstance(payload, dict) and "reviewedCodes" in payload:
        payload = payload["reviewedCodes"]

    pairs: List[Sequence[Any]]
    if isinstance(payload, dict):
        pairs = list(payload.items())
    elif isinstance(payload, list):
        pairs = payload
    else:
        raise ValueError("Reviewed codes must be an object or a list of [code, status] pairs")

    out: Dict[str, str] = {}
    for idx, pair in enumerate(pairs):
        if not isinstance(pair, (list, tuple)) or len(pair) != 2:
            raise ValueError(f"Reviewed codes entry #{idx} is not a [code, status] pair: {pair!r}")
        code, status = pair
        if not str(code).strip().isdigit():
            raise ValueError(f"Reviewed codes entry #{idx} has a non-numeric code: {code!r}")
        status = str(status).strip().lower()
        if status not in REVIEW_STATUSES:
            raise ValueError(f"Unknown review status for code {code}: {status!r}")
        out[str(int(str(code).strip()))] = status
    return out


def load_reviewed_codes(path: Path) -> Dict[str, str]:
    """Load ``code -> "yes" | "no"`` from JSON.

    Accepts an object (``{"1005": "no"}``), a list of pairs
    (``[["1005", "no"]]``) or either of those wrapped as ``{"reviewedCodes": ...}``.
    """
    return _parse_reviewed(read_json(Path(path)))


def no_marked_codes(reviewed: Mapping[str, str]) -> List[int]:
    return sorted(int(code) for code, status in reviewed.items() if status == "no")


def collect_no_marked_messages(
    reviewed: Mapping[str, str],
    code_files: Mapping[str, Sequence[str]],
    baselines_dir: Path,
) -> List[ReviewEntry]:
    """Resolve a message for every code marked ``no``, in ascending code order."""
    results: List[ReviewEntry] = []

    for code in no_marked_codes(reviewed):
        files = code_files.get(str(code))
        if not files:
            continue

        filename = files[0]
        try:
            resolve_baseline_path(baselines_dir, filename)
        except ValueError as e:
            logger.error("Refusing to read %s: %s", filename, e)
            continue

        try:
            content = read_baseline_text(baselines_dir, filename)
        except BaselineReadError as e:
            logger.error("Error reading file %s: %s", filename, e)
            continue

        message = extract_error_message(content, code)
        if message is None:
            logger.warning("No error message found for code TS%s in file %s", code, filename)
            message = NO_MESSAGE_FOUND
        results.append(ReviewEntry(code=code, message=message))

    return results


def render_review_listing(entries: Sequence[ReviewEntry]) -> str:
    return "\n".join(f'"{e.code}", // {e.message}' for e in entries)
