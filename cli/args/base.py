from __future__ import annotations

import argparse


MODES = ("extract", "show", "review")


def add_base_args(parser: argparse.ArgumentParser) -> None:
    """Register CLI flags shared across modes.

    Every path flag falls back to the environment (``TS_REPO_DIR``,
    ``OUTPUT_DIR``, ``DEBUG``, optionally loaded from ``.env``).
    """

    parser.add_argument(
        "--mode",
        choices=MODES,
        default="extract",
        help=(
            "extract = build the diagnostic code list from baselines (default), "
            "show = print one baseline without terminal colours, "
            "review = list messages for codes reviewed as 'no'"
        ),
    )
    parser.add_argument(
        "--ts-repo-dir",
        dest="ts_repo_dir",
        help="TypeScript checkout root (default: $TS_REPO_DIR or ../TypeScript).",
    )
    parser.add_argument(
        "--output-dir",
        dest="output_dir",
        help="Directory for diagnostic-error-codes.{txt,json} (default: $OUTPUT_DIR or ./output).",
    )
    parser.add_argument(
        "--verbose",
        "--debug",
        dest="verbose",
        action="store_true",
        default=None,
        help="Write the verbose .json mapping (code -> files) instead of the .txt list (default: $DEBUG).",
    )
    parser.add_argument(
        "--path",
        dest="path",
        help="(show mode) Baseline path relative to tests/baselines/reference.",
    )
