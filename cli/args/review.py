from __future__ import annotations

import argparse


def add_review_args(parser: argparse.ArgumentParser) -> None:
    """Register flags for ``--mode review``."""

    parser.add_argument(
        "--reviewed",
        dest="reviewed",
        help=(
            "(review mode) JSON file with review decisions: {\"1005\": \"no\"} "
            "or [[\"1005\", \"no\"], ...]."
        ),
    )
    parser.add_argument(
        "--codes-json",
        dest="codes_json",
        help=(
            "(review mode) Verbose artifact to look codes up in "
            "(default: <output-dir>/diagnostic-error-codes.json)."
        ),
    )
