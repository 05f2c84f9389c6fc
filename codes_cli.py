#!/usr/bin/env python3
"""
CLI for the TypeScript diagnostic error code audit.

Modes:
  1) extract - collect every diagnostic code exercised by failing compiler /
               conformance tests and write diagnostic-error-codes.{txt,json}
  2) show    - print one baseline file without terminal colouring
  3) review  - list messages for codes reviewed as "no"

Usage:
  python codes_cli.py
  python codes_cli.py --ts-repo-dir ../TypeScript --output-dir ./output --verbose
  python codes_cli.py --mode show --path "asyncGeneratorParameterEvaluation(target=es2018).errors.txt"
  python codes_cli.py --mode review --reviewed reviewed.json
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from cli.args.base import add_base_args
from cli.args.review import add_review_args
from cli.dispatch import dispatch
from pipeline.wiring import build_pipeline


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Extract TypeScript diagnostic error codes exercised by failing tests."
    )
    add_base_args(parser)
    add_review_args(parser)
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    # Always load .env from repo root so terminal runs behave like IDE runs
    pipeline = build_pipeline()

    args = parse_args(argv)
    raise SystemExit(dispatch(args, pipeline))


if __name__ == "__main__":
    main()
