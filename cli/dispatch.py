from __future__ import annotations

import argparse

from cli.commands.extract import run_extract
from cli.commands.review import run_review_mode
from cli.commands.show import run_show
from pipeline.pipeline import ErrorCodesPipeline


def dispatch(args: argparse.Namespace, pipeline: ErrorCodesPipeline) -> int:
    mode = getattr(args, "mode", None) or "extract"

    if mode == "show":
        return int(run_show(args, pipeline))

    if mode == "review":
        return int(run_review_mode(args, pipeline))

    return int(run_extract(args, pipeline))
