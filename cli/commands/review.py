from __future__ import annotations

"""cli.commands.review

List the messages of codes a reviewer marked as ``no``.
"""

import argparse
from pathlib import Path

from cli.common import config_from_args, fail
from pipeline.pipeline import ErrorCodesPipeline
from ts_baselines.io.layout import BaselineLayoutError
from ts_baselines.review import load_reviewed_codes


def run_review_mode(args: argparse.Namespace, pipeline: ErrorCodesPipeline) -> int:
    if not getattr(args, "reviewed", None):
        return fail("--mode review requires --reviewed <file.json>", code=2)

    config = config_from_args(args)
    codes_json = Path(args.codes_json) if getattr(args, "codes_json", None) else None

    try:
        reviewed = load_reviewed_codes(Path(args.reviewed))
        listing = pipeline.review(config, reviewed, codes_json=codes_json)
    except (OSError, ValueError) as e:
        return fail(f"Cannot load review input: {e}", code=2)
    except BaselineLayoutError as e:
        return fail(str(e))

    if listing is None:
        print("No codes marked as 'no'")
        return 0

    print(listing)
    return 0
