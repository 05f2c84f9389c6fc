from __future__ import annotations

"""cli.commands.show

Print one baseline with terminal colouring stripped.

Exit codes mirror what an HTTP file endpoint would answer: 2 for a bad
request (no path, path outside the baselines dir), 1 when the file cannot be
read.
"""

import argparse

from cli.common import config_from_args, fail
from pipeline.pipeline import ErrorCodesPipeline
from ts_baselines.io.layout import BaselineReadError


def run_show(args: argparse.Namespace, pipeline: ErrorCodesPipeline) -> int:
    config = config_from_args(args)
    try:
        content = pipeline.show(config, getattr(args, "path", None) or "")
    except ValueError as e:
        return fail(str(e), code=2)
    except BaselineReadError as e:
        return fail(str(e))

    print(content, end="" if content.endswith("\n") else "\n")
    return 0
