from __future__ import annotations

"""cli.commands.extract

Default mode: build ``diagnostic-error-codes.{txt,json}`` from the baselines.
"""

import argparse

from cli.common import config_from_args, fail
from pipeline.pipeline import ErrorCodesPipeline
from ts_baselines.io.layout import ArtifactWriteError, BaselineLayoutError, BaselineReadError


def run_extract(args: argparse.Namespace, pipeline: ErrorCodesPipeline) -> int:
    config = config_from_args(args)
    try:
        pipeline.extract(config)
    except (BaselineLayoutError, BaselineReadError, ArtifactWriteError) as e:
        # The previous artifact, if any, is left untouched.
        return fail(str(e))
    return 0
