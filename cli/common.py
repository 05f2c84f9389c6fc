from __future__ import annotations

"""cli.common

Small shared helpers for CLI command modules.
"""

import argparse
import sys

from pipeline.models import PipelineConfig
from pipeline.wiring import build_config


def config_from_args(args: argparse.Namespace) -> PipelineConfig:
    """CLI flags win over the environment; see :func:`pipeline.wiring.build_config`."""
    return build_config(
        ts_repo_dir=getattr(args, "ts_repo_dir", None),
        output_dir=getattr(args, "output_dir", None),
        verbose=getattr(args, "verbose", None),
    )


def fail(message: str, *, code: int = 1) -> int:
    """Print a marked diagnostic line to stderr and return *code*."""
    print(f"💥 {message}", file=sys.stderr)
    return code
