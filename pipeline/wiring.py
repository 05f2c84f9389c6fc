"""pipeline.wiring

This module is the **composition root** for the Python runtime.

"Composition root" means: the single place where we *assemble* the running
application from its building blocks:

- load configuration / environment variables (``.env`` + process env)
- apply CLI overrides on top
- build the high-level pipeline facade object

Keeping this wiring in one place prevents configuration and dependency setup
from being duplicated across entrypoints (CLI, scripts, CI).
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from pipeline.models import PipelineConfig
from pipeline.pipeline import ErrorCodesPipeline


ROOT_DIR: Path = Path(__file__).resolve().parents[1]
ENV_PATH: Path = ROOT_DIR / ".env"

DEFAULT_TS_REPO_DIR = "../TypeScript"
DEFAULT_OUTPUT_DIR = "./output"

_FALSEY = {"", "0", "false", "no", "off"}


def env_flag(value: Optional[str]) -> bool:
    """Interpret an environment flag like ``DEBUG``.

    Unset, empty and the usual "off" spellings are False; anything else is True.
    """
    if value is None:
        return False
    return value.strip().lower() not in _FALSEY


def build_config(
    *,
    environ: Optional[Mapping[str, str]] = None,
    ts_repo_dir: Optional[str] = None,
    output_dir: Optional[str] = None,
    verbose: Optional[bool] = None,
) -> PipelineConfig:
    """Resolve a :class:`PipelineConfig`.

    Precedence (most explicit wins): keyword overrides (CLI flags), then
    ``TS_REPO_DIR`` / ``OUTPUT_DIR`` / ``DEBUG`` from *environ*, then defaults.
    """
    env = os.environ if environ is None else environ

    repo = ts_repo_dir or env.get("TS_REPO_DIR") or DEFAULT_TS_REPO_DIR
    out = output_dir or env.get("OUTPUT_DIR") or DEFAULT_OUTPUT_DIR
    if verbose is None:
        verbose = env_flag(env.get("DEBUG"))

    return PipelineConfig(
        ts_repo_dir=Path(repo).expanduser(),
        output_dir=Path(out).expanduser(),
        verbose=bool(verbose),
    )


def build_pipeline(*, load_env: bool = True) -> ErrorCodesPipeline:
    """Build the high-level pipeline facade.

    ``.env`` never overrides variables already exported in the shell.
    """
    if load_env:
        load_dotenv(ENV_PATH, override=False)

    return ErrorCodesPipeline()
