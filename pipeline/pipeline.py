"""pipeline.pipeline

A *single, high-level* object that represents this repo's capabilities.

Why this exists
---------------
The behaviour is implemented across :mod:`pipeline.orchestrator` and the
:mod:`ts_baselines` package. The :class:`ErrorCodesPipeline` facade gives
callers (CLI, scripts, tests) one obvious entrypoint with a small API:

- ``extract(config)``: build the code index and write the artifact
- ``show(config, path)``: one baseline, colouring stripped
- ``review(config, reviewed)``: messages for codes marked ``no``

The orchestrator functions are injectable so tests can stub them out.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Mapping, Optional

from pipeline.models import ExtractionResult, PipelineConfig
from pipeline.orchestrator import run_extraction, run_review, show_baseline


class ErrorCodesPipeline:
    """High-level facade over the pipeline.

    Callers should prefer using this object (built via :func:`pipeline.wiring.build_pipeline`)
    rather than importing low-level modules directly.
    """

    def __init__(
        self,
        *,
        extract_fn: Callable[[PipelineConfig], ExtractionResult] = run_extraction,
        show_fn: Callable[[PipelineConfig, str], str] = show_baseline,
        review_fn: Callable[..., Optional[str]] = run_review,
    ) -> None:
        self._extract_fn = extract_fn
        self._show_fn = show_fn
        self._review_fn = review_fn

    def extract(self, config: PipelineConfig) -> ExtractionResult:
        return self._extract_fn(config)

    def show(self, config: PipelineConfig, rel_path: str) -> str:
        return self._show_fn(config, rel_path)

    def review(
        self,
        config: PipelineConfig,
        reviewed: Mapping[str, str],
        *,
        codes_json: Optional[Path] = None,
    ) -> Optional[str]:
        return self._review_fn(config, reviewed, codes_json=codes_json)
