"""ts_baselines.domain.variants

Which variant baselines count.

A test that declares ``// @target: es5, es2015`` (or similar) is re-run once
per combination and each run gets its own baseline, named like
``asyncGeneratorParameterEvaluation(target=es2018).errors.txt``.

Only variants keyed on options the downstream checker actually honours are
kept; everything else would count diagnostics that only show up under
configurations it never runs.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Sequence

from .test_ids import test_path_to_test_id

VARIANT_SUFFIX = ").errors.txt"

# Same option set as the TypeScript coverage tests of the consumer.
SUPPORTED_VARIANT_OPTIONS: tuple[str, ...] = (
    "module=",
    "target=",
    "jsx=",
    "experimentaldecorators=",
)


def has_variant(baseline_path: str) -> bool:
    return baseline_path.endswith(VARIANT_SUFFIX)


def is_target_baseline(
    baseline_path: str,
    supported_options: Sequence[str] = SUPPORTED_VARIANT_OPTIONS,
) -> bool:
    """Return True if *baseline_path* should be scanned.

    Plain baselines always qualify. A variant baseline qualifies when any one
    of its options is in *supported_options*, e.g. ``(module=commonjs,strict=true)``.
    """
    if not has_variant(baseline_path):
        return True
    return any(option in baseline_path for option in supported_options)


def select_target_baselines(
    test_paths: Iterable[str],
    groups: Mapping[str, Sequence[str]],
) -> List[str]:
    """Pick the baselines to scan for every test source that has any.

    Tests without a group are "expected to parse" cases and are skipped.
    The result keeps first-selected order and contains each path once, even
    when several sources share a test id (``foo.ts`` and ``foo.tsx``).
    """
    selected: Dict[str, None] = {}
    for test_path in test_paths:
        baselines = groups.get(test_path_to_test_id(test_path))
        if not baselines:
            continue
        for baseline in baselines:
            if is_target_baseline(baseline):
                selected.setdefault(baseline, None)
    return list(selected)
