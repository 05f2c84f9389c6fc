"""ts_baselines

Core package for the diagnostic error code audit.

Why this exists
---------------
The TypeScript repository records the expected output of every failing
compiler test as a ``.errors.txt`` baseline. This package owns everything that
knows about those baselines:

* domain rules (variant filtering, diagnostic code extraction, the code index)
* IO/layout rules (where baselines and test cases live, atomic artifact writes)
* rendering of the final artifact and of the review listing

The CLI (:mod:`codes_cli`) and the orchestrator (:mod:`pipeline.orchestrator`)
are thin composition roots that wire these components together.
"""

from __future__ import annotations

OUTPUT_BASENAME = "diagnostic-error-codes"
