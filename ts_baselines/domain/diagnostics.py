"""ts_baselines.domain.diagnostics

Pull diagnostic codes and messages out of ``.errors.txt`` text.

A baseline has two sections that both mention codes:

summary, one line per error::

    ArrowFunction3.ts(1,12): error TS1005: ',' expected.
    error TS2688: Cannot find type definition file for 'react'.

details, the source annotated inline::

    !!! error TS1005: '}' expected.

Both are valid occurrences; a code is recorded once per file regardless of
how often it appears.
"""

from __future__ import annotations

import re
from typing import Optional, Set

ERROR_CODE_RE = re.compile(r"error TS(?P<code>\d{4,5}): ")
_MESSAGE_RE = re.compile(r"error TS\d+:\s*(?P<message>.+)")

# CSI sequences (colours, cursor movement) and OSC sequences (hyperlinks).
_ANSI_RE = re.compile(
    r"\x1b\[[0-?]*[ -/]*[@-~]"
    r"|\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)"
    r"|\x9b[0-?]*[ -/]*[@-~]"
)


def extract_error_codes(errors_text: str) -> Set[int]:
    """Return the distinct diagnostic codes mentioned in *errors_text*."""
    return {int(m.group("code")) for m in ERROR_CODE_RE.finditer(errors_text)}


def strip_ansi(text: str) -> str:
    """Remove terminal colouring control sequences."""
    return _ANSI_RE.sub("", text)


def extract_error_message(errors_text: str, code: int) -> Optional[str]:
    """Return the message of the first line reporting ``TS<code>``, if any."""
    needle = f"error TS{code}:"
    for line in strip_ansi(errors_text).split("\n"):
        if needle not in line:
            continue
        m = _MESSAGE_RE.search(line)
        if m:
            return m.group("message").strip()
        return None
    return None
