"""ts_baselines.domain.code_index

Diagnostic code -> baseline files, built in one pass.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List


@dataclass
class CodeIndex:
    """Append-only mapping from diagnostic code to the files it occurs in.

    File lists keep extraction order; sorting happens only at render time.
    """

    _files_by_code: Dict[int, List[str]] = field(default_factory=dict)

    def add(self, code: int, baseline_path: str) -> None:
        files = self._files_by_code.setdefault(int(code), [])
        if baseline_path not in files:
            files.append(baseline_path)

    def add_all(self, codes: Iterable[int], baseline_path: str) -> None:
        for code in codes:
            self.add(code, baseline_path)

    def files_for(self, code: int) -> List[str]:
        return list(self._files_by_code.get(int(code), []))

    def sorted_codes(self) -> List[int]:
        return sorted(self._files_by_code)

    def to_sorted_dict(self) -> Dict[str, List[str]]:
        """JSON-ready view: keys ascending by number, file lists sorted."""
        return {str(code): sorted(self._files_by_code[code]) for code in self.sorted_codes()}

    def __len__(self) -> int:
        return len(self._files_by_code)

    def __contains__(self, code: object) -> bool:
        return code in self._files_by_code
