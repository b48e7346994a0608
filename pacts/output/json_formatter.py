"""
JSON output formatter for precondition reports.
"""

import hashlib
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..core.models import CheckKind


class ConditionReportFormatter:
    """
    Formats inspected preconditions as structured JSON.
    """

    SCHEMA_VERSION = "1.0.0"

    def __init__(self, source_file: str, source: Optional[str] = None):
        """
        Initialize formatter.

        Args:
            source_file: Path to the Python source file that was inspected
            source: Source text (read from source_file when omitted)
        """
        self.source_file = source_file
        if source is None:
            source = Path(source_file).read_text(encoding='utf-8')
        self.source_hash = hashlib.sha256(source.encode('utf-8')).hexdigest()
        self.entries: List[Dict[str, Any]] = []

    def add_entry(self,
                  name: str,
                  lineno: int,
                  preconditions: List[Dict[str, Any]],
                  class_name: Optional[str] = None) -> None:
        qualified = f"{class_name}.{name}" if class_name else name
        self.entries.append({
            "name": qualified,
            "line_number": lineno,
            "preconditions": preconditions
        })

    def _summary(self) -> Dict[str, Any]:
        by_kind = {kind.value: 0 for kind in CheckKind}
        for entry in self.entries:
            for condition in entry["preconditions"]:
                by_kind[condition["check"]] += 1
        return {
            "functions": len(self.entries),
            "with_preconditions": sum(1 for e in self.entries if e["preconditions"]),
            "preconditions": by_kind
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "schema_version": self.SCHEMA_VERSION,
            "generated_at": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "source_file": self.source_file,
            "source_hash": self.source_hash,
            "summary": self._summary(),
            "functions": self.entries
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    def save(self, output_path: str) -> None:
        Path(output_path).write_text(self.to_json(), encoding='utf-8')
