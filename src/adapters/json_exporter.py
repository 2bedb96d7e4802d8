"""JSON export of an invocation record.

Why JSON:
- Lets other tooling replay or audit a simulated callback run.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import InvocationRecord


def export_invocation_json(*, record: InvocationRecord, output_path: Path) -> Path:
    """Export `InvocationRecord` as UTF-8 JSON with stable formatting."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = record.model_dump(mode="json")
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
