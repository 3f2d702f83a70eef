"""Exportación JSON del resultado de una ejecución.

Por qué JSON:
- Deja constancia de qué se aplicó (y qué falló) para scripts y pipelines.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import SpoofResult


def export_result_json(*, result: SpoofResult, output_path: Path) -> Path:
    """Exporta `SpoofResult` a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = result.model_dump(mode="json")
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
