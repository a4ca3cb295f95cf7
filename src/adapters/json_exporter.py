"""Exportación JSON de lanzamientos.

Por qué JSON:
- Interoperabilidad con el sitio/renderer que consume estos datos.
- Permite guardar una página concreta (el número de página es aleatorio).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Sequence

from core.domain.models import Launch


def launches_to_payload(launches: Sequence[Launch]) -> list[dict[str, object]]:
    """Serializa solo los campos que envió la API, con sus valores sin tocar."""

    return [launch.model_dump(mode="json", exclude_unset=True) for launch in launches]


def export_launches_json(*, launches: Sequence[Launch], output_path: Path) -> Path:
    """Exporta lanzamientos a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = launches_to_payload(launches)
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
