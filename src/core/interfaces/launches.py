"""Contrato de las fuentes de lanzamientos.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- La CLI y los tests dependen de esta abstracción, no del cliente HTTP
  concreto, y pueden sustituirlo por un fake.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import Launch


@runtime_checkable
class LaunchSource(Protocol):
    """Contrato mínimo para obtener lanzamientos.

    Reglas de diseño:
    - Ambos métodos son asíncronos porque hacen I/O (HTTP).
    - Sin estado entre llamadas: se pueden invocar en paralelo.
    """

    async def list_recent_launches(self) -> list[Launch]:
        """Devuelve una página de lanzamientos ordenados por fecha ascendente."""

        ...

    async def get_launch_by_id(self, launch_id: str) -> Launch:
        """Devuelve un lanzamiento concreto a partir de su identificador."""

        ...
