"""Errores tipados del cliente de lanzamientos.

Por qué una jerarquía propia:
- La CLI (y cualquier otro consumidor) captura `LaunchClientError` sin
  conocer detalles de httpx ni de pydantic.
- Los fallos de transporte (DNS, conexión, timeout) NO se envuelven: se
  propagan como `httpx.TransportError`.
"""

from __future__ import annotations


class LaunchClientError(Exception):
    """Base de los errores propios del cliente."""


class DecodeError(LaunchClientError):
    """El cuerpo de la respuesta no es JSON o no tiene la forma esperada.

    El status HTTP no se inspecciona antes de decodificar; se adjunta aquí
    solo como diagnóstico.
    """

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code

    def __str__(self) -> str:
        base = super().__str__()
        details: list[str] = []
        if self.status_code is not None:
            details.append(f"HTTP {self.status_code}")
        if self.url:
            details.append(self.url)
        if details:
            return f"{base} ({', '.join(details)})"
        return base
