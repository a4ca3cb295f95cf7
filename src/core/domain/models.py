"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da un paso explícito de decodificación: si la API devuelve algo con otra
  forma, falla en el borde y no más tarde al acceder a un campo.
- El registro de lanzamiento sigue siendo opaco: los campos desconocidos se
  conservan tal cual (`extra="allow"`).

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Launch(BaseModel):
    """Un lanzamiento tal como lo devuelve la API (resumen o detalle).

    Solo `id` y `name` son obligatorios; el resto es opcional porque la API
    los omite o los devuelve a `null` según el lanzamiento.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    id: str = Field(
        ...,
        min_length=1,
        description="Identificador del lanzamiento en la API.",
    )
    name: str = Field(
        ...,
        description="Nombre de la misión.",
    )
    flight_number: int | None = Field(
        default=None,
        description="Número de vuelo secuencial.",
    )
    date_utc: str | None = Field(
        default=None,
        description="Fecha ISO-8601 (UTC) tal cual la envía la API; se parsea solo al mostrarla.",
    )
    date_unix: int | None = None
    date_local: str | None = None
    date_precision: str | None = None
    upcoming: bool | None = None
    success: bool | None = Field(
        default=None,
        description="Resultado del lanzamiento (None si aún no ocurrió).",
    )
    details: str | None = None
    rocket: str | None = Field(
        default=None,
        description="Identificador del cohete.",
    )
    launchpad: str | None = Field(
        default=None,
        description="Identificador de la plataforma de lanzamiento.",
    )
    links: dict[str, Any] | None = None
    failures: list[dict[str, Any]] | None = None


class LaunchListResponse(BaseModel):
    """Envelope de `POST /v5/launches/query` (docs + metadata de paginación).

    La metadata se recibe pero el cliente solo usa `docs`. Los números se
    aceptan como `int | float`: el `page` enviado no es entero y la API puede
    devolverlo tal cual.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    docs: list[Launch] = Field(
        ...,
        description="Lanzamientos de la página servida, en el orden de la API.",
    )
    total_docs: int | float | None = Field(default=None, alias="totalDocs")
    limit: int | float | None = None
    total_pages: int | float | None = Field(default=None, alias="totalPages")
    page: int | float | None = None
    paging_counter: int | float | None = Field(default=None, alias="pagingCounter")
    has_prev_page: bool | None = Field(default=None, alias="hasPrevPage")
    has_next_page: bool | None = Field(default=None, alias="hasNextPage")
    prev_page: int | float | None = Field(default=None, alias="prevPage")
    next_page: int | float | None = Field(default=None, alias="nextPage")


class QueryOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    sort: dict[str, str] = Field(default_factory=lambda: {"date_utc": "asc"})
    limit: int = Field(default=10, ge=1)
    pagination: bool = True
    # Real en [0, span): se envía sin redondear.
    page: float = Field(..., ge=0)


class LaunchQueryRequest(BaseModel):
    """Cuerpo de `POST /v5/launches/query`.

    `model_dump()` produce exactamente el JSON que espera la API:
    `{"query": {}, "options": {"sort": ..., "limit": ..., "pagination": ..., "page": ...}}`.
    """

    model_config = ConfigDict(frozen=True)

    query: dict[str, Any] = Field(
        default_factory=dict,
        description="Filtro Mongo-like; vacío = todos los lanzamientos.",
    )
    options: QueryOptions
