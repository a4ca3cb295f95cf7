"""Cliente de la API pública de lanzamientos de SpaceX (v5).

Dos operaciones de solo lectura:
- `list_recent_launches`: `POST /v5/launches/query`, devuelve los `docs` del envelope.
- `get_launch_by_id`: `GET /v5/launches/{id}`, devuelve el cuerpo completo como registro.

La asimetría es intencional: la consulta viene envuelta con metadata de
paginación, el detalle no.

Sin caché, sin retries y sin inspección del status HTTP: el cuerpo se
decodifica siempre y, si no tiene la forma esperada, se lanza `DecodeError`.
Los errores de transporte de httpx se propagan sin envolver.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Callable, TypeVar

import httpx
from loguru import logger
from pydantic import BaseModel, ValidationError

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.models import Launch, LaunchListResponse, LaunchQueryRequest, QueryOptions
from core.errors import DecodeError
from core.interfaces.launches import LaunchSource

ModelT = TypeVar("ModelT", bound=BaseModel)

QUERY_PATH = "/v5/launches/query"
LAUNCH_PATH = "/v5/launches/{launch_id}"

# Fijos: el body de la consulta siempre lleva limit=10 y page en [0, 21).
PAGE_LIMIT = 10
PAGE_SPAN = 21


@dataclass
class LaunchClientHooks:
    """Callbacks opcionales de instrumentación (p.ej. la CLI en modo debug)."""

    on_request: Callable[[str, str], None] | None = None
    on_launch: Callable[[Launch], None] | None = None


def decode_response(model: type[ModelT], response: httpx.Response) -> ModelT:
    """Decodifica `response` como `model` o lanza `DecodeError`.

    No mira `response.status_code`: un 404 con cuerpo de error falla aquí por
    forma, no por status.
    """

    url: str | None
    try:
        url = str(response.request.url)
    except RuntimeError:
        # Respuesta construida a mano, sin request asociado.
        url = None

    try:
        payload: Any = response.json()
    except ValueError as exc:
        raise DecodeError(
            "response body is not valid JSON",
            url=url,
            status_code=response.status_code,
        ) from exc

    if not isinstance(payload, dict):
        raise DecodeError(
            f"expected a JSON object for {model.__name__}, got {type(payload).__name__}",
            url=url,
            status_code=response.status_code,
        )

    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise DecodeError(
            f"unexpected {model.__name__} shape ({exc.error_count()} validation errors)",
            url=url,
            status_code=response.status_code,
        ) from exc


class SpaceXLaunchClient(LaunchSource):
    """Cliente sin estado para `/v5/launches`.

    - `client`: `httpx.AsyncClient` inyectado (no se cierra aquí). Si es None,
      cada llamada abre y cierra su propio cliente.
    - `transport`: transporte httpx para el cliente por llamada (p.ej.
      `httpx.MockTransport`); se ignora si se inyecta `client`.
    - `rng`: fuente del número de página; inyectable para tests reproducibles.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        rng: random.Random | None = None,
        hooks: LaunchClientHooks | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client
        self._transport = transport
        self._rng = rng or random.Random()
        self._hooks = hooks or LaunchClientHooks()
        self._base_url = self._settings.api_base_url.rstrip("/")

    def build_query(self) -> LaunchQueryRequest:
        # Página real en [0, PAGE_SPAN), sin redondear.
        page = self._rng.random() * PAGE_SPAN
        return LaunchQueryRequest(
            query={},
            options=QueryOptions(
                sort={"date_utc": "asc"},
                limit=PAGE_LIMIT,
                pagination=True,
                page=page,
            ),
        )

    async def query_launches(self) -> LaunchListResponse:
        """Ejecuta la consulta y devuelve el envelope completo (docs + paginación)."""

        body = self.build_query().model_dump()
        logger.debug("Querying launches page={page:.3f}", page=body["options"]["page"])

        response = await self._send(
            "POST",
            QUERY_PATH,
            json=body,
            headers={"Content-type": "application/json"},
        )
        envelope = decode_response(LaunchListResponse, response)
        logger.debug(
            "Decoded {count} launches (HTTP {status})",
            count=len(envelope.docs),
            status=response.status_code,
        )
        return envelope

    async def list_recent_launches(self) -> list[Launch]:
        envelope = await self.query_launches()
        return list(envelope.docs)

    async def get_launch_by_id(self, launch_id: str) -> Launch:
        # El id va tal cual en el path; httpx solo aplica su encoding de URL.
        response = await self._send("GET", LAUNCH_PATH.format(launch_id=launch_id))
        launch = decode_response(Launch, response)

        logger.debug("Fetched launch {id} ({name})", id=launch.id, name=launch.name)
        if self._hooks.on_launch is not None:
            self._hooks.on_launch(launch)
        return launch

    async def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        url = f"{self._base_url}{path}"
        if self._hooks.on_request is not None:
            self._hooks.on_request(method, url)

        if self._client is not None:
            return await self._client.request(method, url, **kwargs)

        async with build_async_client(self._settings, transport=self._transport) as client:
            return await client.request(method, url, **kwargs)


async def get_latest_launches(
    *,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[Launch]:
    """Atajo: una página aleatoria de lanzamientos ordenados por fecha."""

    return await SpaceXLaunchClient(settings, transport=transport).list_recent_launches()


async def get_launch_by_id(
    launch_id: str,
    *,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Launch:
    """Atajo: un lanzamiento por id."""

    return await SpaceXLaunchClient(settings, transport=transport).get_launch_by_id(launch_id)
