"""Fixtures compartidas: settings aislados y payloads reales de la API v5."""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from core.config import AppSettings

FALCONSAT_ID = "5eb87cd9ffd86e000604b32a"

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def settings() -> AppSettings:
    # Sin .env: los tests no dependen de la máquina.
    return AppSettings(_env_file=None)


@pytest.fixture
def launch_docs() -> list[dict[str, Any]]:
    return [
        {
            "id": FALCONSAT_ID,
            "name": "FalconSat",
            "flight_number": 1,
            "date_utc": "2006-03-24T22:30:00.000Z",
            "success": False,
            "rocket": "5e9d0d95eda69955f709d1eb",
            "cores": [{"core": "5e9e289df35918033d3b2623", "flight": 1}],
        },
        {
            "id": "5eb87cdaffd86e000604b32b",
            "name": "DemoSat",
            "flight_number": 2,
            "date_utc": "2007-03-21T01:10:00.000Z",
            "success": False,
        },
        {
            "id": "5eb87cdbffd86e000604b32c",
            "name": "Trailblazer",
            "flight_number": 3,
            "date_utc": "2008-08-03T03:34:00.000Z",
            "success": False,
            "details": "Residual stage 1 thrust led to collision between stage 1 and stage 2",
        },
    ]


def envelope(docs: list[dict[str, Any]], **meta: Any) -> dict[str, Any]:
    body: dict[str, Any] = {
        "docs": docs,
        "totalDocs": 205,
        "limit": 10,
        "totalPages": 21,
        "page": 1,
        "pagingCounter": 1,
        "hasPrevPage": False,
        "hasNextPage": True,
        "prevPage": None,
        "nextPage": 2,
    }
    body.update(meta)
    return body


class RecordingHandler:
    """Handler de `httpx.MockTransport` que guarda cada request recibido."""

    def __init__(self, respond: Handler) -> None:
        self._respond = respond
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._respond(request)

    @property
    def last_json(self) -> Any:
        return json.loads(self.requests[-1].content)


def json_response(payload: Any, status_code: int = 200) -> Handler:
    return lambda request: httpx.Response(status_code, json=payload)


def text_response(text: str, status_code: int = 200) -> Handler:
    return lambda request: httpx.Response(status_code, text=text)
