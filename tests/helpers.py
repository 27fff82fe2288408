# tests/helpers.py

from typing import Any, Callable, Dict, List

import httpx

from domain.interfaces import IRecordSink

BASE_URL = "https://api.test/data/v4"
API_PREFIX = "/data/v4"


class FakeFaceitAPI:
    """In-memory FACEIT API: routes by path to JSON bodies or callables, records every request."""

    def __init__(self) -> None:
        self.routes: Dict[str, Any] = {}
        self.requests: List[httpx.Request] = []

    def add(self, path: str, response: Any) -> None:
        self.routes[path] = response

    def paths(self) -> List[str]:
        return [r.url.path[len(API_PREFIX):] for r in self.requests]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path[len(API_PREFIX):]
        route = self.routes.get(path)
        if route is None:
            return httpx.Response(404, json={"errors": [{"message": f"no route {path}"}]})
        if callable(route):
            return route(request)
        return httpx.Response(200, json=route)


def paged(items: List[Any]) -> Callable[[httpx.Request], httpx.Response]:
    """Route serving ``items`` honouring the limit/offset query parameters."""

    def _route(request: httpx.Request) -> httpx.Response:
        offset = int(request.url.params.get("offset", "0"))
        limit = int(request.url.params.get("limit", "100"))
        return httpx.Response(200, json={"items": items[offset:offset + limit]})

    return _route


def error(status: int, body: str = "boom") -> Callable[[httpx.Request], httpx.Response]:
    return lambda request: httpx.Response(status, text=body)


class RecordingSleep:
    def __init__(self) -> None:
        self.calls: List[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


class MemorySink(IRecordSink):
    def __init__(self) -> None:
        self.tables: Dict[str, List[dict]] = {}

    def write(self, table, records):
        self.tables[table] = [dict(r) for r in records]
