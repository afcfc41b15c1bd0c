import json

import httpx
import pytest

from smarterz.upstream import EduverseClient

API_BASE = "https://upstream.test/api"


class FakeUpstream:
    """Routes keyed by path; a value of None answers 500, an Exception is raised."""

    def __init__(self, routes):
        self.routes = routes
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path[len("/api"):]
        self.requests.append(path)
        if path not in self.routes:
            return httpx.Response(404, json={"error": "not found"})
        body = self.routes[path]
        if isinstance(body, Exception):
            raise body
        if body is None:
            return httpx.Response(500, text="boom")
        if isinstance(body, str):
            return httpx.Response(200, text=body)
        return httpx.Response(200, content=json.dumps(body).encode(), headers={"content-type": "application/json"})

    def client(self) -> EduverseClient:
        return EduverseClient(API_BASE, transport=httpx.MockTransport(self))


@pytest.fixture
def math_batch():
    """Batch B1 with one subject whose dpps endpoint is down."""
    return FakeUpstream({
        "/batches": {"data": [{"id": "B1", "name": "Batch One"}]},
        "/batches/B1": {"data": [{"id": "S1", "name": "Math"}]},
        "/B1/subjects/S1/lectures": {"data": [{"id": "L1", "title": "Intro"}]},
        "/B1/subjects/S1/notes": {"data": []},
        "/B1/subjects/S1/dpps": None,
    })


@pytest.fixture
def upstream_factory():
    return FakeUpstream
