"""pytest fixtures: no real API keys, fake upstream HTTP services."""

import json

import httpx
import pytest


@pytest.fixture(autouse=True)
def no_real_apis(monkeypatch):
    """Tests never reach EIA or OpenRouteService unless a fake is wired in."""
    monkeypatch.delenv("EIA_API_KEY", raising=False)
    monkeypatch.delenv("ORS_API_KEY", raising=False)


class FakeUpstream:
    """Stands in for both EIA and OpenRouteService behind httpx.MockTransport.

    Geocoding answers every address except those listed in `unknown`.
    Directions answers depend on whether the request asks to avoid tollways.
    """

    def __init__(self):
        self.gas_price = "4.00"
        self.gas_status = 200
        self.unknown = set()
        self.routes = {
            False: {"distance": 11.2, "duration": 1260},   # 21 min
            True: {"distance": 14.9, "duration": 1680},    # 28 min
        }
        self.directions_status = 200
        self.requests = []

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if request.url.host == "api.eia.gov":
            if self.gas_status != 200:
                return httpx.Response(self.gas_status)
            data = [] if self.gas_price is None else [{"period": "2026-10-12", "value": self.gas_price}]
            return httpx.Response(200, json={"response": {"data": data}})

        if request.url.path == "/geocode/search":
            text = request.url.params["text"]
            if text in self.unknown:
                return httpx.Response(200, json={"features": []})
            return httpx.Response(200, json={
                "features": [{"geometry": {"coordinates": [-122.32, 47.62]}}],
            })

        if request.url.path == "/v2/directions/driving-car":
            if self.directions_status != 200:
                return httpx.Response(self.directions_status)
            body = json.loads(request.content)
            summary = self.routes["options" in body]
            if summary is None:
                return httpx.Response(200, json={"routes": []})
            return httpx.Response(200, json={"routes": [{"summary": summary}]})

        return httpx.Response(404)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handle))

    def requests_to(self, path: str) -> list:
        return [r for r in self.requests if r.url.path == path]


@pytest.fixture
def upstream():
    return FakeUpstream()
