import json

import httpx
import pytest

from dataforseo_mcp.clients import DataForSeoClient, LocalFalconClient, ProviderClients
from dataforseo_mcp.config import load_settings

TEST_CREDENTIALS = {
    "DATAFORSEO_LOGIN": "test-login",
    "DATAFORSEO_PASSWORD": "test-password",
}


class StubProvider:
    """
    Stand-in for an upstream API behind httpx.MockTransport.

    Routes map (method, path) to a JSON body, an httpx.Response, or a callable
    taking the request. Every request is recorded.
    """

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.requests = []
        self.transport = httpx.MockTransport(self)

    def route(self, method, path, response):
        self.routes[(method, path)] = response

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.routes.get((request.method, request.url.path))
        if response is None:
            return httpx.Response(
                404, json={"error": f"No stub for {request.method} {request.url.path}"}
            )
        if callable(response):
            return response(request)
        if isinstance(response, httpx.Response):
            return response
        return httpx.Response(200, json=response)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "No request reached the stub provider"
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last_request.content)


@pytest.fixture
def provider():
    return StubProvider()


@pytest.fixture
def dataforseo_client(provider):
    return DataForSeoClient("test-login", "test-password", transport=provider.transport)


@pytest.fixture
def localfalcon_client(provider):
    return LocalFalconClient("test-key", transport=provider.transport)


@pytest.fixture
def clients(dataforseo_client, localfalcon_client):
    return ProviderClients(dataforseo=dataforseo_client, localfalcon=localfalcon_client)


@pytest.fixture
def make_settings():
    def factory(**env):
        return load_settings({**TEST_CREDENTIALS, **env})

    return factory
