import json
from email.parser import BytesParser
from email.policy import default as default_policy

import httpx
import pytest
import pytest_asyncio

from vyos_mcp.handlers import HandlerContext
from vyos_mcp.models import SessionState
from vyos_mcp.server import MCPServer
from vyos_mcp.services import VyosClient

TEST_HOST = "https://router.test"
TEST_API_KEY = "test-api-key-12345"


def parse_form(request: httpx.Request) -> dict[str, str]:
    """Decode a multipart/form-data request body into {field: value}."""
    content_type = request.headers["content-type"]
    raw = b"Content-Type: " + content_type.encode() + b"\r\n\r\n" + request.content
    message = BytesParser(policy=default_policy).parsebytes(raw)
    return {
        part.get_param("name", header="content-disposition"): part.get_content()
        for part in message.iter_parts()
    }


class FakeRouter:
    """Stand-in for the VyOS REST API behind an httpx.MockTransport.

    Records every request and answers per endpoint. Unconfigured endpoints
    answer {"success": true, "data": null, "error": null} like a real router
    does for set/delete/commit.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._routes: dict[str, object] = {}

    def respond(self, endpoint: str, json_body=None, *, text=None, status=200):
        if text is None:
            text = json.dumps(json_body)
        self._routes[endpoint] = httpx.Response(status, text=text)

    def respond_data(self, endpoint: str, data):
        self.respond(endpoint, {"success": True, "data": data, "error": None})

    def fail(self, endpoint: str, exc: Exception):
        self._routes[endpoint] = exc

    def route(self, endpoint: str, handler):
        """Answer with handler(descriptor) -> httpx.Response."""
        self._routes[endpoint] = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self._routes.get(request.url.path)
        if isinstance(route, Exception):
            raise route
        if callable(route):
            return route(json.loads(parse_form(request)["data"]))
        if route is not None:
            return route
        return httpx.Response(200, json={"success": True, "data": None, "error": None})

    @property
    def calls(self) -> list[tuple[str, dict]]:
        """(endpoint, decoded operation descriptor) for every request."""
        return [(r.url.path, json.loads(parse_form(r)["data"])) for r in self.requests]


@pytest.fixture
def router():
    return FakeRouter()


@pytest_asyncio.fixture
async def client(router):
    async with VyosClient(
        TEST_HOST + "/", TEST_API_KEY, transport=httpx.MockTransport(router)
    ) as c:
        yield c


@pytest.fixture
def ctx(client):
    return HandlerContext(client=client, session=SessionState())


@pytest.fixture
def server(client):
    return MCPServer(client)


@pytest.fixture
def vyos_env(monkeypatch):
    monkeypatch.setenv("VYOS_HOST", TEST_HOST + "/")
    monkeypatch.setenv("VYOS_API_KEY", TEST_API_KEY)
