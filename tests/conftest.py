"""Shared test fixtures."""

import base64
import json
import re

import httpx
import pytest

from cms_admin.files import FileUpload
from cms_admin.session import MemorySessionStore

BASE_URL = "http://backend.test"

_PART = re.compile(
    rb'Content-Disposition: form-data; name="(?P<name>[^"]+)"(?:; filename="(?P<filename>[^"]*)")?'
    rb"(?:\r\nContent-Type: [^\r]+)?\r\n\r\n(?P<value>.*?)\r\n--",
    re.S,
)


class Recorder:
    """MockTransport handler that records requests and replies via ``responder``."""

    def __init__(self, responder):
        self.responder = responder
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        return self.responder(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def encode_token(claims: dict) -> str:
    def segment(obj) -> str:
        return base64.urlsafe_b64encode(json.dumps(obj).encode()).rstrip(b"=").decode()

    return f"{segment({'alg': 'HS256', 'typ': 'JWT'})}.{segment(claims)}.signature"


@pytest.fixture
def make_token():
    return encode_token


@pytest.fixture
def session():
    return MemorySessionStore()


@pytest.fixture
def mock_backend(session):
    """Factory: ``client, recorder = mock_backend(responder)``."""

    def factory(responder, **client_kwargs):
        recorder = Recorder(responder)
        client = httpx.AsyncClient(
            base_url=BASE_URL,
            transport=httpx.MockTransport(recorder),
            **client_kwargs,
        )
        return client, recorder

    return factory


@pytest.fixture
def multipart_fields():
    """Parse a recorded multipart request into ``{name: value or (filename, bytes)}``."""

    def parse(request: httpx.Request) -> dict:
        parts = {}
        for match in _PART.finditer(request.content):
            name = match.group("name").decode()
            if match.group("filename") is not None:
                parts[name] = (match.group("filename").decode(), match.group("value"))
            else:
                parts[name] = match.group("value").decode()
        return parts

    return parse


@pytest.fixture
def png_upload():
    return FileUpload("cover.png", b"\x89PNG fake image bytes", "image/png")
