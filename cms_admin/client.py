"""HTTP client for the backend REST API."""

import logging
from typing import Generator

import httpx

from cms_admin.config import Settings, settings as default_settings
from cms_admin.session import SessionStore

logger = logging.getLogger(__name__)


class BearerAuth(httpx.Auth):
    """Signs each request with the token currently held by ``session``.

    The token is looked up per request, so a login or logout takes effect
    on the next call without rebuilding the client.
    """

    def __init__(self, session: SessionStore):
        self._session = session

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        token = self._session.get_token()
        if token and "Authorization" not in request.headers:
            request.headers["Authorization"] = f"Bearer {token}"
        yield request


def build_client(
    session: SessionStore,
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    settings = settings or default_settings
    logger.debug(f"Building backend client for {settings.backend_url}")
    return httpx.AsyncClient(
        base_url=settings.backend_url,
        auth=BearerAuth(session),
        timeout=settings.request_timeout_seconds,
        transport=transport,
    )
