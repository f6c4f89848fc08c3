"""Login, logout and identity against the backend user API."""

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, TypeVar

import httpx

from cms_admin.auth.token import TokenDecodeError, decode_claims
from cms_admin.config import settings
from cms_admin.errors import SessionEndedError
from cms_admin.session import SessionStore

logger = logging.getLogger(__name__)

T = TypeVar("T")

LOGIN_REDIRECT = "/login"
LOGIN_FAILED = "Invalid email or password"
HOME_REDIRECT = "/dashboard"


@dataclass
class AuthResult:
    success: bool
    redirect_to: str | None = None
    error: str | None = None
    logout: bool = False


@dataclass
class Identity:
    id: Any
    email: str | None = None
    name: str | None = None


def error_message(data: Any, fallback: str) -> str:
    """Pick the most specific message out of a backend error body."""
    if isinstance(data, dict):
        if data.get("message"):
            return str(data["message"])
        if data.get("error"):
            return str(data["error"])
        errors = data.get("errors")
        if isinstance(errors, list) and errors and isinstance(errors[0], dict) and errors[0].get("msg"):
            return str(errors[0]["msg"])
    return fallback


def identity_from_token(token: str | None) -> Identity | None:
    """Identity claims carried by the token, or ``None`` when unreadable."""
    if not token:
        return None
    try:
        claims = decode_claims(token)
    except TokenDecodeError as e:
        logger.debug(f"Cannot read identity from token: {e}")
        return None
    user_id = claims.get("user_id", claims.get("id", claims.get("sub")))
    if user_id is None:
        return None
    return Identity(id=user_id, email=claims.get("email"), name=claims.get("name"))


def _json_or_empty(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return {}


class AuthProvider:
    """Session lifecycle: ``LoggedOut --login--> LoggedIn --logout|expiry--> LoggedOut``."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        session: SessionStore,
        api_prefix: str | None = None,
        revoke_on_logout: bool | None = None,
    ):
        self._client = client
        self._session = session
        self._prefix = (api_prefix if api_prefix is not None else settings.api_prefix).rstrip("/")
        self._revoke = settings.revoke_on_logout if revoke_on_logout is None else revoke_on_logout

    @property
    def session(self) -> SessionStore:
        return self._session

    async def login(self, email: str, password: str, remember_me: bool = False) -> AuthResult:
        try:
            response = await self._client.post(
                f"{self._prefix}/user/login",
                json={"email": email, "password": password, "rememberMe": remember_me},
            )
        except httpx.HTTPError as e:
            logger.error(f"Login request failed: {e}")
            return AuthResult(success=False, error="Network error")

        data = _json_or_empty(response)
        if not response.is_success:
            message = error_message(data, LOGIN_FAILED)
            logger.info(f"Login rejected for {email}: {response.status_code} {message}")
            return AuthResult(success=False, error=message)

        token = data.get("token") if isinstance(data, dict) else None
        if not token:
            return AuthResult(success=False, error=error_message(data, LOGIN_FAILED))

        self._session.save(token, str(data.get("expiresIn") or "1d"))
        logger.info(f"Logged in as {email}")
        return AuthResult(success=True, redirect_to=HOME_REDIRECT)

    async def logout(self) -> AuthResult:
        token = self._session.get_token()
        if token and self._revoke:
            try:
                await self._client.post(
                    f"{self._prefix}/user/logout",
                    headers={"Authorization": f"Bearer {token}"},
                )
            except httpx.HTTPError as e:
                logger.warning(f"Backend logout failed: {e}")
        self._session.clear()
        return AuthResult(success=True, redirect_to=LOGIN_REDIRECT)

    def check(self) -> AuthResult:
        """Authenticated iff a token is stored. Expiry is the watchdog's job."""
        if self._session.get_token():
            return AuthResult(success=True)
        return AuthResult(success=False, error="No token found", redirect_to=LOGIN_REDIRECT, logout=True)

    def get_identity(self) -> Identity | None:
        return identity_from_token(self._session.get_token())

    async def on_error(self, error: Exception) -> AuthResult:
        """Decide what an API failure means for the session.

        Only 401 ends the session; other errors are left to the caller.
        """
        status = None
        if isinstance(error, httpx.HTTPStatusError):
            status = error.response.status_code
        if status == 401 or "Unauthorized" in str(error):
            await self.logout()
            return AuthResult(success=False, logout=True, redirect_to=LOGIN_REDIRECT, error="Unauthorized")
        return AuthResult(success=True)

    async def guard(self, action: Awaitable[T]) -> T:
        """Await ``action``; a 401 ends the session and raises ``SessionEndedError``."""
        try:
            return await action
        except httpx.HTTPStatusError as e:
            outcome = await self.on_error(e)
            if outcome.logout:
                raise SessionEndedError(outcome.error) from e
            raise

    async def change_password(self, old_password: str, new_password: str) -> AuthResult:
        try:
            response = await self._client.put(
                f"{self._prefix}/user/change-password",
                json={"oldPassword": old_password, "password": new_password},
            )
        except httpx.HTTPError as e:
            logger.error(f"Change password request failed: {e}")
            return AuthResult(success=False, error="Network error")

        if not response.is_success:
            return AuthResult(
                success=False,
                error=error_message(_json_or_empty(response), "Failed to change password"),
            )
        return AuthResult(success=True)
