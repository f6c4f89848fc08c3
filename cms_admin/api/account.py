"""Account routes: password change proxy and new-user credential emails."""

import logging
from typing import AsyncGenerator

import httpx
from fastapi import APIRouter, Depends, Header
from fastapi.responses import JSONResponse
from pydantic import BaseModel, EmailStr

from cms_admin.auth.provider import error_message
from cms_admin.config import settings
from cms_admin.mail.brevo_client import BrevoClient

logger = logging.getLogger(__name__)

router = APIRouter()


class ChangePasswordRequest(BaseModel):
    oldPassword: str
    password: str


class SendCredentialsRequest(BaseModel):
    email: EmailStr
    username: str
    password: str


async def get_backend_client() -> AsyncGenerator[httpx.AsyncClient, None]:
    async with httpx.AsyncClient(
        base_url=settings.backend_url, timeout=settings.request_timeout_seconds
    ) as client:
        yield client


def get_brevo_client() -> BrevoClient:
    return BrevoClient()


def bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    token = authorization.removeprefix("Bearer ").strip()
    return token or None


@router.put("/change-password")
async def change_password(
    data: ChangePasswordRequest,
    authorization: str | None = Header(default=None),
    client: httpx.AsyncClient = Depends(get_backend_client),
):
    """Forward a password change to the backend with the caller's token."""
    token = bearer_token(authorization)
    if not token:
        return JSONResponse({"status": "false", "message": "Unauthorized"}, status_code=401)

    try:
        response = await client.put(
            f"{settings.api_prefix}/user/change-password",
            json={"oldPassword": data.oldPassword, "password": data.password},
            headers={"Authorization": f"Bearer {token}"},
        )
    except httpx.HTTPError as e:
        logger.error(f"Error changing password: {e}")
        return JSONResponse({"status": "false", "message": str(e) or "Internal server error"}, status_code=500)

    if not response.is_success:
        try:
            body = response.json()
        except ValueError:
            body = {}
        message = error_message(body, "Failed to change password")
        return JSONResponse({"status": "false", "message": message}, status_code=response.status_code)

    return {"status": "true", "message": "Password changed successfully"}


@router.post("/send-credentials")
async def send_credentials(data: SendCredentialsRequest, brevo: BrevoClient = Depends(get_brevo_client)):
    """Email a newly created user their username and temporary password."""
    result = brevo.send_credentials(str(data.email), data.username, data.password)
    if not result.success:
        return JSONResponse({"error": result.error}, status_code=400)
    return {"success": True, "message_id": result.message_id}
