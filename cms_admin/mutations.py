"""Result-typed wrapper for create/update/delete calls made from the UI."""

import logging
from dataclasses import dataclass
from typing import Any, Awaitable

import httpx

from cms_admin.auth.provider import AuthProvider
from cms_admin.errors import CMSAdminError

logger = logging.getLogger(__name__)


@dataclass
class MutationResult:
    success: bool
    data: Any = None
    error: str | None = None
    status_code: int | None = None
    logout: bool = False


async def run_mutation(
    action: Awaitable[dict[str, Any]],
    failure_message: str,
    auth: AuthProvider | None = None,
) -> MutationResult:
    """Await one adapter call. No retry; the caller shows ``error`` to the user.

    With ``auth`` given, HTTP failures go through ``AuthProvider.on_error``
    and a rejected token ends the session (``logout`` is set).
    """
    try:
        result = await action
    except httpx.HTTPStatusError as e:
        logger.error(f"{failure_message}: {e.response.status_code} {e.response.text[:200]}")
        outcome = await auth.on_error(e) if auth else None
        return MutationResult(
            success=False,
            error=failure_message,
            status_code=e.response.status_code,
            logout=bool(outcome and outcome.logout),
        )
    except (httpx.HTTPError, CMSAdminError) as e:
        logger.error(f"{failure_message}: {e}")
        return MutationResult(success=False, error=failure_message)
    return MutationResult(success=True, data=(result or {}).get("data"))
