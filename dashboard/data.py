"""Shared data access layer for the Streamlit dashboard.

Streamlit scripts are synchronous, so each function here runs one
coroutine against the async client with ``asyncio.run`` and a fresh
``httpx.AsyncClient``. The session lives in the JSON session file, so it
survives Streamlit re-runs.

A 401 from the backend clears the session: reads raise
``SessionEndedError`` and mutations return ``MutationResult.logout``.
"""

import asyncio
from typing import Any, Awaitable, Callable

import httpx

from cms_admin.auth.provider import AuthProvider, AuthResult, Identity, identity_from_token
from cms_admin.auth.watchdog import ExpiryWatchdog
from cms_admin.client import build_client
from cms_admin.config import settings
from cms_admin.export import fetch_all_subscribers, subscribers_to_csv, subscribers_to_xlsx
from cms_admin.log import configure_logging
from cms_admin.mail.brevo_client import BrevoClient, EmailResult
from cms_admin.mutations import MutationResult, run_mutation
from cms_admin.providers import facade
from cms_admin.providers.base import Filter, Pagination, Sorter
from cms_admin.providers.facade import DataProvider, build_data_provider
from cms_admin.session import FileSessionStore

configure_logging(settings.log_level)

session = FileSessionStore(settings.session_file)


def _run(work: Callable[[httpx.AsyncClient], Awaitable[Any]]) -> Any:
    async def runner():
        async with build_client(session, settings) as client:
            return await AuthProvider(client, session).guard(work(client))

    return asyncio.run(runner())


def _provider(client: httpx.AsyncClient) -> DataProvider:
    return build_data_provider(client, settings.api_prefix)


def _mutate(call: Callable[[DataProvider], Awaitable[dict]], failure_message: str) -> MutationResult:
    return _run(
        lambda client: run_mutation(call(_provider(client)), failure_message, auth=AuthProvider(client, session))
    )


# --- Auth ---


def login(email: str, password: str, remember_me: bool = False) -> AuthResult:
    return _run(lambda client: AuthProvider(client, session).login(email, password, remember_me))


def logout() -> AuthResult:
    return _run(lambda client: AuthProvider(client, session).logout())


def is_authenticated() -> bool:
    return session.get_token() is not None


def current_identity() -> Identity | None:
    return identity_from_token(session.get_token())


def change_password(old_password: str, new_password: str) -> AuthResult:
    return _run(lambda client: AuthProvider(client, session).change_password(old_password, new_password))


def check_expiry() -> bool:
    """One watchdog tick. True when the session was just ended."""

    async def work(client):
        auth = AuthProvider(client, session)
        return await ExpiryWatchdog(session, auth.logout).check_once()

    return _run(work)


# --- Records ---


def list_records(
    resource: str,
    page: int = 1,
    page_size: int = 10,
    search_field: str | None = None,
    search: str | None = None,
    sort_field: str | None = None,
    sort_order: str = "asc",
) -> dict:
    filters = [Filter(search_field, "contains", search)] if search_field and search else None
    sorters = [Sorter(sort_field, sort_order)] if sort_field else None
    return _run(
        lambda client: _provider(client).get_list(
            resource, Pagination(current=page, page_size=page_size), filters, sorters
        )
    )


def get_record(resource: str, record_id: str) -> dict:
    return _run(lambda client: _provider(client).get_one(resource, record_id))["data"]


def record_id(resource: str, record: dict) -> str | None:
    return facade.record_id(resource, record)


def save_record(resource: str, values: dict, record_id: str | None = None) -> MutationResult:
    if record_id is None:
        return _mutate(lambda provider: provider.create(resource, values), f"Failed to create {resource}.")
    return _mutate(lambda provider: provider.update(resource, record_id, values), f"Failed to update {resource}.")


def delete_record(resource: str, record_id: str) -> MutationResult:
    return _mutate(lambda provider: provider.delete_one(resource, record_id), f"Failed to delete {resource}.")


def active_authors() -> list[dict]:
    return _run(lambda client: _provider(client).adapter_for("user").active_users())


def get_site_settings() -> dict:
    return _run(lambda client: _provider(client).get_one("setting", settings.setting_id))["data"] or {}


# --- Newsletter ---


def export_subscribers(search: str | None = None, file_format: str = "csv") -> str | bytes:
    """Every matching subscriber as CSV text or XLSX bytes."""
    render = subscribers_to_xlsx if file_format == "xlsx" else subscribers_to_csv

    async def work(client):
        return render(await fetch_all_subscribers(_provider(client), search))

    return _run(work)


# --- Users ---


def send_credentials(email: str, username: str, password: str) -> EmailResult:
    return BrevoClient().send_credentials(email, username, password)
