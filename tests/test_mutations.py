"""Tests for result-typed mutations."""

import httpx
import pytest

from cms_admin.auth.provider import AuthProvider
from cms_admin.errors import UnsupportedOperationError
from cms_admin.mutations import run_mutation


async def succeed():
    return {"data": {"faq_id": "f1"}}


async def reject():
    request = httpx.Request("POST", "http://backend.test/api/v1/faq")
    response = httpx.Response(422, text="question too short", request=request)
    raise httpx.HTTPStatusError("422", request=request, response=response)


async def unauthorized():
    request = httpx.Request("PUT", "http://backend.test/api/v1/faq/f1")
    response = httpx.Response(401, json={"message": "jwt expired"}, request=request)
    raise httpx.HTTPStatusError("401", request=request, response=response)


async def unreachable():
    raise httpx.ConnectError("down")


async def unsupported():
    raise UnsupportedOperationError("contact", "create")


class TestRunMutation:
    @pytest.mark.asyncio
    async def test_success_carries_data(self):
        result = await run_mutation(succeed(), "Failed to create faq.")
        assert result.success
        assert result.data == {"faq_id": "f1"}
        assert result.error is None

    @pytest.mark.asyncio
    async def test_http_error_becomes_message(self):
        result = await run_mutation(reject(), "Failed to create faq.")
        assert not result.success
        assert result.error == "Failed to create faq."
        assert result.status_code == 422

    @pytest.mark.asyncio
    async def test_transport_error_becomes_message(self):
        result = await run_mutation(unreachable(), "Failed to delete blog.")
        assert result.error == "Failed to delete blog."
        assert result.status_code is None

    @pytest.mark.asyncio
    async def test_unsupported_operation_becomes_message(self):
        result = await run_mutation(unsupported(), "Failed to create contact.")
        assert not result.success

    @pytest.mark.asyncio
    async def test_401_ends_session(self, mock_backend, session):
        session.save("a.b.c")
        client, _ = mock_backend(lambda r: httpx.Response(200))
        auth = AuthProvider(client, session, revoke_on_logout=False)

        result = await run_mutation(unauthorized(), "Failed to update faq.", auth=auth)

        assert not result.success
        assert result.logout
        assert result.status_code == 401
        assert session.get_token() is None

    @pytest.mark.asyncio
    async def test_other_status_keeps_session(self, mock_backend, session):
        session.save("a.b.c")
        client, _ = mock_backend(lambda r: httpx.Response(200))

        result = await run_mutation(reject(), "Failed to create faq.", auth=AuthProvider(client, session))

        assert not result.logout
        assert session.get_token() == "a.b.c"
