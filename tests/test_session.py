"""Tests for FormSession submission flow and ApplicationClient."""

import json
from dataclasses import replace

import httpx
import pytest

from onswift.client import ApplicationClient, SubmissionError
from onswift.models import Application, FailureKind, SubmitResult
from onswift.session import FormSession
from tests.conftest import BASE_URL, words


def ok_handler(request: httpx.Request) -> httpx.Response:
    return httpx.Response(201, json={"id": 1})


class TestFormState:
    def test_update_revalidates(self, make_client):
        client, _ = make_client(ok_handler)
        session = FormSession(client)

        state = session.update("fullName", "J")
        assert state.errors["full_name"] == "Name must be at least 2 characters"

        state = session.update("full_name", "Jane")
        assert "full_name" not in state.errors

    def test_live_signal_and_counters(self, make_client):
        client, _ = make_client(ok_handler)
        session = FormSession(client)
        session.update("experience", "3-5")
        state = session.update("why_on_swift", words(50))

        assert state.signal.has_experience
        assert state.signal.has_thoughtful_answer
        assert state.word_count == 50
        assert state.char_counts["why_on_swift"] == (len(words(50)), 500)
        assert state.char_counts["project1"] == (0, 100)

    def test_state_is_stable_without_changes(self, make_client, valid_application):
        client, _ = make_client(ok_handler)
        session = FormSession(client, application=valid_application)
        assert session.state() == session.state()


class TestSubmit:
    @pytest.mark.asyncio
    async def test_qualified_application_succeeds(self, make_client, valid_application):
        client, requests = make_client(ok_handler)
        session = FormSession(client, application=valid_application)

        result = await session.submit()

        assert result == SubmitResult.SUCCESS
        assert session.result == SubmitResult.SUCCESS
        assert session.submitting is False
        assert session.last_failure is None
        assert len(requests) == 1

    @pytest.mark.asyncio
    async def test_request_shape(self, make_client, valid_application):
        client, requests = make_client(ok_handler)
        await FormSession(client, application=valid_application).submit()

        request = requests[0]
        assert request.method == "POST"
        assert str(request.url) == f"{BASE_URL}/api/applications/"
        assert request.headers["content-type"] == "application/json"
        body = json.loads(request.content)
        assert body["full_name"] == "Jane Doe"
        assert body["hourly_rate"] == "50-80"
        assert body["why_on_swift"] == valid_application.why_on_swift
        assert "fullName" not in body

    @pytest.mark.asyncio
    async def test_junior_rejected_despite_success(self, make_client, valid_application):
        client, requests = make_client(ok_handler)
        app = replace(valid_application, experience="0-2")
        session = FormSession(client, application=app)

        result = await session.submit()

        assert result == SubmitResult.REJECTED
        assert session.last_failure == FailureKind.QUALIFICATION
        assert len(requests) == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [400, 404, 500, 503])
    async def test_non_2xx_is_rejected(self, make_client, valid_application, status):
        client, _ = make_client(lambda r: httpx.Response(status, json={"detail": "no"}))
        session = FormSession(client, application=valid_application)

        assert await session.submit() == SubmitResult.REJECTED
        assert session.last_failure == FailureKind.HTTP_STATUS
        assert session.submitting is False

    @pytest.mark.asyncio
    async def test_network_error_is_rejected(self, make_client, valid_application):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        client, _ = make_client(handler)
        session = FormSession(client, application=valid_application)

        assert await session.submit() == SubmitResult.REJECTED
        assert session.last_failure == FailureKind.TRANSPORT
        assert session.submitting is False

    @pytest.mark.asyncio
    async def test_unparseable_body_is_rejected(self, make_client, valid_application):
        client, _ = make_client(lambda r: httpx.Response(200, text="<html>ok</html>"))
        session = FormSession(client, application=valid_application)

        assert await session.submit() == SubmitResult.REJECTED
        assert session.last_failure == FailureKind.TRANSPORT

    @pytest.mark.asyncio
    async def test_unexpected_error_is_rejected(self, make_client, valid_application):
        def handler(request):
            raise RuntimeError("boom")

        client, _ = make_client(handler)
        session = FormSession(client, application=valid_application)

        assert await session.submit() == SubmitResult.REJECTED
        assert session.submitting is False

    @pytest.mark.asyncio
    async def test_invalid_application_blocks_without_request(self, make_client, valid_application):
        client, requests = make_client(ok_handler)
        app = replace(valid_application, project1="too short")
        session = FormSession(client, application=app)

        result = await session.submit()

        assert result == SubmitResult.NONE
        assert requests == []
        assert session.state().errors == {"project1": "Please describe your project"}

    @pytest.mark.asyncio
    async def test_submitting_flag_set_during_request(self, make_client, valid_application):
        seen = []
        session = None

        def handler(request):
            seen.append(session.submitting)
            return httpx.Response(200, json={})

        client, _ = make_client(handler)
        session = FormSession(client, application=valid_application)
        await session.submit()

        assert seen == [True]
        assert session.submitting is False

    @pytest.mark.asyncio
    async def test_resubmit_while_in_flight_is_refused(self, make_client, valid_application):
        client, requests = make_client(ok_handler)
        session = FormSession(client, application=valid_application)
        session.submitting = True

        assert await session.submit() == SubmitResult.NONE
        assert requests == []

    @pytest.mark.asyncio
    async def test_empty_base_url_takes_rejection_path(self, valid_application):
        async with ApplicationClient("") as client:
            session = FormSession(client, application=valid_application)
            assert await session.submit() == SubmitResult.REJECTED
            assert session.last_failure == FailureKind.TRANSPORT


class TestReturnToForm:
    @pytest.mark.asyncio
    async def test_keeps_values_by_default(self, make_client, valid_application):
        client, _ = make_client(ok_handler)
        session = FormSession(client, application=valid_application)
        await session.submit()

        state = session.return_to_form()

        assert state.result == SubmitResult.NONE
        assert session.application.full_name == "Jane Doe"
        assert state.is_valid

    @pytest.mark.asyncio
    async def test_clears_values_when_configured(self, make_client, valid_application):
        client, _ = make_client(ok_handler)
        session = FormSession(client, application=valid_application, clear_on_return=True)
        await session.submit()

        state = session.return_to_form()

        assert state.result == SubmitResult.NONE
        assert session.application == Application()
        assert not state.is_valid


class TestApplicationClient:
    @pytest.mark.asyncio
    async def test_returns_json_body(self, make_client, valid_application):
        client, _ = make_client(lambda r: httpx.Response(200, json={"status": "received"}))
        result = await client.submit(valid_application.freeze())
        assert result == {"status": "received"}

    @pytest.mark.asyncio
    async def test_status_error_carries_code(self, make_client, valid_application):
        client, _ = make_client(lambda r: httpx.Response(422, json={}))
        with pytest.raises(SubmissionError) as exc_info:
            await client.submit(valid_application.freeze())
        assert exc_info.value.kind == FailureKind.HTTP_STATUS
        assert exc_info.value.status_code == 422

    def test_endpoint_strips_trailing_slash(self):
        client = ApplicationClient("https://api.example.com/")
        assert client.endpoint == "https://api.example.com/api/applications/"
