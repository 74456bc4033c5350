"""HTTP client for the applications backend.

Sends one JSON POST per submission. There is no retry and no timeout
override; httpx's default timeout bounds the call.
"""

from __future__ import annotations

import logging

import httpx

from onswift.models import FailureKind, SubmittedApplication

logger = logging.getLogger("onswift")

APPLICATIONS_PATH = "/api/applications/"


class SubmissionError(Exception):
    """A submission that did not reach a 2xx response with a JSON body."""

    def __init__(self, kind: FailureKind, message: str, status_code: int | None = None):
        super().__init__(message)
        self.kind = kind
        self.status_code = status_code


class ApplicationClient:
    """Posts submitted applications to ``{base_url}/api/applications/``."""

    def __init__(
        self,
        base_url: str,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._http = http_client or httpx.AsyncClient()

    @property
    def endpoint(self) -> str:
        return f"{self._base_url}{APPLICATIONS_PATH}"

    async def submit(self, application: SubmittedApplication) -> dict:
        """POST the application. Returns the decoded JSON response body.

        Raises SubmissionError for transport failures, non-2xx statuses and
        unparseable bodies.
        """
        payload = application.to_payload()
        logger.debug("Backend URL: %s", self._base_url)
        logger.debug("Payload: %s", payload)

        try:
            response = await self._http.post(self.endpoint, json=payload)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise SubmissionError(FailureKind.TRANSPORT, f"Request failed: {e}") from e

        if not response.is_success:
            raise SubmissionError(
                FailureKind.HTTP_STATUS,
                f"HTTP error! status: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            result = response.json()
        except ValueError as e:
            raise SubmissionError(
                FailureKind.TRANSPORT,
                f"Invalid JSON in response: {e}",
                status_code=response.status_code,
            ) from e

        logger.debug("Submission successful: %s", result)
        return result

    async def close(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> ApplicationClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
