"""Tests for HTTP utilities module."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from sectionize.exceptions import FetchError
from sectionize.http_utils import RETRY_STATUS_CODES, fetch_html


def _response(status_code: int, text: str = "") -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    if status_code >= 400:
        response.raise_for_status = MagicMock(
            side_effect=httpx.HTTPStatusError(
                f"HTTP {status_code}", request=MagicMock(), response=MagicMock()
            )
        )
    else:
        response.raise_for_status = MagicMock()
    return response


def _client(*responses) -> AsyncMock:
    client = AsyncMock()
    client.get = AsyncMock(side_effect=list(responses))
    return client


class TestRetryStatusCodes:
    """Tests for RETRY_STATUS_CODES constant."""

    def test_contains_expected_codes(self) -> None:
        """Should contain all expected retryable status codes."""
        assert RETRY_STATUS_CODES == frozenset({429, 500, 502, 503, 504})


class TestFetchHtml:
    """Tests for fetch_html."""

    @pytest.mark.asyncio
    async def test_returns_text(self) -> None:
        """Returns the body of a successful response."""
        client = _client(_response(200, "<h1>T</h1>"))

        result = await fetch_html("https://example.com", client=client)

        assert result == "<h1>T</h1>"
        client.get.assert_awaited_once_with("https://example.com")

    @pytest.mark.asyncio
    async def test_raises_on_404(self) -> None:
        """404 is not retried."""
        client = _client(_response(404))

        with pytest.raises(FetchError, match="not found"):
            await fetch_html("https://example.com/missing", client=client)

        assert client.get.await_count == 1

    @pytest.mark.asyncio
    async def test_raises_on_client_error(self) -> None:
        """Other 4xx responses fail immediately."""
        client = _client(_response(403))

        with pytest.raises(FetchError, match="HTTP 403"):
            await fetch_html("https://example.com", client=client)

        assert client.get.await_count == 1

    @pytest.mark.asyncio
    async def test_retries_on_retryable_status(self) -> None:
        """Retries 503 and returns the later success."""
        client = _client(_response(503), _response(200, "ok"))

        with patch("sectionize.http_utils.asyncio.sleep", new=AsyncMock()) as sleep:
            result = await fetch_html("https://example.com", client=client, max_retries=2, backoff_s=0.5)

        assert result == "ok"
        sleep.assert_awaited_once_with(0.5)

    @pytest.mark.asyncio
    async def test_retries_on_network_error(self) -> None:
        """Network errors are retried with exponential backoff until exhausted."""
        error = httpx.ConnectError("connection refused")
        client = _client(error, error, error)

        with patch("sectionize.http_utils.asyncio.sleep", new=AsyncMock()) as sleep:
            with pytest.raises(FetchError, match="connection refused"):
                await fetch_html("https://example.com", client=client, max_retries=2, backoff_s=1.0)

        assert client.get.await_count == 3
        assert [call.args[0] for call in sleep.await_args_list] == [1.0, 2.0]

    @pytest.mark.asyncio
    async def test_creates_client_when_missing(self) -> None:
        """A short-lived client is created when none is passed."""
        with patch("sectionize.http_utils.httpx.AsyncClient") as mock_client_class:
            mock_client = _client(_response(200, "<p>x</p>"))
            mock_client.__aenter__ = AsyncMock(return_value=mock_client)
            mock_client.__aexit__ = AsyncMock(return_value=None)
            mock_client_class.return_value = mock_client

            result = await fetch_html("https://example.com")

        assert result == "<p>x</p>"
        assert mock_client_class.call_args.kwargs["follow_redirects"] is True
