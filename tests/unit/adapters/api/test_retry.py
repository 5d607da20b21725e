"""
Tests unitaires pour le mecanisme de retry avec backoff exponentiel.

Ces tests verifient:
- RateLimitError capture le header Retry-After
- with_retry relance sur les erreurs transitoires uniquement
- request_with_retry traduit 404, 5xx, 429 et erreurs reseau en erreurs du domaine
"""

import httpx
import pytest
import respx

from bcmirror.adapters.api.retry import (
    RateLimitError,
    ServerError,
    request_with_retry,
    with_retry,
)
from bcmirror.core.errors import (
    AuthenticationError,
    NotFoundError,
    RemoteError,
    TransportError,
)

URL = "https://api.example.com/data"


class TestRateLimitError:
    """Tests pour l'exception RateLimitError."""

    def test_rate_limit_error_stores_retry_after(self) -> None:
        """RateLimitError stocke la valeur Retry-After."""
        error = RateLimitError(retry_after=60)
        assert error.retry_after == 60
        assert "60" in str(error)

    def test_rate_limit_error_without_retry_after(self) -> None:
        error = RateLimitError(retry_after=None)
        assert error.retry_after is None


class TestWithRetryDecorator:
    """Tests pour le decorateur with_retry."""

    @pytest.mark.asyncio
    async def test_retries_on_server_error(self) -> None:
        """with_retry relance sur ServerError."""
        call_count = 0

        @with_retry(max_attempts=3, max_wait=0)
        async def flaky_function() -> str:
            nonlocal call_count
            call_count += 1
            if call_count < 3:
                raise ServerError(503)
            return "success"

        assert await flaky_function() == "success"
        assert call_count == 3

    @pytest.mark.asyncio
    async def test_stops_after_max_attempts(self) -> None:
        call_count = 0

        @with_retry(max_attempts=3, max_wait=0)
        async def always_fails() -> str:
            nonlocal call_count
            call_count += 1
            raise RateLimitError(retry_after=1)

        with pytest.raises(RateLimitError):
            await always_fails()
        assert call_count == 3

    @pytest.mark.asyncio
    async def test_does_not_retry_other_exceptions(self) -> None:
        call_count = 0

        @with_retry(max_attempts=3, max_wait=0)
        async def raises_value_error() -> str:
            nonlocal call_count
            call_count += 1
            raise ValueError("not transient")

        with pytest.raises(ValueError):
            await raises_value_error()
        assert call_count == 1


class TestRequestWithRetry:
    """Tests pour request_with_retry avec httpx."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_passes_on_success(self, respx_mock: respx.Router) -> None:
        route = respx_mock.get(URL).mock(
            return_value=httpx.Response(200, json={"data": "value"})
        )

        async with httpx.AsyncClient() as client:
            response = await request_with_retry(client, "GET", URL)

        assert response.json() == {"data": "value"}
        assert route.call_count == 1

    @pytest.mark.asyncio
    @respx.mock
    async def test_429_exhausted_becomes_transport_error(
        self, respx_mock: respx.Router
    ) -> None:
        route = respx_mock.get(URL).mock(
            return_value=httpx.Response(429, headers={"Retry-After": "30"})
        )

        async with httpx.AsyncClient() as client:
            with pytest.raises(TransportError) as exc_info:
                await request_with_retry(client, "GET", URL, max_attempts=3, max_wait=0)

        assert exc_info.value.status_code == 429
        assert isinstance(exc_info.value.__cause__, RateLimitError)
        assert exc_info.value.__cause__.retry_after == 30
        assert route.call_count == 3

    @pytest.mark.asyncio
    @respx.mock
    async def test_5xx_retried_then_succeeds(self, respx_mock: respx.Router) -> None:
        route = respx_mock.get(URL).mock(
            side_effect=[
                httpx.Response(503),
                httpx.Response(200, json={"status": "ok"}),
            ]
        )

        async with httpx.AsyncClient() as client:
            response = await request_with_retry(client, "GET", URL, max_attempts=3, max_wait=0)

        assert response.json() == {"status": "ok"}
        assert route.call_count == 2

    @pytest.mark.asyncio
    @respx.mock
    async def test_5xx_exhausted_becomes_transport_error(
        self, respx_mock: respx.Router
    ) -> None:
        respx_mock.get(URL).mock(return_value=httpx.Response(500))

        async with httpx.AsyncClient() as client:
            with pytest.raises(TransportError) as exc_info:
                await request_with_retry(client, "GET", URL, max_attempts=2, max_wait=0)

        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    @respx.mock
    async def test_network_error_becomes_transport_error(
        self, respx_mock: respx.Router
    ) -> None:
        route = respx_mock.get(URL).mock(side_effect=httpx.ConnectError("refused"))

        async with httpx.AsyncClient() as client:
            with pytest.raises(TransportError) as exc_info:
                await request_with_retry(client, "GET", URL, max_attempts=2, max_wait=0)

        assert exc_info.value.status_code is None
        assert route.call_count == 2

    @pytest.mark.asyncio
    @respx.mock
    async def test_404_is_not_found_without_retry(self, respx_mock: respx.Router) -> None:
        route = respx_mock.get(URL).mock(return_value=httpx.Response(404))

        async with httpx.AsyncClient() as client:
            with pytest.raises(NotFoundError):
                await request_with_retry(client, "GET", URL)

        assert route.call_count == 1

    @pytest.mark.asyncio
    @respx.mock
    async def test_other_4xx_is_remote_error(self, respx_mock: respx.Router) -> None:
        route = respx_mock.get(URL).mock(return_value=httpx.Response(403))

        async with httpx.AsyncClient() as client:
            with pytest.raises(RemoteError) as exc_info:
                await request_with_retry(client, "GET", URL)

        assert not isinstance(
            exc_info.value, (NotFoundError, TransportError, AuthenticationError)
        )
        assert route.call_count == 1

    @pytest.mark.asyncio
    @respx.mock
    async def test_401_is_authentication_error(self, respx_mock: respx.Router) -> None:
        route = respx_mock.get(URL).mock(return_value=httpx.Response(401))

        async with httpx.AsyncClient() as client:
            with pytest.raises(AuthenticationError):
                await request_with_retry(client, "GET", URL)

        assert route.call_count == 1
