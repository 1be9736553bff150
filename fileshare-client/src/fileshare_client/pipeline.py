"""
Request pipeline for the file share REST API.

The pipeline is the shared, caller-owned execution context every client
sends its requests through. It is built on httpx and provides:
- Service version and user agent headers
- A credential hook for signing requests
- Abort signal handling for in-flight requests
- Conversion of error responses to exceptions
- Request/response logging

The pipeline never retries.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Union
from xml.etree import ElementTree as ET
import asyncio
import logging

import httpx

from fileshare_client.aborter import Aborter, resolve_abort_signal
from fileshare_client.exceptions import (
    NetworkError,
    RequestAbortedError,
    ConnectionError as ClientConnectionError,
    TimeoutError as ClientTimeoutError,
    exception_from_response,
)
from fileshare_client.settings import settings
from fileshare_client.url import redact_url

logger = logging.getLogger(__name__)


class Credential(ABC):
    """Abstract base class for request credentials."""

    @abstractmethod
    def sign_request(self, method: str, url: str, headers: Dict[str, str]) -> Dict[str, str]:
        """Return the headers to send, adding whatever the credential needs."""
        ...


class AnonymousCredential(Credential):
    """
    Credential for anonymous access or URLs that already carry a SAS token.

    The request is sent unchanged.
    """

    def sign_request(self, method: str, url: str, headers: Dict[str, str]) -> Dict[str, str]:
        return headers


class Pipeline:
    """
    Shared request execution context.

    One pipeline can back any number of directory and file clients. The
    caller owns it and closes it when done.
    """

    def __init__(
        self,
        credential: Optional[Credential] = None,
        *,
        timeout: Optional[float] = None,
        headers: Optional[Dict[str, str]] = None,
        api_version: Optional[str] = None,
    ):
        """
        Initialize the pipeline.

        Args:
            credential: Credential used to sign requests (anonymous by default)
            timeout: Transport timeout in seconds (FILESHARE_TIMEOUT by default)
            headers: Additional headers to include in all requests
            api_version: Value of x-ms-version (FILESHARE_API_VERSION by default)
        """
        self.credential = credential or AnonymousCredential()
        self.timeout = timeout if timeout is not None else settings.FILESHARE_TIMEOUT
        self.api_version = api_version or settings.FILESHARE_API_VERSION
        self._default_headers = headers or {}
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the underlying httpx client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=httpx.Timeout(self.timeout))
        return self._client

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "Pipeline":
        self._get_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _build_headers(self, extra_headers: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        """Build request headers with the service version."""
        headers = {
            "x-ms-version": self.api_version,
            "User-Agent": settings.FILESHARE_USER_AGENT,
            **self._default_headers,
        }
        if extra_headers:
            headers.update(extra_headers)
        return headers

    def _handle_error_response(self, response: httpx.Response) -> None:
        """Convert an error response to the matching exception."""
        status_code = response.status_code
        error_code = response.headers.get("x-ms-error-code")
        request_id = response.headers.get("x-ms-request-id")
        detail = None
        details: Dict[str, Any] = {}

        # HEAD responses and some proxies return no body
        if response.content:
            try:
                root = ET.fromstring(response.content)
            except ET.ParseError:
                detail = response.text
            else:
                error_code = error_code or root.findtext("Code")
                detail = root.findtext("Message")
                for child in root:
                    if child.tag not in ("Code", "Message"):
                        details[child.tag] = child.text

        detail = (detail or response.reason_phrase or f"HTTP {status_code}").strip()
        logger.warning(
            "%s %s failed: %s %s",
            response.request.method,
            redact_url(response.request.url),
            status_code,
            error_code,
        )
        raise exception_from_response(
            status_code,
            detail,
            error_code=error_code,
            request_id=request_id,
            details=details,
        )

    async def _send_with_abort(self, request: httpx.Request, abort_signal: Aborter) -> httpx.Response:
        """Send ``request``, cancelling it if ``abort_signal`` fires first."""
        client = self._get_client()
        if abort_signal is Aborter.NONE:
            return await client.send(request)

        loop = asyncio.get_running_loop()
        aborted = loop.create_future()

        def on_abort() -> None:
            if not aborted.done():
                aborted.set_result(None)

        send_task = asyncio.ensure_future(client.send(request))
        abort_signal.add_listener(on_abort)
        try:
            done, _ = await asyncio.wait(
                {send_task, aborted},
                timeout=abort_signal.remaining(),
                return_when=asyncio.FIRST_COMPLETED,
            )
        except asyncio.CancelledError:
            await _cancel_and_wait(send_task)
            raise
        finally:
            abort_signal.remove_listener(on_abort)
            aborted.cancel()

        if send_task in done:
            return send_task.result()

        await _cancel_and_wait(send_task)
        logger.debug("%s %s aborted", request.method, redact_url(request.url))
        raise RequestAbortedError()

    async def send(
        self,
        method: str,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        content: Optional[Union[str, bytes]] = None,
        abort_signal: Optional[Aborter] = None,
    ) -> httpx.Response:
        """
        Send one request.

        Args:
            method: HTTP method (GET, HEAD, PUT, DELETE)
            url: Absolute resource URL, possibly carrying a SAS query string
            params: Query parameters merged into the URL's query; None values are dropped
            headers: Additional headers
            content: Request body
            abort_signal: Cancellation token for this request

        Returns:
            httpx.Response object for a 2xx response

        Raises:
            StorageClientError: On service error responses
            RequestAbortedError: When the abort signal fires first
            NetworkError: On transport failures
            TimeoutError: On transport timeout
        """
        abort_signal = resolve_abort_signal(abort_signal)
        if abort_signal.aborted:
            raise RequestAbortedError()

        # Clean query params
        if params:
            params = {k: v for k, v in params.items() if v is not None}

        # Merge into the query so a SAS token on the URL survives
        request_url = httpx.URL(url)
        if params:
            request_url = request_url.copy_merge_params(params)

        request_headers = self.credential.sign_request(
            method, str(request_url), self._build_headers(headers)
        )
        request = self._get_client().build_request(
            method,
            request_url,
            headers=request_headers,
            content=content,
        )
        logger.debug("%s %s", method, redact_url(request.url))

        try:
            response = await self._send_with_abort(request, abort_signal)
        except httpx.TimeoutException as e:
            raise ClientTimeoutError(f"Request timed out: {e}") from e
        except httpx.ConnectError as e:
            raise ClientConnectionError(f"Connection failed: {e}") from e
        except httpx.HTTPError as e:
            raise NetworkError(f"Request failed: {e}") from e

        logger.debug("%s %s -> %s", method, redact_url(request.url), response.status_code)
        if not response.is_success:
            self._handle_error_response(response)
        return response


async def _cancel_and_wait(task: "asyncio.Future") -> None:
    """Cancel ``task`` and wait until it has finished unwinding."""
    task.cancel()
    await asyncio.gather(task, return_exceptions=True)


def new_pipeline(
    credential: Optional[Credential] = None,
    *,
    timeout: Optional[float] = None,
    headers: Optional[Dict[str, str]] = None,
    api_version: Optional[str] = None,
) -> Pipeline:
    """Create a pipeline with default settings."""
    return Pipeline(credential, timeout=timeout, headers=headers, api_version=api_version)
