"""Pytest configuration and fixtures for fileshare-client tests."""

import pytest
import pytest_asyncio
import httpx
import respx
from typing import Dict, Optional

from fileshare_client.pipeline import Pipeline


SHARE_HOST = "myaccount.file.core.windows.net"
SHARE_URL = f"https://{SHARE_HOST}/myshare"
DIRECTORY_URL = f"{SHARE_URL}/mydirectory"


# ============================================================================
# Mock HTTP Responses
# ============================================================================


def service_headers(extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    """Headers the service sends on every response."""
    headers = {
        "x-ms-request-id": "req-123",
        "x-ms-version": "2018-03-28",
        "Date": "Mon, 01 Jul 2019 10:00:00 GMT",
    }
    if extra:
        headers.update(extra)
    return headers


def error_body(code: str, message: str) -> bytes:
    """Storage error document."""
    return (
        '<?xml version="1.0" encoding="utf-8"?>'
        f"<Error><Code>{code}</Code><Message>{message}</Message></Error>"
    ).encode("utf-8")


LIST_BODY = b"""<?xml version="1.0" encoding="utf-8"?>
<EnumerationResults ServiceEndpoint="https://myaccount.file.core.windows.net/" ShareName="myshare" DirectoryPath="mydirectory">
  <Marker>page-1</Marker>
  <Prefix>rep</Prefix>
  <MaxResults>2</MaxResults>
  <Entries>
    <File>
      <Name>report.txt</Name>
      <Properties>
        <Content-Length>1024</Content-Length>
      </Properties>
    </File>
    <Directory>
      <Name>reports</Name>
    </Directory>
  </Entries>
  <NextMarker>page-2</NextMarker>
</EnumerationResults>"""


LAST_PAGE_BODY = b"""<?xml version="1.0" encoding="utf-8"?>
<EnumerationResults ServiceEndpoint="https://myaccount.file.core.windows.net/" ShareName="myshare" DirectoryPath="mydirectory">
  <Marker />
  <Entries />
  <NextMarker />
</EnumerationResults>"""


# ============================================================================
# Fixtures
# ============================================================================


@pytest_asyncio.fixture
async def pipeline():
    """Pipeline with default settings, closed after the test."""
    pipeline = Pipeline()
    yield pipeline
    await pipeline.close()


@pytest.fixture
def directory_url():
    """Default directory URL for testing."""
    return DIRECTORY_URL


@pytest.fixture
def mock_service():
    """Route every httpx request through respx."""
    with respx.mock(assert_all_called=False) as router:
        yield router


@pytest.fixture
def ok_response():
    """Factory for a successful service response."""

    def factory(status_code: int = 200, headers: Optional[Dict[str, str]] = None, content: bytes = b""):
        return httpx.Response(status_code, headers=service_headers(headers), content=content)

    return factory
