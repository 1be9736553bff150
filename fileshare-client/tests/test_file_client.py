"""Tests for the FileClient."""

import pytest
from unittest.mock import AsyncMock

from fileshare_client.aborter import Aborter
from fileshare_client.file_client import FileClient
from fileshare_client.generated.operations import FileOperations
from fileshare_client.models import (
    FileCreateOptions,
    FileDeleteOptions,
    FileGetPropertiesOptions,
    FileHTTPHeaders,
)
from fileshare_client.exceptions import SharingViolationError
from conftest import DIRECTORY_URL

FILE_URL = f"{DIRECTORY_URL}/report.txt"


@pytest.fixture
def file_client(pipeline):
    """File client whose protocol layer is mocked."""
    client = FileClient(FILE_URL, pipeline)
    client._context = AsyncMock(spec=FileOperations)
    return client


class TestFileClient:
    """Tests for FileClient delegation."""

    def test_properties(self, pipeline):
        client = FileClient(FILE_URL, pipeline)
        assert client.url == FILE_URL
        assert client.pipeline is pipeline
        assert client.path == "/myshare/mydirectory/report.txt"

    @pytest.mark.asyncio
    async def test_create_defaults(self, file_client):
        result = await file_client.create(512)

        file_client._context.create.assert_awaited_once_with(
            512,
            abort_signal=Aborter.NONE,
            metadata=None,
            file_http_headers=None,
        )
        assert result is file_client._context.create.return_value

    @pytest.mark.asyncio
    async def test_create_with_headers(self, file_client):
        aborter = Aborter()
        options = FileCreateOptions(
            abort_signal=aborter,
            metadata={"kind": "report"},
            file_http_headers=FileHTTPHeaders(content_type="text/plain", cache_control="no-cache"),
        )

        await file_client.create(0, options)

        file_client._context.create.assert_awaited_once_with(
            0,
            abort_signal=aborter,
            metadata={"kind": "report"},
            file_http_headers={
                "x-ms-content-type": "text/plain",
                "x-ms-cache-control": "no-cache",
            },
        )

    @pytest.mark.asyncio
    async def test_delete(self, file_client):
        aborter = Aborter()
        await file_client.delete(FileDeleteOptions(abort_signal=aborter))
        file_client._context.delete.assert_awaited_once_with(abort_signal=aborter)

    @pytest.mark.asyncio
    async def test_delete_sharing_violation_propagates(self, file_client):
        file_client._context.delete.side_effect = SharingViolationError("open on an SMB client")

        with pytest.raises(SharingViolationError):
            await file_client.delete()

    @pytest.mark.asyncio
    async def test_get_properties(self, file_client):
        await file_client.get_properties()
        file_client._context.get_properties.assert_awaited_once_with(abort_signal=Aborter.NONE)

        aborter = Aborter()
        await file_client.get_properties(FileGetPropertiesOptions(abort_signal=aborter))
        file_client._context.get_properties.assert_awaited_with(abort_signal=aborter)
