"""Client for a single file in a share."""

from typing import Optional

from fileshare_client.aborter import resolve_abort_signal
from fileshare_client.generated.models import (
    FileCreateResponse,
    FileDeleteResponse,
    FileGetPropertiesResponse,
)
from fileshare_client.generated.operations import FileOperations
from fileshare_client.models import (
    FileCreateOptions,
    FileDeleteOptions,
    FileGetPropertiesOptions,
)
from fileshare_client.pipeline import Pipeline
from fileshare_client.storage_client import StorageClient


class FileClient(StorageClient):
    """A FileClient represents the URL of a file in a share."""

    def __init__(self, url: str, pipeline: Pipeline):
        super().__init__(url, pipeline)
        self._context = FileOperations(url, pipeline)

    async def create(
        self,
        size: int,
        options: Optional[FileCreateOptions] = None,
    ) -> FileCreateResponse:
        """
        Create a new file or replace an existing one. Only initializes the
        file with no content.

        Args:
            size: Maximum size of the file in bytes, up to 1 TB
            options: Metadata, HTTP headers and abort signal

        Returns:
            Response data for the File Create operation
        """
        options = options or FileCreateOptions()
        file_http_headers = options.file_http_headers
        return await self._context.create(
            size,
            abort_signal=resolve_abort_signal(options.abort_signal),
            metadata=options.metadata,
            file_http_headers=file_http_headers.to_headers() if file_http_headers else None,
        )

    async def delete(self, options: Optional[FileDeleteOptions] = None) -> FileDeleteResponse:
        """
        Remove the file from the storage account.

        Fails with 409 (SharingViolation) if the file is open on an SMB client.
        """
        options = options or FileDeleteOptions()
        return await self._context.delete(abort_signal=resolve_abort_signal(options.abort_signal))

    async def get_properties(
        self,
        options: Optional[FileGetPropertiesOptions] = None,
    ) -> FileGetPropertiesResponse:
        """Get metadata and system properties of the file."""
        options = options or FileGetPropertiesOptions()
        return await self._context.get_properties(
            abort_signal=resolve_abort_signal(options.abort_signal)
        )
