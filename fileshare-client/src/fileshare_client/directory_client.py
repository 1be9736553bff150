"""
Client for a directory in a share.

Example usage:
    ```python
    async with new_pipeline() as pipeline:
        share = DirectoryClient("https://myaccount.file.core.windows.net/myshare?<sas>", pipeline)
        result = await share.create_subdirectory("reports")
        await result.directory_client.create_file("summary.txt", 1024)

        marker = None
        while True:
            page = await result.directory_client.list_files_and_directories_segment(marker)
            for item in page.segment.file_items:
                print(item.name, item.properties.content_length)
            marker = page.next_marker
            if not marker:
                break
    ```
"""

from typing import NamedTuple, Optional

from fileshare_client.aborter import resolve_abort_signal
from fileshare_client.file_client import FileClient
from fileshare_client.generated.models import (
    DirectoryCreateResponse,
    DirectoryDeleteResponse,
    DirectoryGetPropertiesResponse,
    DirectoryListFilesAndDirectoriesSegmentResponse,
    DirectorySetMetadataResponse,
    FileCreateResponse,
    FileDeleteResponse,
)
from fileshare_client.generated.operations import DirectoryOperations
from fileshare_client.models import (
    DirectoryCreateOptions,
    DirectoryDeleteOptions,
    DirectoryGetPropertiesOptions,
    DirectoryListFilesAndDirectoriesSegmentOptions,
    DirectorySetMetadataOptions,
    FileCreateOptions,
    FileDeleteOptions,
    Metadata,
)
from fileshare_client.pipeline import Pipeline
from fileshare_client.storage_client import StorageClient
from fileshare_client.url import append_to_url_path, encode_path_segment


class DirectoryCreateSubdirectoryResult(NamedTuple):
    directory_client: "DirectoryClient"
    directory_create_response: DirectoryCreateResponse


class DirectoryCreateFileResult(NamedTuple):
    file_client: FileClient
    file_create_response: FileCreateResponse


class DirectoryClient(StorageClient):
    """
    A DirectoryClient represents the URL of a directory in a share and lets
    you manipulate its files and subdirectories.

    Every call sends one request through the shared pipeline and returns the
    service response as is. Errors are not caught or retried.
    """

    def __init__(self, url: str, pipeline: Pipeline):
        super().__init__(url, pipeline)
        self._context = DirectoryOperations(url, pipeline)

    async def create(
        self,
        options: Optional[DirectoryCreateOptions] = None,
    ) -> DirectoryCreateResponse:
        """
        Create a new directory under the specified share or parent directory.

        Args:
            options: Metadata and abort signal

        Returns:
            Response data for the Directory Create operation

        Raises:
            ResourceExistsError: If the directory already exists
        """
        options = options or DirectoryCreateOptions()
        return await self._context.create(
            abort_signal=resolve_abort_signal(options.abort_signal),
            metadata=options.metadata,
        )

    def create_directory_client(self, sub_directory_name: str) -> "DirectoryClient":
        """Create a DirectoryClient for a subdirectory. No request is sent."""
        return DirectoryClient(
            append_to_url_path(self.url, encode_path_segment(sub_directory_name)),
            self.pipeline,
        )

    def create_file_client(self, file_name: str) -> FileClient:
        """Create a FileClient for a file in this directory. No request is sent."""
        return FileClient(
            append_to_url_path(self.url, encode_path_segment(file_name)),
            self.pipeline,
        )

    async def create_subdirectory(
        self,
        directory_name: str,
        options: Optional[DirectoryCreateOptions] = None,
    ) -> DirectoryCreateSubdirectoryResult:
        """
        Create a new subdirectory under this directory.

        Returns:
            The client for the new subdirectory and the creation response
        """
        directory_client = self.create_directory_client(directory_name)
        directory_create_response = await directory_client.create(options)
        return DirectoryCreateSubdirectoryResult(directory_client, directory_create_response)

    async def delete_subdirectory(
        self,
        directory_name: str,
        options: Optional[DirectoryDeleteOptions] = None,
    ) -> DirectoryDeleteResponse:
        """Remove an empty subdirectory of this directory."""
        directory_client = self.create_directory_client(directory_name)
        return await directory_client.delete(options)

    async def create_file(
        self,
        file_name: str,
        size: int,
        options: Optional[FileCreateOptions] = None,
    ) -> DirectoryCreateFileResult:
        """
        Create a new file or replace a file under this directory. Only
        initializes the file with no content.

        Args:
            file_name: Name of the file
            size: Maximum size of the file in bytes, up to 1 TB
            options: Options to the File Create operation

        Returns:
            The client for the file and the creation response
        """
        file_client = self.create_file_client(file_name)
        file_create_response = await file_client.create(size, options)
        return DirectoryCreateFileResult(file_client, file_create_response)

    async def delete_file(
        self,
        file_name: str,
        options: Optional[FileDeleteOptions] = None,
    ) -> FileDeleteResponse:
        """
        Remove a file in this directory from the storage account.

        The file becomes inaccessible immediately; its data is removed later
        during garbage collection. Fails with 409 (SharingViolation) if the
        file is open on an SMB client, and with 400 on a share snapshot.
        """
        file_client = self.create_file_client(file_name)
        return await file_client.delete(options)

    async def get_properties(
        self,
        options: Optional[DirectoryGetPropertiesOptions] = None,
    ) -> DirectoryGetPropertiesResponse:
        """
        Get all system properties and metadata of the directory.

        Also serves as an existence check: a missing directory raises
        NotFoundError. The response does not include the directory's contents.
        """
        options = options or DirectoryGetPropertiesOptions()
        return await self._context.get_properties(
            abort_signal=resolve_abort_signal(options.abort_signal)
        )

    async def delete(
        self,
        options: Optional[DirectoryDeleteOptions] = None,
    ) -> DirectoryDeleteResponse:
        """
        Remove the directory. The directory must be empty.

        Raises:
            DirectoryNotEmptyError: If the directory still has children
        """
        options = options or DirectoryDeleteOptions()
        return await self._context.delete(abort_signal=resolve_abort_signal(options.abort_signal))

    async def set_metadata(
        self,
        metadata: Optional[Metadata] = None,
        options: Optional[DirectorySetMetadataOptions] = None,
    ) -> DirectorySetMetadataResponse:
        """
        Replace the user-defined metadata of the directory.

        Args:
            metadata: New metadata; when omitted all existing metadata is removed
            options: Abort signal
        """
        options = options or DirectorySetMetadataOptions()
        return await self._context.set_metadata(
            abort_signal=resolve_abort_signal(options.abort_signal),
            metadata=metadata,
        )

    async def list_files_and_directories_segment(
        self,
        marker: Optional[str] = None,
        options: Optional[DirectoryListFilesAndDirectoriesSegmentOptions] = None,
    ) -> DirectoryListFilesAndDirectoriesSegmentResponse:
        """
        List one page of the files and subdirectories directly under this
        directory.

        Args:
            marker: ``next_marker`` of the previous page; None starts from the beginning
            options: Prefix filter, page size and abort signal

        Returns:
            One page of entries and the marker for the next page
        """
        options = options or DirectoryListFilesAndDirectoriesSegmentOptions()
        return await self._context.list_files_and_directories_segment(
            abort_signal=resolve_abort_signal(options.abort_signal),
            marker=marker,
            prefix=options.prefix,
            maxresults=options.maxresults,
        )
