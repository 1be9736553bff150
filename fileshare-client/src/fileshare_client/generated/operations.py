"""
Protocol operations for directory and file resources.

Each method issues exactly one REST call through the pipeline and returns
the parsed response. Errors raised by the pipeline propagate unchanged.
"""

from typing import Dict, Optional
import logging

from fileshare_client.aborter import Aborter
from fileshare_client.generated.models import (
    DirectoryCreateResponse,
    DirectoryDeleteResponse,
    DirectoryGetPropertiesResponse,
    DirectoryListFilesAndDirectoriesSegmentResponse,
    DirectorySetMetadataResponse,
    FileCreateResponse,
    FileDeleteResponse,
    FileGetPropertiesResponse,
)
from fileshare_client.generated.serialization import (
    deserialize_headers,
    deserialize_list_segment,
    metadata_headers,
)
from fileshare_client.pipeline import Pipeline
from fileshare_client.url import redact_url

logger = logging.getLogger(__name__)


class DirectoryOperations:
    """Operations on the directory resource (``restype=directory``)."""

    def __init__(self, url: str, pipeline: Pipeline) -> None:
        self._url = url
        self._pipeline = pipeline

    async def create(
        self,
        *,
        abort_signal: Aborter,
        metadata: Optional[Dict[str, str]] = None,
    ) -> DirectoryCreateResponse:
        """Create Directory"""
        response = await self._pipeline.send(
            "PUT",
            self._url,
            params={"restype": "directory"},
            headers=metadata_headers(metadata),
            abort_signal=abort_signal,
        )
        return deserialize_headers(DirectoryCreateResponse, response)

    async def get_properties(self, *, abort_signal: Aborter) -> DirectoryGetPropertiesResponse:
        """Get Directory Properties"""
        response = await self._pipeline.send(
            "GET",
            self._url,
            params={"restype": "directory"},
            abort_signal=abort_signal,
        )
        return deserialize_headers(DirectoryGetPropertiesResponse, response)

    async def delete(self, *, abort_signal: Aborter) -> DirectoryDeleteResponse:
        """Delete Directory"""
        response = await self._pipeline.send(
            "DELETE",
            self._url,
            params={"restype": "directory"},
            abort_signal=abort_signal,
        )
        return deserialize_headers(DirectoryDeleteResponse, response)

    async def set_metadata(
        self,
        *,
        abort_signal: Aborter,
        metadata: Optional[Dict[str, str]],
    ) -> DirectorySetMetadataResponse:
        """Set Directory Metadata. Sending no x-ms-meta-* headers clears all metadata."""
        response = await self._pipeline.send(
            "PUT",
            self._url,
            params={"restype": "directory", "comp": "metadata"},
            headers=metadata_headers(metadata),
            abort_signal=abort_signal,
        )
        return deserialize_headers(DirectorySetMetadataResponse, response)

    async def list_files_and_directories_segment(
        self,
        *,
        abort_signal: Aborter,
        marker: Optional[str] = None,
        prefix: Optional[str] = None,
        maxresults: Optional[int] = None,
    ) -> DirectoryListFilesAndDirectoriesSegmentResponse:
        """List Directories and Files"""
        response = await self._pipeline.send(
            "GET",
            self._url,
            params={
                "restype": "directory",
                "comp": "list",
                "prefix": prefix,
                "marker": marker,
                "maxresults": maxresults,
            },
            abort_signal=abort_signal,
        )
        result = deserialize_list_segment(response)
        logger.debug(
            "Listed %d directories and %d files under %s",
            len(result.segment.directory_items),
            len(result.segment.file_items),
            redact_url(self._url),
        )
        return result


class FileOperations:
    """Operations on the file resource."""

    def __init__(self, url: str, pipeline: Pipeline) -> None:
        self._url = url
        self._pipeline = pipeline

    async def create(
        self,
        file_content_length: int,
        *,
        abort_signal: Aborter,
        metadata: Optional[Dict[str, str]] = None,
        file_http_headers: Optional[Dict[str, str]] = None,
    ) -> FileCreateResponse:
        """Create File. Only initializes the file; no content is written."""
        headers = {
            "x-ms-content-length": str(file_content_length),
            "x-ms-type": "file",
            **metadata_headers(metadata),
            **(file_http_headers or {}),
        }
        response = await self._pipeline.send(
            "PUT",
            self._url,
            headers=headers,
            abort_signal=abort_signal,
        )
        return deserialize_headers(FileCreateResponse, response)

    async def delete(self, *, abort_signal: Aborter) -> FileDeleteResponse:
        """Delete File"""
        response = await self._pipeline.send("DELETE", self._url, abort_signal=abort_signal)
        return deserialize_headers(FileDeleteResponse, response)

    async def get_properties(self, *, abort_signal: Aborter) -> FileGetPropertiesResponse:
        """Get File Properties"""
        response = await self._pipeline.send("HEAD", self._url, abort_signal=abort_signal)
        return deserialize_headers(FileGetPropertiesResponse, response)
