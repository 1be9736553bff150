"""Option models accepted by the directory and file clients."""

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from fileshare_client.aborter import Aborter

Metadata = Dict[str, str]


class OperationOptions(BaseModel):
    abort_signal: Optional[Aborter] = Field(
        None, description="Cancels the request; Aborter.NONE when omitted"
    )

    model_config = ConfigDict(arbitrary_types_allowed=True)


class DirectoryCreateOptions(OperationOptions):
    metadata: Optional[Metadata] = Field(None, description="Key-value pairs to associate with the directory")


class DirectoryDeleteOptions(OperationOptions):
    pass


class DirectoryGetPropertiesOptions(OperationOptions):
    pass


class DirectorySetMetadataOptions(OperationOptions):
    pass


class DirectoryListFilesAndDirectoriesSegmentOptions(OperationOptions):
    prefix: Optional[str] = Field(None, description="Only return entries whose name begins with this prefix")
    # Values above 5000 (or omitted) are served as 5000 by the service
    maxresults: Optional[int] = Field(None, description="Maximum number of entries to return")


class FileHTTPHeaders(BaseModel):
    content_type: Optional[str] = None
    content_encoding: Optional[str] = None
    content_language: Optional[str] = None
    cache_control: Optional[str] = None
    content_disposition: Optional[str] = None

    def to_headers(self) -> Dict[str, str]:
        """Request headers for the properties that are set."""
        headers = {
            "x-ms-content-type": self.content_type,
            "x-ms-content-encoding": self.content_encoding,
            "x-ms-content-language": self.content_language,
            "x-ms-cache-control": self.cache_control,
            "x-ms-content-disposition": self.content_disposition,
        }
        return {k: v for k, v in headers.items() if v is not None}


class FileCreateOptions(OperationOptions):
    metadata: Optional[Metadata] = Field(None, description="Key-value pairs to associate with the file")
    file_http_headers: Optional[FileHTTPHeaders] = None


class FileDeleteOptions(OperationOptions):
    pass


class FileGetPropertiesOptions(OperationOptions):
    pass
