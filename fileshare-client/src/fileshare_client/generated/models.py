"""Response models for the file share REST operations."""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class StorageResponse(BaseModel):
    status_code: int = Field(description="HTTP status code")
    headers: Dict[str, str] = Field(default_factory=dict, description="Raw response headers")
    request_id: Optional[str] = Field(None, description="x-ms-request-id")
    version: Optional[str] = Field(None, description="Service version that handled the request")
    date: Optional[datetime] = Field(None, description="Time the response was generated")

    model_config = ConfigDict(frozen=True)


class DirectoryCreateResponse(StorageResponse):
    etag: Optional[str] = None
    last_modified: Optional[datetime] = None
    is_server_encrypted: Optional[bool] = None


class DirectoryGetPropertiesResponse(StorageResponse):
    metadata: Dict[str, str] = Field(default_factory=dict)
    etag: Optional[str] = None
    last_modified: Optional[datetime] = None
    is_server_encrypted: Optional[bool] = None


class DirectoryDeleteResponse(StorageResponse):
    pass


class DirectorySetMetadataResponse(StorageResponse):
    etag: Optional[str] = None
    is_server_encrypted: Optional[bool] = None


class DirectoryItem(BaseModel):
    name: str


class FileProperty(BaseModel):
    content_length: int


class FileItem(BaseModel):
    name: str
    properties: FileProperty


class FilesAndDirectoriesListSegment(BaseModel):
    directory_items: List[DirectoryItem] = Field(default_factory=list)
    file_items: List[FileItem] = Field(default_factory=list)


class DirectoryListFilesAndDirectoriesSegmentResponse(StorageResponse):
    service_endpoint: str
    share_name: str
    share_snapshot: Optional[str] = None
    directory_path: str = ""
    prefix: Optional[str] = None
    marker: Optional[str] = None
    max_results: Optional[int] = None
    segment: FilesAndDirectoriesListSegment
    next_marker: Optional[str] = Field(None, description="Cursor for the next page, None when done")


class FileCreateResponse(StorageResponse):
    etag: Optional[str] = None
    last_modified: Optional[datetime] = None
    is_server_encrypted: Optional[bool] = None


class FileDeleteResponse(StorageResponse):
    pass


class FileGetPropertiesResponse(StorageResponse):
    metadata: Dict[str, str] = Field(default_factory=dict)
    content_length: Optional[int] = None
    content_type: Optional[str] = None
    content_encoding: Optional[str] = None
    content_language: Optional[str] = None
    cache_control: Optional[str] = None
    content_disposition: Optional[str] = None
    etag: Optional[str] = None
    last_modified: Optional[datetime] = None
    file_type: Optional[str] = None
    is_server_encrypted: Optional[bool] = None
