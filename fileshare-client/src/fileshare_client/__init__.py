"""
File Share Client Library.

An async client for directories and files in a file share storage service.

Example usage:
    ```python
    from fileshare_client import DirectoryClient, new_pipeline

    async with new_pipeline() as pipeline:
        directory = DirectoryClient(
            "https://myaccount.file.core.windows.net/myshare/mydirectory?<sas>",
            pipeline,
        )
        await directory.create()
        await directory.create_file("notes.txt", 512)
        page = await directory.list_files_and_directories_segment()
    ```
"""

__version__ = "0.1.0"

# Clients
from fileshare_client.directory_client import (
    DirectoryClient,
    DirectoryCreateFileResult,
    DirectoryCreateSubdirectoryResult,
)
from fileshare_client.file_client import FileClient
from fileshare_client.storage_client import StorageClient

# Pipeline and cancellation
from fileshare_client.aborter import Aborter
from fileshare_client.pipeline import (
    AnonymousCredential,
    Credential,
    Pipeline,
    new_pipeline,
)

# Options
from fileshare_client.models import (
    DirectoryCreateOptions,
    DirectoryDeleteOptions,
    DirectoryGetPropertiesOptions,
    DirectoryListFilesAndDirectoriesSegmentOptions,
    DirectorySetMetadataOptions,
    FileCreateOptions,
    FileDeleteOptions,
    FileGetPropertiesOptions,
    FileHTTPHeaders,
    Metadata,
)

# Exceptions
from fileshare_client.exceptions import (
    # Base exception
    StorageClientError,
    # Service errors
    BadRequestError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ResourceNotFoundError,
    ConflictError,
    ResourceExistsError,
    DirectoryNotEmptyError,
    SharingViolationError,
    PreconditionFailedError,
    ServerError,
    ServerBusyError,
    # Client-side errors
    NetworkError,
    TimeoutError,
    ConnectionError,
    RequestAbortedError,
    # Utility
    exception_from_response,
)

__all__ = [
    # Version
    "__version__",
    # Clients
    "DirectoryClient",
    "DirectoryCreateFileResult",
    "DirectoryCreateSubdirectoryResult",
    "FileClient",
    "StorageClient",
    # Pipeline and cancellation
    "Aborter",
    "AnonymousCredential",
    "Credential",
    "Pipeline",
    "new_pipeline",
    # Options
    "DirectoryCreateOptions",
    "DirectoryDeleteOptions",
    "DirectoryGetPropertiesOptions",
    "DirectoryListFilesAndDirectoriesSegmentOptions",
    "DirectorySetMetadataOptions",
    "FileCreateOptions",
    "FileDeleteOptions",
    "FileGetPropertiesOptions",
    "FileHTTPHeaders",
    "Metadata",
    # Exceptions
    "StorageClientError",
    "BadRequestError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ResourceNotFoundError",
    "ConflictError",
    "ResourceExistsError",
    "DirectoryNotEmptyError",
    "SharingViolationError",
    "PreconditionFailedError",
    "ServerError",
    "ServerBusyError",
    "NetworkError",
    "TimeoutError",
    "ConnectionError",
    "RequestAbortedError",
    "exception_from_response",
]
