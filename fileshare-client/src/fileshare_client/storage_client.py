"""
Base class for resource clients.

A resource client binds one resource URL to a shared pipeline. It holds no
other state, so any number of clients can share one pipeline.
"""

from typing import Optional

from fileshare_client.pipeline import Pipeline
from fileshare_client.url import get_url_path


class StorageClient:
    """Base class for directory and file clients."""

    def __init__(self, url: str, pipeline: Pipeline):
        """
        Initialize the client.

        Args:
            url: Resource URL, e.g. "https://myaccount.file.core.windows.net/myshare/mydirectory".
                 A SAS token may be appended as the query string. An encoded URL is not
                 escaped twice, so a name containing "%" must be given encoded ("mydir%25").
            pipeline: Shared request pipeline, see ``new_pipeline()``
        """
        self._url = url
        self._pipeline = pipeline

    @property
    def url(self) -> str:
        """Get the resource URL."""
        return self._url

    @property
    def pipeline(self) -> Pipeline:
        """Get the shared pipeline."""
        return self._pipeline

    @property
    def path(self) -> Optional[str]:
        """Get the decoded resource path, e.g. "/myshare/mydirectory"."""
        return get_url_path(self._url)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(url={self._url!r})>"
