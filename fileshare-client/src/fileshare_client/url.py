"""URL helpers for building share, directory and file addresses."""

from typing import Optional, Union
from urllib.parse import quote, unquote, urlsplit, urlunsplit

import httpx

# Query parameter holding the SAS signature
_SIGNATURE_PARAM = "sig"

# Characters encodeURIComponent leaves alone besides letters, digits and "_.-~"
_SEGMENT_SAFE = "!*'()"


def encode_path_segment(name: str) -> str:
    """Percent-encode a single directory or file name, including any "/"."""
    return quote(name, safe=_SEGMENT_SAFE)


def append_to_url_path(url: str, name: str) -> str:
    """
    Append an already-encoded path segment to ``url``.

    The existing path is kept byte for byte and the query string (e.g. a SAS
    token) is preserved.
    """
    parts = urlsplit(url)
    path = parts.path
    path = f"{path}{name}" if path.endswith("/") else f"{path}/{name}"
    return urlunsplit((parts.scheme, parts.netloc, path, parts.query, parts.fragment))


def get_url_path(url: str) -> Optional[str]:
    """Return the decoded path of ``url``, or None when it has none."""
    path = urlsplit(url).path
    return unquote(path) if path else None


def redact_url(url: Union[str, httpx.URL]) -> str:
    """Return ``url`` with its SAS signature masked, for log output."""
    url = httpx.URL(url)
    if _SIGNATURE_PARAM not in url.params:
        return str(url)
    return str(url.copy_set_param(_SIGNATURE_PARAM, "REDACTED"))
