"""
Conversion between storage REST messages and response models.

Response fields come from headers for every operation except listing, whose
body is an ``EnumerationResults`` XML document.
"""

from datetime import datetime
from email.utils import parsedate_to_datetime
from typing import Any, Callable, Dict, Optional, Tuple, Type, TypeVar
from xml.etree import ElementTree as ET

import httpx

from fileshare_client.generated.models import (
    DirectoryItem,
    DirectoryListFilesAndDirectoriesSegmentResponse,
    FileItem,
    FileProperty,
    FilesAndDirectoriesListSegment,
    StorageResponse,
)

TResponse = TypeVar("TResponse", bound=StorageResponse)

METADATA_PREFIX = "x-ms-meta-"


def _parse_datetime(value: str) -> Optional[datetime]:
    try:
        return parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None


def _parse_bool(value: str) -> bool:
    return value.lower() == "true"


# field name -> (candidate header names, converter)
HEADER_FIELDS: Dict[str, Tuple[Tuple[str, ...], Callable[[str], Any]]] = {
    "request_id": (("x-ms-request-id",), str),
    "version": (("x-ms-version",), str),
    "date": (("Date",), _parse_datetime),
    "etag": (("ETag",), str),
    "last_modified": (("Last-Modified",), _parse_datetime),
    "is_server_encrypted": (
        ("x-ms-request-server-encrypted", "x-ms-server-encrypted"),
        _parse_bool,
    ),
    "content_length": (("Content-Length",), int),
    "content_type": (("Content-Type",), str),
    "content_encoding": (("Content-Encoding",), str),
    "content_language": (("Content-Language",), str),
    "cache_control": (("Cache-Control",), str),
    "content_disposition": (("Content-Disposition",), str),
    "file_type": (("x-ms-type",), str),
}


def metadata_headers(metadata: Optional[Dict[str, str]]) -> Dict[str, str]:
    """Turn a metadata mapping into x-ms-meta-* request headers."""
    if not metadata:
        return {}
    return {f"{METADATA_PREFIX}{key}": value for key, value in metadata.items()}


def parse_metadata(headers: httpx.Headers) -> Dict[str, str]:
    """Collect x-ms-meta-* response headers, keeping the key case the service sent."""
    metadata = {}
    for raw_key, raw_value in headers.raw:
        key = raw_key.decode(headers.encoding)
        if key.lower().startswith(METADATA_PREFIX):
            metadata[key[len(METADATA_PREFIX):]] = raw_value.decode(headers.encoding)
    return metadata


def deserialize_headers(model: Type[TResponse], response: httpx.Response, **fields: Any) -> TResponse:
    """Build ``model`` from the status code and headers of ``response``."""
    values: Dict[str, Any] = {
        "status_code": response.status_code,
        "headers": dict(response.headers),
    }
    for name in model.model_fields:
        if name in HEADER_FIELDS:
            header_names, convert = HEADER_FIELDS[name]
            for header_name in header_names:
                raw = response.headers.get(header_name)
                if raw is not None:
                    values[name] = convert(raw)
                    break
        elif name == "metadata":
            values[name] = parse_metadata(response.headers)
    values.update(fields)
    return model.model_validate(values)


def _text(element: ET.Element, tag: str) -> Optional[str]:
    # <NextMarker /> and <Marker /> are empty when absent
    value = element.findtext(tag)
    return value or None


def deserialize_list_segment(response: httpx.Response) -> DirectoryListFilesAndDirectoriesSegmentResponse:
    """Parse an EnumerationResults body into the list segment response."""
    root = ET.fromstring(response.content)
    max_results = _text(root, "MaxResults")

    directory_items = []
    file_items = []
    entries = root.find("Entries")
    if entries is not None:
        for entry in entries:
            name = entry.findtext("Name") or ""
            if entry.tag == "Directory":
                directory_items.append(DirectoryItem(name=name))
            elif entry.tag == "File":
                content_length = entry.findtext("Properties/Content-Length") or "0"
                file_items.append(
                    FileItem(name=name, properties=FileProperty(content_length=int(content_length)))
                )

    return deserialize_headers(
        DirectoryListFilesAndDirectoriesSegmentResponse,
        response,
        service_endpoint=root.get("ServiceEndpoint", ""),
        share_name=root.get("ShareName", ""),
        share_snapshot=root.get("ShareSnapshot") or None,
        directory_path=root.get("DirectoryPath", ""),
        prefix=_text(root, "Prefix"),
        marker=_text(root, "Marker"),
        max_results=int(max_results) if max_results else None,
        segment=FilesAndDirectoriesListSegment(
            directory_items=directory_items,
            file_items=file_items,
        ),
        next_marker=_text(root, "NextMarker"),
    )
