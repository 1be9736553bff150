"""
Basic usage examples for the file share client.

This example demonstrates:
- Pipeline and client setup
- Creating directories and files
- Paging through a directory listing
- Cancellation and error handling
"""

import asyncio
import logging

from fileshare_client import (
    Aborter,
    DirectoryClient,
    DirectoryListFilesAndDirectoriesSegmentOptions,
    DirectoryNotEmptyError,
    FileCreateOptions,
    FileHTTPHeaders,
    new_pipeline,
)

# Share URL with a SAS token granting read/write/delete/list
SHARE_URL = "https://myaccount.file.core.windows.net/myshare?sv=2018-03-28&sig=..."


async def main():
    """Main example function."""
    logging.basicConfig(level=logging.DEBUG)

    async with new_pipeline() as pipeline:
        root = DirectoryClient(SHARE_URL, pipeline)

        # Create a directory with a file in it
        reports, _ = await root.create_subdirectory("reports")
        await reports.set_metadata({"owner": "finance"})
        await reports.create_file(
            "q1.csv",
            4096,
            FileCreateOptions(file_http_headers=FileHTTPHeaders(content_type="text/csv")),
        )

        properties = await reports.get_properties()
        print(f"Metadata: {properties.metadata}")

        # Page through the listing, five entries at a time
        marker = None
        options = DirectoryListFilesAndDirectoriesSegmentOptions(
            maxresults=5,
            abort_signal=Aborter.timeout(30),
        )
        while True:
            page = await reports.list_files_and_directories_segment(marker, options)
            for directory in page.segment.directory_items:
                print(f"  [dir]  {directory.name}")
            for file in page.segment.file_items:
                print(f"  [file] {file.name} ({file.properties.content_length} bytes)")
            marker = page.next_marker
            if not marker:
                break

        # The service refuses to delete a directory that is not empty
        try:
            await root.delete_subdirectory("reports")
        except DirectoryNotEmptyError as e:
            print(f"Cannot delete: {e}")

        await reports.delete_file("q1.csv")
        await root.delete_subdirectory("reports")


if __name__ == "__main__":
    asyncio.run(main())
