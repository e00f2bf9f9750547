"""Output sinks receiving a generated file.

A sink first gets the transfer metadata, then the file bytes in order, in
chunks of at most the configured chunk size. Sinks are the seam between the
exporter and its delivery channel (HTTP response, disk, memory).
"""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Protocol, TypedDict


class TransferMetadata(TypedDict):
    """Description of the file being delivered.

    Attributes:
        content_type: MIME type of the file.
        filename: Name the consumer should store the file under.
        length: Size of the file in bytes.
    """

    content_type: str
    filename: str
    length: int


class OutputSink(Protocol):
    """Protocol for consumers of a generated file."""

    def start(self, metadata: TransferMetadata) -> None:
        """Receive transfer metadata before any bytes."""
        ...

    def write(self, chunk: bytes) -> None:
        """Receive the next chunk of file content."""
        ...


def transfer_headers(metadata: TransferMetadata) -> list[tuple[str, str]]:
    """Build the HTTP download headers for a transfer.

    Args:
        metadata: Transfer metadata.

    Returns:
        Header name/value pairs in emission order.
    """
    return [
        ("Content-Description", "File Transfer"),
        ("Content-Type", metadata["content_type"]),
        ("Content-Disposition", f"attachment; filename={metadata['filename']}"),
        ("Content-Transfer-Encoding", "chunked"),
        ("Expires", "0"),
        ("Cache-Control", "must-revalidate, post-check=0, pre-check=0"),
        ("Pragma", "public"),
        ("Content-Length", str(metadata["length"])),
    ]


class BufferSink:
    """Sink collecting the transfer in memory."""

    def __init__(self) -> None:
        self.metadata: TransferMetadata | None = None
        self.chunks: list[bytes] = []

    def start(self, metadata: TransferMetadata) -> None:
        self.metadata = metadata

    def write(self, chunk: bytes) -> None:
        self.chunks.append(chunk)

    def getvalue(self) -> bytes:
        return b"".join(self.chunks)


class FileSink:
    """Sink copying the transfer to a file on disk.

    The target is truncated when metadata arrives, so a sink can be reused.
    """

    def __init__(self, path: Path) -> None:
        self._path = path
        self.metadata: TransferMetadata | None = None

    @property
    def path(self) -> Path:
        return self._path

    def start(self, metadata: TransferMetadata) -> None:
        self.metadata = metadata
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_bytes(b"")

    def write(self, chunk: bytes) -> None:
        with self._path.open("ab") as handle:
            handle.write(chunk)


class StreamSink:
    """Sink writing to a binary stream such as ``sys.stdout.buffer``.

    With ``include_headers`` the download headers are written first as
    ``Name: value`` lines followed by a blank line, CGI style.
    """

    def __init__(self, stream: BinaryIO, include_headers: bool = False) -> None:
        self._stream = stream
        self._include_headers = include_headers

    def start(self, metadata: TransferMetadata) -> None:
        if not self._include_headers:
            return
        for name, value in transfer_headers(metadata):
            self._stream.write(f"{name}: {value}\r\n".encode("latin-1"))
        self._stream.write(b"\r\n")

    def write(self, chunk: bytes) -> None:
        self._stream.write(chunk)
        self._stream.flush()


__all__ = [
    "BufferSink",
    "FileSink",
    "OutputSink",
    "StreamSink",
    "TransferMetadata",
    "transfer_headers",
]
