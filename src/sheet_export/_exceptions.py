"""Exception hierarchy for sheet_export library.

All exceptions propagate without recovery. Callers handle failures explicitly.
"""

from __future__ import annotations


class SheetExportError(Exception):
    """Base exception for sheet_export library.

    All library exceptions inherit from this base class.
    """


class InvalidSheetIndexError(SheetExportError):
    """Raised when a sheet index was never created on the exporter.

    Attributes:
        index: The requested sheet index.
        message: Description of the failure.
    """

    def __init__(self, index: int) -> None:
        self.index = index
        self.message = f"No sheet with index {index} defined"
        super().__init__(self.message)


class SerializationError(SheetExportError):
    """Raised when the document cannot be written in the requested format.

    Attributes:
        path: The output path.
        message: Description of the failure.
    """

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class DisconnectedError(SheetExportError):
    """Raised when a document or sheet is used after it was disconnected.

    Attributes:
        operation: Name of the operation that was attempted.
    """

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Document is disconnected, cannot {operation}")


class NotGeneratedError(SheetExportError):
    """Raised when reading output attributes before the file was generated.

    Attributes:
        attribute: Name of the attribute that was read.
    """

    def __init__(self, attribute: str) -> None:
        self.attribute = attribute
        super().__init__(f"File not generated yet, {attribute} is unavailable")


__all__ = [
    "DisconnectedError",
    "InvalidSheetIndexError",
    "NotGeneratedError",
    "SerializationError",
    "SheetExportError",
]
