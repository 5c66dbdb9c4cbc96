"""
Exception hierarchy for metadata processing failures.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    LOAD = "load"
    MALFORMED_SCHEMA = "malformed_schema"
    WRITE = "write"
    UNEXPECTED = "unexpected"


class ProcessingError(Exception):
    """Base class for errors that abort a processing run."""

    kind = ErrorKind.UNEXPECTED

    def __init__(self, message: str, context: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.context = context


class MetadataLoadError(ProcessingError):
    """The metadata document could not be fetched or is not well-formed XML."""

    kind = ErrorKind.LOAD


class MalformedSchemaError(ProcessingError):
    """The document parsed but lacks the expected Edmx/DataServices nesting."""

    kind = ErrorKind.MALFORMED_SCHEMA


class OutputWriteError(ProcessingError):
    """A generated unit could not be written to the export directory."""

    kind = ErrorKind.WRITE
