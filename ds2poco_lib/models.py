"""
Data models for the entity model and the generated output.
"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict

from .constants import DEFAULT_NAMESPACE, SOURCE_FILE_EXTENSION
from .errors import ErrorKind, ProcessingError


class PropertyDescriptor(BaseModel):
    name: str
    mapped_type: str  # C# type name (e.g., "int")


class EntitySpec(BaseModel):
    class_name: str
    properties: List[PropertyDescriptor] = []


class GenerationParameters(BaseModel):
    model_config = ConfigDict(frozen=True)

    uri: str
    export_directory: str
    primary_namespace: str = DEFAULT_NAMESPACE
    base_class_name: Optional[str] = None
    using_namespaces: Optional[str] = None  # newline separated


class EmittedUnit(BaseModel):
    class_name: str
    source: str

    @property
    def file_name(self) -> str:
        return f"{self.class_name}{SOURCE_FILE_EXTENSION}"


class ProcessingErrorInfo(BaseModel):
    kind: ErrorKind
    message: str
    context: Optional[str] = None

    @classmethod
    def from_exception(cls, error: Exception) -> "ProcessingErrorInfo":
        if isinstance(error, ProcessingError):
            return cls(kind=error.kind, message=error.message, context=error.context)
        return cls(kind=ErrorKind.UNEXPECTED, message=str(error), context=type(error).__name__)


class ProcessingResult(BaseModel):
    success: bool = True
    units: List[str] = []  # file names written, in emission order
    error: Optional[ProcessingErrorInfo] = None
