"""
DS2POCO Library - generates plain C# classes from OData / WCF Data Service metadata.
"""

from .models import (
    PropertyDescriptor,
    EntitySpec,
    GenerationParameters,
    EmittedUnit,
    ProcessingErrorInfo,
    ProcessingResult
)
from .errors import (
    ErrorKind,
    ProcessingError,
    MetadataLoadError,
    MalformedSchemaError,
    OutputWriteError
)
from .type_map import TypeMap, DEFAULT_TYPE_MAP
from .feedback import Feedback
from .metadata_source import MetadataSource
from .schema_walker import SchemaWalker
from .emitter import ClassEmitter
from .file_sink import write_unit
from .processor import ProcessingRun, process

__all__ = [
    'PropertyDescriptor',
    'EntitySpec',
    'GenerationParameters',
    'EmittedUnit',
    'ProcessingErrorInfo',
    'ProcessingResult',
    'ErrorKind',
    'ProcessingError',
    'MetadataLoadError',
    'MalformedSchemaError',
    'OutputWriteError',
    'TypeMap',
    'DEFAULT_TYPE_MAP',
    'Feedback',
    'MetadataSource',
    'SchemaWalker',
    'ClassEmitter',
    'write_unit',
    'ProcessingRun',
    'process'
]
