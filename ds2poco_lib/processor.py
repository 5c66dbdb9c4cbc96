"""
Asynchronous processing entry point: metadata document in, one C# file per entity type out.
"""

import asyncio
import sys
from datetime import datetime
from typing import Callable, Optional

from .constants import DEFAULT_LINE_ENDING, DEFAULT_NAMESPACE
from .emitter import ClassEmitter
from .feedback import Feedback
from .file_sink import write_unit
from .metadata_source import MetadataSource
from .models import GenerationParameters, ProcessingErrorInfo, ProcessingResult
from .schema_walker import SchemaWalker
from .type_map import DEFAULT_TYPE_MAP, TypeMap


class ProcessingRun:
    """State owned by exactly one processing run; nothing here is shared between runs."""

    def __init__(self, parameters: GenerationParameters, feedback: Feedback,
                 type_map: TypeMap = DEFAULT_TYPE_MAP, source: Optional[MetadataSource] = None,
                 verbose: bool = False, line_ending: str = DEFAULT_LINE_ENDING):
        self.parameters = parameters
        self.feedback = feedback
        self.type_map = type_map
        self._owns_source = source is None
        self.source = source or MetadataSource(verbose=verbose)
        self.verbose = verbose
        self.line_ending = line_ending
        self.result = ProcessingResult()

    def _log_verbose(self, message: str):
        """Prints message to stderr only if verbose mode is enabled."""
        if self.verbose:
            timestamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]
            print(f"[{timestamp} Processor VERBOSE] {message}", file=sys.stderr)

    def execute(self) -> ProcessingResult:
        """Run the whole pipeline. Errors are reported, never raised."""
        try:
            self._generate()
            self.feedback("Processing done")
        except Exception as e:
            self.result.success = False
            self.result.error = ProcessingErrorInfo.from_exception(e)
            self._log_verbose(f"Run aborted after {len(self.result.units)} file(s): {self.result.error.kind.value}")
            self._report_error(e)
        finally:
            if self._owns_source:
                self.source.close()
        return self.result

    def _report_error(self, error: Exception):
        try:
            self.feedback(f"An error occured while processing: {error}")
        except Exception as callback_err:
            # The outcome is already recorded in self.result
            self._log_verbose(f"Feedback callback failed while reporting an error: {callback_err}")

    def _generate(self):
        uri = self.parameters.uri
        self.feedback(f"Downloading metadata: {uri}")
        root = self.source.load(uri)
        self.feedback("Processing...")

        walker = SchemaWalker(
            type_map=self.type_map,
            on_property=lambda prop: self.feedback(f"Creating property: {prop.name}"),
            verbose=self.verbose,
        )
        emitter = ClassEmitter(self.parameters)
        for entity in walker.walk(root):
            self.feedback(f"Creating class: {entity.class_name}")
            unit = emitter.emit(entity)
            self.feedback(f"Creating file: {unit.file_name}")
            write_unit(unit, self.parameters.export_directory, self.line_ending)
            self.result.units.append(unit.file_name)


async def process(uri: str, export_directory: str, primary_namespace: str = DEFAULT_NAMESPACE,
                  base_class_name: Optional[str] = None, using_namespaces: Optional[str] = None,
                  callback: Optional[Callable[[str], None]] = None, *,
                  type_map: Optional[TypeMap] = None, source: Optional[MetadataSource] = None,
                  verbose: bool = False, line_ending: str = DEFAULT_LINE_ENDING) -> ProcessingResult:
    """
    Generate one C# class file per entity type described by a service metadata document.

    When pointing at a data service, use its $metadata URL.

    Args:
        uri: URL or path of the metadata document
        export_directory: Directory for the output files (created if missing)
        primary_namespace: Namespace wrapping every generated class
        base_class_name: Optional base class of every generated class
        using_namespaces: Optional newline separated namespaces to import
        callback: Receives timestamped progress and error messages
        type_map: Edm -> C# mapping for this run (defaults to the built-in one)
        source: Metadata loader (defaults to a fresh MetadataSource)
        verbose: Print diagnostics to stderr
        line_ending: Line terminator of the written files

    Returns:
        ProcessingResult telling success from failure; the progress stream is unchanged
    """
    parameters = GenerationParameters(
        uri=uri,
        export_directory=export_directory,
        primary_namespace=primary_namespace,
        base_class_name=base_class_name,
        using_namespaces=using_namespaces,
    )
    run = ProcessingRun(
        parameters,
        Feedback(callback),
        type_map=type_map if type_map is not None else DEFAULT_TYPE_MAP,
        source=source,
        verbose=verbose,
        line_ending=line_ending,
    )
    return await asyncio.to_thread(run.execute)
