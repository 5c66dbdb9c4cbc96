"""
C# compilation unit emission for a single entity type.

The emitter is a pure function of (EntitySpec, GenerationParameters): it never
touches the network or the file system. Output is whitespace-normalized so
repeated runs over the same metadata produce byte-identical sources.
"""

import re
from typing import List, Optional

from .constants import CSHARP_KEYWORDS, INDENT, SYSTEM_NAMESPACE
from .models import EmittedUnit, EntitySpec, GenerationParameters, PropertyDescriptor
from .schema_walker import same_name

_NAMESPACE_SEPARATOR = re.compile(r'[\r\n]')


def escape_identifier(name: str) -> str:
    """Prefix C# keywords with '@' so they remain valid identifiers."""
    if name in CSHARP_KEYWORDS:
        return f"@{name}"
    return name


def qualified_name(name: str) -> str:
    return ".".join(escape_identifier(part) for part in name.split("."))


def using_namespaces_list(using_namespaces: Optional[str]) -> List[str]:
    """
    Namespaces imported by every generated unit, in order.

    System always comes first. Entries of the newline separated using_namespaces
    string follow; blank entries and case-insensitive repeats of System are
    skipped, other duplicates are kept as given.
    """
    namespaces = [SYSTEM_NAMESPACE]
    if not using_namespaces:
        return namespaces
    for entry in _NAMESPACE_SEPARATOR.split(using_namespaces):
        entry = entry.strip()
        if not entry or same_name(entry, SYSTEM_NAMESPACE):
            continue
        namespaces.append(entry)
    return namespaces


def normalize_whitespace(lines: List[str]) -> str:
    """
    Canonical layout: no trailing whitespace, no blank line directly after an
    opening brace or before a closing one, no repeated blank lines, no leading
    or trailing blank lines, a single terminating newline.
    """
    normalized = []
    for line in lines:
        line = line.rstrip()
        if not line:
            if not normalized or not normalized[-1] or normalized[-1].endswith("{"):
                continue
            normalized.append("")
            continue
        if line.lstrip() == "}" and normalized and not normalized[-1]:
            normalized.pop()
        normalized.append(line)
    while normalized and not normalized[-1]:
        normalized.pop()
    return "\n".join(normalized) + "\n"


class ClassEmitter:
    """Renders EntitySpec values as C# classes with auto-implemented properties."""

    def __init__(self, parameters: GenerationParameters):
        self.parameters = parameters
        self.usings = using_namespaces_list(parameters.using_namespaces)

    def emit(self, entity: EntitySpec) -> EmittedUnit:
        return EmittedUnit(class_name=entity.class_name, source=self.render(entity))

    def render(self, entity: EntitySpec) -> str:
        lines = [f"using {qualified_name(namespace)};" for namespace in self.usings]
        lines.append("")
        lines.append(f"namespace {qualified_name(self.parameters.primary_namespace)}")
        lines.append("{")
        lines.extend(INDENT + line for line in self._class_lines(entity))
        lines.append("}")
        return normalize_whitespace(lines)

    def _class_lines(self, entity: EntitySpec) -> List[str]:
        header = f"public class {escape_identifier(entity.class_name)}"
        # Base type is attached only when one is configured.
        if self.parameters.base_class_name:
            header += f" : {qualified_name(self.parameters.base_class_name)}"
        lines = [header, "{"]
        for prop in entity.properties:
            lines.append(INDENT + self._property_line(prop))
            lines.append("")
        lines.append("}")
        return lines

    @staticmethod
    def _property_line(prop: PropertyDescriptor) -> str:
        return f"public {prop.mapped_type} {escape_identifier(prop.name)} {{ get; set; }}"
