"""
Walker over the Edmx/DataServices tree producing one EntitySpec per entity type.
"""

import re
import sys
from datetime import datetime
from typing import Iterator, Optional
from lxml import etree

from .constants import DATA_SERVICES_XPATH, ENTITY_TYPE_TAG, IDENTIFIER_PATTERN, NAMESPACES, PROPERTY_TAG
from .errors import MalformedSchemaError
from .models import EntitySpec, PropertyDescriptor
from .type_map import DEFAULT_TYPE_MAP, TypeMap

_IDENTIFIER = re.compile(IDENTIFIER_PATTERN)


def same_name(name: Optional[str], other: Optional[str]) -> bool:
    """Case-insensitive comparison where an absent or empty name never matches."""
    if not name or not other:
        return False
    return name.lower() == other.lower()


def is_valid_identifier(name: Optional[str]) -> bool:
    """True for names usable as a C# identifier and as a file name stem."""
    return bool(name) and _IDENTIFIER.fullmatch(name) is not None


def local_name(node) -> Optional[str]:
    """Local tag name of an element, or None for comments and other non-elements."""
    if not isinstance(node.tag, str):
        return None
    return etree.QName(node).localname


def child_elements(node) -> Iterator[etree._Element]:
    for child in node:
        if isinstance(child.tag, str):
            yield child


class SchemaWalker:
    """Turns a parsed metadata document into a stream of EntitySpec values."""

    def __init__(self, type_map: TypeMap = DEFAULT_TYPE_MAP, on_property=None, verbose: bool = False):
        """
        Args:
            type_map: Edm -> C# mapping used to resolve Property types
            on_property: Optional hook called with each accepted PropertyDescriptor
            verbose: Print diagnostics for dropped properties and skipped entity types
        """
        self.type_map = type_map
        self.on_property = on_property
        self.verbose = verbose

    def _log_verbose(self, message: str):
        """Prints message to stderr only if verbose mode is enabled."""
        if self.verbose:
            timestamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]
            print(f"[{timestamp} Walker VERBOSE] {message}", file=sys.stderr)

    def find_data_services(self, root) -> etree._Element:
        found = root.xpath(DATA_SERVICES_XPATH, namespaces=NAMESPACES)
        if not found:
            raise MalformedSchemaError(
                "Malformed schema: no edmx:DataServices element below edmx:Edmx",
                context=local_name(root))
        return found[0]

    def walk(self, root) -> Iterator[EntitySpec]:
        """
        Yield an EntitySpec for every named EntityType, in document order.

        Raises:
            MalformedSchemaError: if the DataServices container is missing
        """
        data_services = self.find_data_services(root)
        for schema in child_elements(data_services):
            for element in child_elements(schema):
                entity = self._read_entity_type(element)
                if entity is not None:
                    yield entity

    def _read_entity_type(self, element) -> Optional[EntitySpec]:
        if not element.attrib or not same_name(local_name(element), ENTITY_TYPE_TAG):
            return None
        class_name = element.get('Name')
        if not class_name:
            self._log_verbose(f"Skipping EntityType without a Name attribute (line {element.sourceline}).")
            return None
        if not is_valid_identifier(class_name):
            self._log_verbose(f"Skipping EntityType with invalid name {class_name!r} (line {element.sourceline}).")
            return None

        properties = []
        for child in child_elements(element):
            if not child.attrib or not same_name(local_name(child), PROPERTY_TAG):
                continue
            descriptor = self._read_property(class_name, child)
            if descriptor is not None:
                properties.append(descriptor)
        return EntitySpec(class_name=class_name, properties=properties)

    def _read_property(self, class_name: str, element) -> Optional[PropertyDescriptor]:
        name = element.get('Name')
        edm_type = element.get('Type')
        if not name:
            self._log_verbose(f"Dropping property of {class_name} without a Name attribute (line {element.sourceline}).")
            return None
        if not is_valid_identifier(name):
            self._log_verbose(f"Dropping property {class_name}.{name!r} with invalid name.")
            return None
        mapped_type = self.type_map.resolve(edm_type)
        if mapped_type is None:
            self._log_verbose(f"Dropping property {class_name}.{name} with unmapped type {edm_type!r}.")
            return None
        descriptor = PropertyDescriptor(name=name, mapped_type=mapped_type)
        if self.on_property is not None:
            self.on_property(descriptor)
        return descriptor
