"""
Read-only mapping from OData (Edm) primitive type names to C# type names.
"""

from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional

from .constants import EDM_PRIMITIVE_TYPES


class TypeMap(Mapping):
    """Immutable Edm -> C# type lookup. Each processing run may carry its own."""

    def __init__(self, mapping: Optional[Mapping[str, str]] = None):
        self._types = MappingProxyType(dict(EDM_PRIMITIVE_TYPES if mapping is None else mapping))

    def resolve(self, edm_type: Optional[str]) -> Optional[str]:
        """
        Resolve an Edm type name to its C# counterpart.

        Args:
            edm_type: Value of a Property's Type attribute (may be None)

        Returns:
            The mapped C# type name, or None when the type is missing or unmapped
        """
        if not edm_type:
            return None
        return self._types.get(edm_type)

    def __getitem__(self, key: str) -> str:
        return self._types[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._types)

    def __len__(self) -> int:
        return len(self._types)

    def as_dict(self) -> Dict[str, str]:
        return dict(self._types)


DEFAULT_TYPE_MAP = TypeMap()
