"""Name to definition store for text styles and layouts shared by components."""

import copy
import logging
from typing import Any, Dict, Iterator, Optional

logger = logging.getLogger('news_format_exporter.exporter.registry')


class DefinitionRegistry:
    """
    Accumulates named style or layout definitions during one generation pass.

    Names are fixed per semantic role ("default-body", "body-layout", ...)
    and every component sharing a role reuses the same entry. Registering an
    existing name overwrites it: last write wins.
    """

    def __init__(self, kind: str = 'definition'):
        self.kind = kind
        self._entries: Dict[str, Dict[str, Any]] = {}

    def register(self, name: str, definition: Dict[str, Any]) -> str:
        """
        Insert or overwrite the entry stored under ``name``.

        Args:
            name: Role name referenced by components
            definition: Attribute map for the entry

        Returns:
            The registered name, for use as a component reference
        """
        if not name:
            raise ValueError(f"{self.kind} name cannot be empty")

        previous = self._entries.get(name)
        if previous is not None and previous != definition:
            logger.debug(f"Overwriting {self.kind} '{name}'")

        self._entries[name] = copy.deepcopy(definition)
        return name

    def get(self, name: str) -> Optional[Dict[str, Any]]:
        entry = self._entries.get(name)
        return copy.deepcopy(entry) if entry is not None else None

    def all(self) -> Dict[str, Dict[str, Any]]:
        """Return the accumulated mapping in first-registration order."""
        return copy.deepcopy(self._entries)

    def __contains__(self, name: str) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ['DefinitionRegistry']
