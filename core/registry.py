"""
Registry of available format adapters.

Maps format identifiers to adapter instances so callers resolve a format once
per conversion instead of branching on identifiers.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional

from core.adapter_interface import FormatAdapter
from core.canonical_models import RawFormat

logger = logging.getLogger(__name__)


class FormatRegistry:
    """Lookup table of format adapters keyed by ``format_name``."""

    def __init__(self):
        self._adapters: Dict[str, FormatAdapter] = {}

    def register(self, adapter: FormatAdapter):
        """
        Register an adapter.

        Raises:
            ValueError: If an adapter with the same format name is already registered
        """
        name = adapter.format_name
        if name in self._adapters:
            raise ValueError(f"Format '{name}' is already registered")
        self._adapters[name] = adapter

    def unregister(self, format_name: str):
        """Remove an adapter. Unknown names are ignored."""
        self._adapters.pop(format_name, None)

    def get_adapter(self, format_name: str) -> Optional[FormatAdapter]:
        return self._adapters.get(format_name)

    def list_formats(self) -> List[str]:
        return list(self._adapters.keys())

    def list_adapters(self) -> List[FormatAdapter]:
        return list(self._adapters.values())

    def detect_format(self, file_path: Path) -> Optional[FormatAdapter]:
        """Find the adapter that claims a config file path, if any."""
        for adapter in self._adapters.values():
            if adapter.can_handle(Path(file_path)):
                logger.debug("Path %s matched format '%s'", file_path, adapter.format_name)
                return adapter
        return None

    def get_formats_using(self, raw_format: RawFormat) -> List[str]:
        """All format names whose config files are written in ``raw_format``."""
        return [
            name for name, adapter in self._adapters.items()
            if adapter.raw_format == raw_format
        ]

    def __contains__(self, format_name: str) -> bool:
        return format_name in self._adapters

    def __len__(self) -> int:
        return len(self._adapters)
