"""
Abstract interface every editor format adapter implements.

An adapter translates between one editor's MCP config schema and the
canonical representation. It works on already-deserialized values (dicts and
lists); turning text into values is the job of ``core.serializers``, chosen
from the adapter's ``raw_format``.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional

from core.canonical_models import CanonicalConfig, RawFormat


class FormatAdapter(ABC):
    """
    Base class for editor format adapters.

    Subclasses must provide ``format_name``, ``display_name``,
    ``to_canonical`` and ``from_canonical``. The remaining properties have
    defaults suited to a JSON config with servers under ``mcpServers``.
    """

    def __init__(self):
        self.warnings: List[str] = []

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Unique identifier for this format (e.g. 'claude-desktop')."""

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Human-readable editor name."""

    @property
    def description(self) -> str:
        return ''

    @property
    def raw_format(self) -> RawFormat:
        return RawFormat.JSON

    @property
    def container_key(self) -> str:
        """Top-level key holding the server declarations."""
        return 'mcpServers'

    @property
    def config_file_name(self) -> str:
        return 'mcp.json'

    @property
    def docs_url(self) -> str:
        return ''

    def can_handle(self, file_path: Path) -> bool:
        """
        Check if a config file path belongs to this editor.

        Only distinctive paths are claimed; generic names such as
        ``settings.json`` need a parent directory to match.
        """
        return False

    @abstractmethod
    def to_canonical(self, data: Any) -> CanonicalConfig:
        """Convert a deserialized config document to canonical form."""

    @abstractmethod
    def from_canonical(self, config: CanonicalConfig,
                       options: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Convert canonical form to this editor's config document."""

    def get_conversion_warnings(self) -> List[str]:
        """Warnings from the last conversion about dropped or skipped data."""
        return self.warnings

    def metadata_key(self, field_name: str) -> str:
        """Namespaced metadata key for a format-specific field."""
        return f"{self.format_name}_{field_name}"
