"""
Gemini CLI format adapter.

Gemini keeps servers under ``mcpServers`` inside ``~/.gemini/settings.json``.
Remote endpoints may be given as ``url`` or ``httpUrl``; ``url`` wins when
both are present and only ``url`` is written back. ``timeout`` is already in
milliseconds. ``trust``, ``includeTools`` and ``excludeTools`` are Gemini-only
and kept as metadata.
"""

from pathlib import Path

from adapters.shared.keyed_adapter import KeyedServerAdapter
from adapters.shared.paths import path_matches


class GeminiCliAdapter(KeyedServerAdapter):

    url_fields = ('url', 'httpUrl')
    supports_cwd = True
    supports_timeout = True
    passthrough_fields = (
        ('trust', 'trust'),
        ('includeTools', 'include_tools'),
        ('excludeTools', 'exclude_tools'),
    )

    @property
    def format_name(self) -> str:
        return "gemini-cli"

    @property
    def display_name(self) -> str:
        return "Gemini CLI"

    @property
    def description(self) -> str:
        return "Google Gemini CLI tool"

    @property
    def config_file_name(self) -> str:
        return "settings.json"

    @property
    def docs_url(self) -> str:
        return "https://github.com/google-gemini/gemini-cli"

    def can_handle(self, file_path: Path) -> bool:
        return path_matches(file_path, 'settings.json', ['.gemini'])
