"""
Antigravity format adapter.

Same layout as Claude Desktop except that remote endpoints live in
``serverUrl``. A plain ``url`` is never read or written.
"""

from pathlib import Path

from adapters.shared.keyed_adapter import KeyedServerAdapter
from adapters.shared.paths import path_matches


class AntigravityAdapter(KeyedServerAdapter):

    url_fields = ('serverUrl',)
    url_field = 'serverUrl'

    @property
    def format_name(self) -> str:
        return "antigravity"

    @property
    def display_name(self) -> str:
        return "Antigravity"

    @property
    def description(self) -> str:
        return "AI development tool"

    @property
    def config_file_name(self) -> str:
        return "mcp_config.json"

    @property
    def docs_url(self) -> str:
        return "https://antigravity.dev"

    def can_handle(self, file_path: Path) -> bool:
        return path_matches(file_path, 'mcp_config.json')
