"""
AmpCode format adapter.

Amp stores MCP servers in its VS Code style settings under the dotted key
``amp.mcpServers``. Each server carries ``type: local|remote`` and an
``enabled`` flag, written as ``true`` unless an Amp source disabled it.
"""

from pathlib import Path
from typing import Any, Dict

from core.canonical_models import CanonicalServer
from adapters.shared.keyed_adapter import KeyedServerAdapter
from adapters.shared.paths import path_matches


class AmpCodeAdapter(KeyedServerAdapter):

    @property
    def format_name(self) -> str:
        return "ampcode"

    @property
    def display_name(self) -> str:
        return "AmpCode"

    @property
    def description(self) -> str:
        return "Sourcegraph AI coding agent"

    @property
    def container_key(self) -> str:
        return 'amp.mcpServers'

    @property
    def config_file_name(self) -> str:
        return ".amp/settings.json"

    @property
    def docs_url(self) -> str:
        return "https://ampcode.com"

    def can_handle(self, file_path: Path) -> bool:
        return path_matches(file_path, 'settings.json', ['.amp'])

    def _parse_entry(self, name: str, entry: Dict[str, Any]) -> CanonicalServer:
        server = super()._parse_entry(name, entry)
        if entry.get('enabled') is False:
            server.add_metadata(self.metadata_key('enabled'), False)
        return server

    def _put_type(self, entry: Dict[str, Any], server: CanonicalServer):
        entry['type'] = 'remote' if server.is_remote else 'local'

    def _build_entry(self, server: CanonicalServer) -> Dict[str, Any]:
        entry = super()._build_entry(server)
        entry['enabled'] = server.get_metadata(self.metadata_key('enabled'), True)
        return entry
