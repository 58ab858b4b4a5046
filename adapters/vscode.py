"""
VS Code and GitHub Copilot CLI format adapters.

File format (JSON):
{
  "inputs": [{"type": "promptString", "id": "api-key", "password": true}],
  "servers": {
    "filesystem": {"command": "npx", "args": ["-y", "pkg"], "cwd": "/work"},
    "remote": {"type": "http", "url": "http://localhost:8080"}
  }
}

This adapter:
- Reads servers from ``servers`` (not ``mcpServers``)
- Honors the explicit ``type`` tag (stdio/http/sse)
- Always writes ``type`` for remote servers; writes ``type: stdio`` only when
  the source entry declared it
- Preserves ``envFile`` and the root ``inputs`` list in metadata
"""

import copy
from pathlib import Path
from typing import Any, Dict

from core.canonical_models import CanonicalConfig, CanonicalServer
from adapters.shared.keyed_adapter import KeyedServerAdapter
from adapters.shared.paths import path_matches


class VSCodeAdapter(KeyedServerAdapter):

    supports_cwd = True
    passthrough_fields = (
        ('envFile', 'env_file'),
    )

    @property
    def format_name(self) -> str:
        return "vscode"

    @property
    def display_name(self) -> str:
        return "VS Code"

    @property
    def description(self) -> str:
        return "GitHub Copilot MCP support"

    @property
    def container_key(self) -> str:
        return 'servers'

    @property
    def config_file_name(self) -> str:
        return ".vscode/mcp.json"

    @property
    def docs_url(self) -> str:
        return "https://code.visualstudio.com/docs/copilot/chat/mcp-servers"

    def can_handle(self, file_path: Path) -> bool:
        return (path_matches(file_path, 'mcp.json', ['.vscode']) or
                path_matches(file_path, 'mcp.json', ['User', 'Code']))

    def _parse_entry(self, name: str, entry: Dict[str, Any]) -> CanonicalServer:
        server = super()._parse_entry(name, entry)
        if 'type' in entry:
            server.add_metadata(self.metadata_key('explicit_type'), True)
        return server

    def _put_type(self, entry: Dict[str, Any], server: CanonicalServer):
        if server.is_remote or server.get_metadata(self.metadata_key('explicit_type')):
            entry['type'] = server.transport.value

    def _parse_root(self, data: Dict[str, Any], config: CanonicalConfig):
        if 'inputs' in data:
            config.add_metadata(self.metadata_key('inputs'), copy.deepcopy(data['inputs']))

    def _build_root(self, config: CanonicalConfig, result: Dict[str, Any]):
        inputs = config.get_metadata(self.metadata_key('inputs'))
        if inputs is not None:
            # VS Code lists inputs before servers
            servers = result.pop(self.container_key)
            result['inputs'] = copy.deepcopy(inputs)
            result[self.container_key] = servers


class CopilotCliAdapter(VSCodeAdapter):
    """GitHub Copilot CLI reuses the VS Code schema in ``mcp-config.json``."""

    @property
    def format_name(self) -> str:
        return "copilot-cli"

    @property
    def display_name(self) -> str:
        return "GitHub Copilot CLI"

    @property
    def description(self) -> str:
        return "GitHub Copilot command-line tool"

    @property
    def config_file_name(self) -> str:
        return "mcp-config.json"

    @property
    def docs_url(self) -> str:
        return "https://github.com/github/copilot-cli"

    def can_handle(self, file_path: Path) -> bool:
        return path_matches(file_path, 'mcp-config.json')
