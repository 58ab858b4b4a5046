"""
Claude Code format adapter.

File format (JSON, ``~/.claude.json``):
{
  "mcpServers": {
    "filesystem": {"type": "stdio", "command": "npx", "args": ["-y", "pkg"]},
    "docs": {"type": "http", "url": "https://example.com/mcp"}
  },
  "allowedMcpServers": ["filesystem", "docs"],
  "deniedMcpServers": []
}

This adapter:
- Always writes ``type`` (stdio/http/sse)
- Generates ``allowedMcpServers`` from every converted server name
- Keeps ``deniedMcpServers`` from a Claude Code source
"""

import copy
from pathlib import Path
from typing import Any, Dict

from core.canonical_models import CanonicalConfig, CanonicalServer
from adapters.shared.keyed_adapter import KeyedServerAdapter
from adapters.shared.paths import path_matches


class ClaudeCodeAdapter(KeyedServerAdapter):

    @property
    def format_name(self) -> str:
        return "claude-code"

    @property
    def display_name(self) -> str:
        return "Claude Code"

    @property
    def description(self) -> str:
        return "Anthropic Claude CLI agent"

    @property
    def config_file_name(self) -> str:
        return ".claude.json"

    @property
    def docs_url(self) -> str:
        return "https://code.claude.com/docs/mcp"

    def can_handle(self, file_path: Path) -> bool:
        return path_matches(file_path, '.claude.json')

    def _put_type(self, entry: Dict[str, Any], server: CanonicalServer):
        entry['type'] = server.transport.value

    def _parse_root(self, data: Dict[str, Any], config: CanonicalConfig):
        if isinstance(data.get('deniedMcpServers'), list):
            config.add_metadata(self.metadata_key('denied_servers'),
                                copy.deepcopy(data['deniedMcpServers']))

    def _build_root(self, config: CanonicalConfig, result: Dict[str, Any]):
        result['allowedMcpServers'] = config.server_names
        denied = config.get_metadata(self.metadata_key('denied_servers'))
        if denied is not None:
            result['deniedMcpServers'] = copy.deepcopy(denied)
