"""
LibreChat format adapter.

File format (YAML, ``librechat.yaml``):

    mcpServers:
      filesystem:
        type: stdio
        command: npx
        args: ["-y", "@modelcontextprotocol/server-filesystem"]
        timeout: 60000
      live:
        type: websocket
        url: ws://localhost:8080/mcp

LibreChat also supports ``websocket`` servers. They map to the canonical
``http`` transport, and the tag is kept so a LibreChat round trip restores it.
``timeout`` and ``initTimeout`` are milliseconds.
"""

from pathlib import Path
from typing import Any, Dict

from core.canonical_models import CanonicalServer, RawFormat, Transport
from adapters.shared.fields import transport_from_tag
from adapters.shared.keyed_adapter import KeyedServerAdapter
from adapters.shared.paths import path_matches

TYPE_TAGS = {
    Transport.STDIO: 'stdio',
    Transport.SSE: 'sse',
    Transport.HTTP: 'streamable-http',
}


class LibreChatAdapter(KeyedServerAdapter):

    supports_timeout = True
    passthrough_fields = (
        ('description', 'description'),
        ('iconPath', 'icon_path'),
        ('chatMenu', 'chat_menu'),
        ('serverInstructions', 'server_instructions'),
        ('initTimeout', 'init_timeout'),
    )

    @property
    def format_name(self) -> str:
        return "librechat"

    @property
    def display_name(self) -> str:
        return "LibreChat"

    @property
    def description(self) -> str:
        return "Self-hosted AI chat interface (YAML)"

    @property
    def raw_format(self) -> RawFormat:
        return RawFormat.YAML

    @property
    def config_file_name(self) -> str:
        return "librechat.yaml"

    @property
    def docs_url(self) -> str:
        return "https://www.librechat.ai/docs/configuration/mcp_servers"

    def can_handle(self, file_path: Path) -> bool:
        return path_matches(file_path, 'librechat.yaml')

    def _parse_entry(self, name: str, entry: Dict[str, Any]) -> CanonicalServer:
        server = super()._parse_entry(name, entry)
        tag = entry.get('type')
        if isinstance(tag, str):
            server.add_metadata(self.metadata_key('type'), tag)
        return server

    def _put_type(self, entry: Dict[str, Any], server: CanonicalServer):
        source_tag = server.get_metadata(self.metadata_key('type'))
        if source_tag is not None and transport_from_tag(source_tag) == server.transport:
            entry['type'] = source_tag
        elif source_tag is not None or server.is_remote:
            entry['type'] = TYPE_TAGS[server.transport]
