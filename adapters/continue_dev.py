"""
Continue format adapter.

File format (YAML, ``.continue/config.yaml``):

    name: MCP Config
    version: 0.0.1
    schema: v1
    mcpServers:
      - name: filesystem
        command: npx
        args: ["-y", "@modelcontextprotocol/server-filesystem"]
      - name: remote
        type: streamable-http
        url: https://example.com/mcp

Unlike the other formats, servers are a list of records carrying their own
``name``. The ``name``/``version``/``schema`` header is required by Continue
and is always written; values from a Continue source are kept.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from core.canonical_models import CanonicalConfig, CanonicalServer, RawFormat, Transport
from adapters.shared.fields import as_string
from adapters.shared.keyed_adapter import KeyedServerAdapter
from adapters.shared.paths import path_matches

logger = logging.getLogger(__name__)

SCAFFOLDING = (
    ('name', 'MCP Config'),
    ('version', '0.0.1'),
    ('schema', 'v1'),
)

TYPE_TAGS = {
    Transport.STDIO: 'stdio',
    Transport.SSE: 'sse',
    Transport.HTTP: 'streamable-http',
}


class ContinueDevAdapter(KeyedServerAdapter):

    supports_headers = False

    @property
    def format_name(self) -> str:
        return "continue-dev"

    @property
    def display_name(self) -> str:
        return "Continue"

    @property
    def description(self) -> str:
        return "Open-source AI code assistant (YAML)"

    @property
    def raw_format(self) -> RawFormat:
        return RawFormat.YAML

    @property
    def config_file_name(self) -> str:
        return ".continue/config.yaml"

    @property
    def docs_url(self) -> str:
        return "https://docs.continue.dev/customize/deep-dives/mcp"

    def can_handle(self, file_path: Path) -> bool:
        return path_matches(file_path, 'config.yaml', ['.continue'])

    def to_canonical(self, data: Any) -> CanonicalConfig:
        self.warnings = []
        config = CanonicalConfig(source_format=self.format_name)

        for index, entry in enumerate(self._get_entries(data), start=1):
            if not isinstance(entry, dict):
                self.warnings.append(f"Skipped server #{index}: entry is not an object")
                continue
            name = as_string(entry.get('name'))
            if name is None or not name.strip():
                name = f"server-{index}"
                self.warnings.append(f"Server #{index} has no name, using '{name}'")
            config.add_server(self._parse_entry(name, entry))

        if isinstance(data, dict):
            self._parse_root(data, config)

        logger.debug("Parsed %d server(s) from %s config", len(config), self.format_name)
        return config

    def from_canonical(self, config: CanonicalConfig,
                       options: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        self.warnings = []
        result: Dict[str, Any] = {}
        for key, default in SCAFFOLDING:
            result[key] = config.get_metadata(self.metadata_key(key), default)

        servers = []
        for server in config.servers:
            entry = {'name': server.name}
            entry.update(self._build_entry(server))
            servers.append(entry)
        result[self.container_key] = servers

        logger.debug("Built %s config with %d server(s)", self.format_name, len(servers))
        return result

    def _get_entries(self, data: Any) -> List[Any]:
        if not isinstance(data, dict):
            return []
        entries = data.get(self.container_key)
        if entries is None:
            return []
        if not isinstance(entries, list):
            self.warnings.append(
                f"Ignored '{self.container_key}': expected a list, got {type(entries).__name__}"
            )
            return []
        return entries

    def _parse_entry(self, name: str, entry: Dict[str, Any]) -> CanonicalServer:
        server = super()._parse_entry(name, entry)
        if 'type' in entry:
            server.add_metadata(self.metadata_key('explicit_type'), True)
        return server

    def _put_type(self, entry: Dict[str, Any], server: CanonicalServer):
        if server.is_remote or server.get_metadata(self.metadata_key('explicit_type')):
            entry['type'] = TYPE_TAGS[server.transport]

    def _parse_root(self, data: Dict[str, Any], config: CanonicalConfig):
        for key, _ in SCAFFOLDING:
            value = as_string(data.get(key))
            if value is not None:
                config.add_metadata(self.metadata_key(key), value)
