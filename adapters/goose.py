"""
Goose format adapter.

File format (YAML, ``~/.config/goose/config.yaml``):

    extensions:
      filesystem:
        type: stdio
        cmd: npx
        args: ["-y", "@modelcontextprotocol/server-filesystem"]
        enabled: true
        envs:
          NODE_ENV: production
        env_keys: [GITHUB_TOKEN]
        timeout: 300

Goose renames ``command`` to ``cmd`` and ``env`` to ``envs``. ``timeout`` is
in seconds. ``type`` and ``enabled`` are written on every extension.
``name``, ``display_name``, ``env_keys`` and ``description`` survive Goose
round trips only.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from core.canonical_models import CanonicalServer, RawFormat, Transport
from adapters.shared.fields import ms_to_seconds, seconds_to_ms
from adapters.shared.keyed_adapter import KeyedServerAdapter
from adapters.shared.paths import path_matches

TYPE_TAGS = {
    Transport.STDIO: 'stdio',
    Transport.SSE: 'sse',
    Transport.HTTP: 'streamable-http',
}


class GooseAdapter(KeyedServerAdapter):

    command_field = 'cmd'
    env_field = 'envs'
    supports_timeout = True
    passthrough_fields = (
        ('name', 'name'),
        ('display_name', 'display_name'),
        ('env_keys', 'env_keys'),
        ('description', 'description'),
    )

    @property
    def format_name(self) -> str:
        return "goose"

    @property
    def display_name(self) -> str:
        return "Goose"

    @property
    def description(self) -> str:
        return "Open-source AI agent (YAML)"

    @property
    def raw_format(self) -> RawFormat:
        return RawFormat.YAML

    @property
    def container_key(self) -> str:
        return 'extensions'

    @property
    def config_file_name(self) -> str:
        return "config.yaml"

    @property
    def docs_url(self) -> str:
        return "https://block.github.io/goose/docs/getting-started/using-extensions"

    def can_handle(self, file_path: Path) -> bool:
        return path_matches(file_path, 'config.yaml', ['goose'])

    def _parse_entry(self, name: str, entry: Dict[str, Any]) -> CanonicalServer:
        server = super()._parse_entry(name, entry)
        if isinstance(entry.get('enabled'), bool):
            server.add_metadata(self.metadata_key('enabled'), entry['enabled'])
        return server

    def _read_timeout(self, value: Any) -> Optional[int]:
        return seconds_to_ms(value)

    def _write_timeout(self, timeout: Optional[int]) -> Any:
        return ms_to_seconds(timeout)

    def _put_type(self, entry: Dict[str, Any], server: CanonicalServer):
        entry['type'] = TYPE_TAGS[server.transport]

    def _build_entry(self, server: CanonicalServer) -> Dict[str, Any]:
        entry = super()._build_entry(server)
        entry['enabled'] = server.get_metadata(self.metadata_key('enabled'), True)
        return entry
