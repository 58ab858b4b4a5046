"""
OpenCode format adapter.

File format (JSON, ``opencode.json``):
{
  "$schema": "https://opencode.ai/config.json",
  "mcp": {
    "perplexica": {
      "type": "local",
      "command": ["uvx", "perplexica-mcp", "stdio"],
      "environment": {"PERPLEXICA_API_KEY": "sk-..."},
      "enabled": true
    },
    "api": {"type": "remote", "url": "https://api.example.com/mcp", "enabled": true}
  }
}

This adapter:
- Accepts ``command`` as a string (with ``args``) or as a single array whose
  first element is the executable
- Accepts both ``env`` and ``environment``; always writes ``environment``
- Writes ``type: local|remote`` and ``enabled`` on every server
- Keeps ``debug`` for OpenCode round trips
"""

import copy
from pathlib import Path
from typing import Any, Dict

from core.canonical_models import CanonicalConfig, CanonicalServer
from adapters.shared.fields import (
    as_string,
    as_string_list,
    as_string_map,
    infer_transport,
    put_if_present,
)
from adapters.shared.keyed_adapter import KeyedServerAdapter
from adapters.shared.paths import path_matches


class OpenCodeAdapter(KeyedServerAdapter):

    supports_cwd = True
    passthrough_fields = (
        ('debug', 'debug'),
    )

    @property
    def format_name(self) -> str:
        return "opencode"

    @property
    def display_name(self) -> str:
        return "OpenCode"

    @property
    def description(self) -> str:
        return "Terminal AI coding agent"

    @property
    def container_key(self) -> str:
        return 'mcp'

    @property
    def config_file_name(self) -> str:
        return "opencode.json"

    @property
    def docs_url(self) -> str:
        return "https://opencode.ai/docs/mcp"

    def can_handle(self, file_path: Path) -> bool:
        return path_matches(file_path, 'opencode.json')

    def _parse_entry(self, name: str, entry: Dict[str, Any]) -> CanonicalServer:
        raw_command = entry.get('command')
        if isinstance(raw_command, list):
            parts = as_string_list(raw_command) or []
            command = parts[0] if parts else None
            args = parts[1:] or None
        else:
            command = as_string(raw_command)
            args = as_string_list(entry.get('args'))

        url = as_string(entry.get('url'))
        server = CanonicalServer(
            name=name,
            transport=infer_transport(entry.get('type'), url),
            command=command,
            args=args,
            env=as_string_map(entry.get('env') or entry.get('environment')),
            cwd=as_string(entry.get('cwd')),
            url=url,
            headers=as_string_map(entry.get('headers')),
            source_format=self.format_name,
        )
        if isinstance(entry.get('enabled'), bool):
            server.add_metadata(self.metadata_key('enabled'), entry['enabled'])
        self._read_passthrough(entry, server)
        return server

    def _build_entry(self, server: CanonicalServer) -> Dict[str, Any]:
        enabled = server.get_metadata(self.metadata_key('enabled'), True)

        if server.is_remote or server.url:
            entry: Dict[str, Any] = {'type': 'remote'}
            put_if_present(entry, 'url', server.url)
            put_if_present(entry, 'headers', server.headers)
            for field_name in ('command', 'env', 'cwd'):
                if getattr(server, field_name):
                    self.warnings.append(
                        f"Dropped unsupported field: {field_name} (server '{server.name}')"
                    )
        else:
            entry = {'type': 'local'}
            if server.command:
                entry['command'] = [server.command] + list(server.args or [])
            put_if_present(entry, 'environment', server.env)
            put_if_present(entry, 'cwd', server.cwd)

        if server.timeout is not None:
            self.warnings.append(f"Dropped unsupported field: timeout (server '{server.name}')")
        entry['enabled'] = enabled
        self._write_passthrough(entry, server)
        return entry

    def _parse_root(self, data: Dict[str, Any], config: CanonicalConfig):
        if '$schema' in data:
            config.add_metadata(self.metadata_key('schema'), data['$schema'])

    def _build_root(self, config: CanonicalConfig, result: Dict[str, Any]):
        schema = config.get_metadata(self.metadata_key('schema'))
        if schema is not None:
            servers = result.pop(self.container_key)
            result['$schema'] = copy.deepcopy(schema)
            result[self.container_key] = servers
