"""
Base adapter for formats that key servers by name inside one object.

Most editors store servers as ``{"<container>": {"<name>": {...}}}`` and differ
only in field names and a few extra fields. Subclasses describe those
differences with class attributes and override the ``_parse_entry`` /
``_build_entry`` / ``_parse_root`` / ``_build_root`` hooks where the layout is
genuinely different.
"""

import copy
import logging
from typing import Any, Dict, Optional, Sequence, Tuple

from core.adapter_interface import FormatAdapter
from core.canonical_models import CanonicalConfig, CanonicalServer
from adapters.shared.fields import (
    as_milliseconds,
    as_string,
    as_string_list,
    as_string_map,
    infer_transport,
    put_if_present,
)

logger = logging.getLogger(__name__)


class KeyedServerAdapter(FormatAdapter):
    """
    Adapter for object-keyed server containers.

    Class attributes:
        command_field: Key holding the executable
        env_field: Key holding environment variables
        url_fields: Keys checked for the endpoint on parse, in priority order
        url_field: Key the endpoint is written to
        supports_cwd / supports_headers / supports_timeout: Canonical fields
            this format can carry; others are dropped with a warning
        timeout_field: Key holding the timeout (milliseconds unless
            ``_read_timeout`` / ``_write_timeout`` are overridden)
        passthrough_fields: (raw key, metadata name) pairs copied verbatim
            for same-format round trips
    """

    command_field = 'command'
    env_field = 'env'
    url_fields: Sequence[str] = ('url',)
    url_field = 'url'
    supports_cwd = False
    supports_headers = True
    supports_timeout = False
    timeout_field = 'timeout'
    passthrough_fields: Sequence[Tuple[str, str]] = ()

    def to_canonical(self, data: Any) -> CanonicalConfig:
        self.warnings = []
        config = CanonicalConfig(source_format=self.format_name)

        for index, (name, entry) in enumerate(self._get_container(data).items(), start=1):
            if not isinstance(entry, dict):
                self.warnings.append(f"Skipped server '{name}': entry is not an object")
                continue
            name = str(name)
            if not name.strip():
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
        servers = {}
        for server in config.servers:
            servers[server.name] = self._build_entry(server)

        result = {self.container_key: servers}
        self._build_root(config, result)
        logger.debug("Built %s config with %d server(s)", self.format_name, len(servers))
        return result

    # Parsing hooks

    def _get_container(self, data: Any) -> Dict[str, Any]:
        if not isinstance(data, dict):
            return {}
        container = data.get(self.container_key)
        if container is None:
            return {}
        if not isinstance(container, dict):
            self.warnings.append(
                f"Ignored '{self.container_key}': expected an object, got {type(container).__name__}"
            )
            return {}
        return container

    def _parse_entry(self, name: str, entry: Dict[str, Any]) -> CanonicalServer:
        url = self._read_url(entry)
        server = CanonicalServer(
            name=name,
            transport=infer_transport(entry.get('type'), url),
            command=as_string(entry.get(self.command_field)),
            args=as_string_list(entry.get('args')),
            env=as_string_map(entry.get(self.env_field)),
            cwd=as_string(entry.get('cwd')) if self.supports_cwd else None,
            url=url,
            headers=as_string_map(entry.get('headers')) if self.supports_headers else None,
            timeout=self._read_timeout(entry.get(self.timeout_field)) if self.supports_timeout else None,
            source_format=self.format_name,
        )
        self._read_passthrough(entry, server)
        return server

    def _read_url(self, entry: Dict[str, Any]) -> Optional[str]:
        for field_name in self.url_fields:
            url = as_string(entry.get(field_name))
            if url:
                return url
        return None

    def _read_timeout(self, value: Any) -> Optional[int]:
        return as_milliseconds(value)

    def _read_passthrough(self, entry: Dict[str, Any], server: CanonicalServer):
        for raw_key, meta_name in self.passthrough_fields:
            if raw_key in entry:
                server.add_metadata(self.metadata_key(meta_name), copy.deepcopy(entry[raw_key]))

    def _parse_root(self, data: Dict[str, Any], config: CanonicalConfig):
        """Read config-level fields outside the server container."""

    # Building hooks

    def _build_entry(self, server: CanonicalServer) -> Dict[str, Any]:
        entry: Dict[str, Any] = {}
        self._put_type(entry, server)
        put_if_present(entry, self.command_field, server.command)
        put_if_present(entry, 'args', server.args)
        put_if_present(entry, self.env_field, server.env)
        self._put_optional(entry, server, 'cwd', 'cwd', server.cwd, self.supports_cwd)
        put_if_present(entry, self.url_field, server.url)
        self._put_optional(entry, server, 'headers', 'headers', server.headers, self.supports_headers)
        self._put_optional(entry, server, 'timeout', self.timeout_field,
                           self._write_timeout(server.timeout), self.supports_timeout)
        self._write_passthrough(entry, server)
        return entry

    def _put_type(self, entry: Dict[str, Any], server: CanonicalServer):
        """Write the server's type tag. Formats without one write nothing."""

    def _write_timeout(self, timeout: Optional[int]) -> Any:
        return timeout

    def _put_optional(self, entry: Dict[str, Any], server: CanonicalServer,
                      canonical_name: str, key: str, value: Any, supported: bool):
        if supported:
            put_if_present(entry, key, value)
        elif value is not None:
            self.warnings.append(
                f"Dropped unsupported field: {canonical_name} (server '{server.name}')"
            )

    def _write_passthrough(self, entry: Dict[str, Any], server: CanonicalServer):
        for raw_key, meta_name in self.passthrough_fields:
            key = self.metadata_key(meta_name)
            if server.has_metadata(key):
                entry[raw_key] = copy.deepcopy(server.get_metadata(key))

    def _build_root(self, config: CanonicalConfig, result: Dict[str, Any]):
        """Add config-level fields next to the server container."""
