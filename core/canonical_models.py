"""
Canonical data models for MCP server declarations.

Every supported editor format is converted to and from these models. The
canonical form is the hub of a hub-and-spoke conversion: adding a new editor
only requires an adapter that speaks this representation.

Format-specific fields that have no canonical counterpart (permission arrays,
``disabled`` flags, ``envFile`` and so on) are kept in ``metadata`` under
keys prefixed with the owning format's name, so a same-format round trip can
restore them while a cross-format conversion drops them.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class Transport(str, Enum):
    """Connection mechanism for an MCP server."""
    STDIO = "stdio"
    HTTP = "http"
    SSE = "sse"


class RawFormat(str, Enum):
    """Text serialization used by an editor's config file."""
    JSON = "json"
    YAML = "yaml"
    TOML = "toml"


@dataclass
class CanonicalServer:
    """
    One declared MCP server.

    ``timeout`` is always milliseconds, whatever unit the source format used.
    Empty collections are normalized to ``None`` by the adapters so that
    "absent" has exactly one representation.
    """
    name: str
    transport: Transport = Transport.STDIO
    command: Optional[str] = None
    args: Optional[List[str]] = None
    env: Optional[Dict[str, str]] = None
    cwd: Optional[str] = None
    url: Optional[str] = None
    headers: Optional[Dict[str, str]] = None
    timeout: Optional[int] = None
    source_format: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_remote(self) -> bool:
        return self.transport != Transport.STDIO

    def add_metadata(self, key: str, value: Any):
        self.metadata[key] = value

    def get_metadata(self, key: str, default: Any = None) -> Any:
        return self.metadata.get(key, default)

    def has_metadata(self, key: str) -> bool:
        return key in self.metadata


@dataclass
class CanonicalConfig:
    """
    Ordered collection of servers plus config-level metadata.

    Order follows the source document's iteration order.
    """
    servers: List[CanonicalServer] = field(default_factory=list)
    source_format: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.servers)

    def __iter__(self):
        return iter(self.servers)

    @property
    def server_names(self) -> List[str]:
        return [server.name for server in self.servers]

    def get_server(self, name: str) -> Optional[CanonicalServer]:
        for server in self.servers:
            if server.name == name:
                return server
        return None

    def add_server(self, server: CanonicalServer):
        """
        Insert a server, replacing any existing one with the same name.

        Keyed source formats cannot carry duplicates, but array-based ones can;
        the last declaration wins and keeps the position of the first.
        """
        for index, existing in enumerate(self.servers):
            if existing.name == server.name:
                self.servers[index] = server
                return
        self.servers.append(server)

    def add_metadata(self, key: str, value: Any):
        self.metadata[key] = value

    def get_metadata(self, key: str, default: Any = None) -> Any:
        return self.metadata.get(key, default)

    def has_metadata(self, key: str) -> bool:
        return key in self.metadata
