"""
Codex CLI format adapter.

File format (TOML, ``~/.codex/config.toml``):

    [mcp_servers.filesystem]
    command = "npx"
    args = ["-y", "@modelcontextprotocol/server-filesystem"]
    cwd = "/workspace"
    startup_timeout_sec = 30

    [mcp_servers.filesystem.env]
    HOME = "/home/user"

The container key uses an underscore. ``startup_timeout_sec`` is in seconds
and is converted to and from canonical milliseconds, rounding half up.
"""

from pathlib import Path
from typing import Any, Optional

from core.canonical_models import RawFormat
from adapters.shared.fields import ms_to_seconds, seconds_to_ms
from adapters.shared.keyed_adapter import KeyedServerAdapter
from adapters.shared.paths import path_matches


class CodexCliAdapter(KeyedServerAdapter):

    supports_cwd = True
    supports_headers = False
    supports_timeout = True
    timeout_field = 'startup_timeout_sec'

    @property
    def format_name(self) -> str:
        return "codex-cli"

    @property
    def display_name(self) -> str:
        return "Codex CLI"

    @property
    def description(self) -> str:
        return "OpenAI Codex CLI (TOML)"

    @property
    def raw_format(self) -> RawFormat:
        return RawFormat.TOML

    @property
    def container_key(self) -> str:
        return 'mcp_servers'

    @property
    def config_file_name(self) -> str:
        return "~/.codex/config.toml"

    @property
    def docs_url(self) -> str:
        return "https://openai.com/codex"

    def can_handle(self, file_path: Path) -> bool:
        return path_matches(file_path, 'config.toml', ['.codex'])

    def _read_timeout(self, value: Any) -> Optional[int]:
        return seconds_to_ms(value)

    def _write_timeout(self, timeout: Optional[int]) -> Any:
        return ms_to_seconds(timeout)
