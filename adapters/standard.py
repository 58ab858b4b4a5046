"""
Adapters for editors that use the plain ``mcpServers`` layout.

File format (JSON):
{
  "mcpServers": {
    "filesystem": {
      "command": "npx",
      "args": ["-y", "@modelcontextprotocol/server-filesystem", "/path"],
      "env": {"DEBUG": "true"}
    },
    "remote": {
      "url": "http://localhost:3000/mcp",
      "headers": {"Authorization": "Bearer token"}
    }
  }
}

These editors share the schema exactly and differ only in where the file
lives. None of them stores a working directory or timeout.
"""

from pathlib import Path

from adapters.shared.keyed_adapter import KeyedServerAdapter
from adapters.shared.paths import path_matches


class ClaudeDesktopAdapter(KeyedServerAdapter):
    """Claude Desktop: ``claude_desktop_config.json``. The most common shape."""

    @property
    def format_name(self) -> str:
        return "claude-desktop"

    @property
    def display_name(self) -> str:
        return "Claude Desktop"

    @property
    def description(self) -> str:
        return "Anthropic Claude Desktop App"

    @property
    def config_file_name(self) -> str:
        return "claude_desktop_config.json"

    @property
    def docs_url(self) -> str:
        return "https://modelcontextprotocol.io/quickstart/user"

    def can_handle(self, file_path: Path) -> bool:
        return path_matches(file_path, 'claude_desktop_config.json')


class WindsurfAdapter(KeyedServerAdapter):
    """Windsurf: ``~/.codeium/windsurf/mcp_config.json``, standard ``url`` field."""

    @property
    def format_name(self) -> str:
        return "windsurf"

    @property
    def display_name(self) -> str:
        return "Windsurf"

    @property
    def description(self) -> str:
        return "Codeium Windsurf Editor"

    @property
    def config_file_name(self) -> str:
        return "mcp_config.json"

    @property
    def docs_url(self) -> str:
        return "https://docs.codeium.com/"

    def can_handle(self, file_path: Path) -> bool:
        return path_matches(file_path, 'mcp_config.json', ['windsurf'])


class LMStudioAdapter(KeyedServerAdapter):

    @property
    def format_name(self) -> str:
        return "lmstudio"

    @property
    def display_name(self) -> str:
        return "LM Studio"

    @property
    def description(self) -> str:
        return "Local LLM runner"

    @property
    def docs_url(self) -> str:
        return "https://lmstudio.ai/docs/mcp"

    def can_handle(self, file_path: Path) -> bool:
        return path_matches(file_path, 'mcp.json', ['.lmstudio'])


class JunieAdapter(KeyedServerAdapter):

    @property
    def format_name(self) -> str:
        return "junie"

    @property
    def display_name(self) -> str:
        return "JetBrains Junie / AI Assistant"

    @property
    def description(self) -> str:
        return "JetBrains IDE AI Assistant"

    @property
    def config_file_name(self) -> str:
        return ".junie/mcp/mcp.json"

    @property
    def docs_url(self) -> str:
        return "https://www.jetbrains.com/help/idea/ai-assistant.html"

    def can_handle(self, file_path: Path) -> bool:
        return path_matches(file_path, 'mcp.json', ['mcp', '.junie'])


class SourcegraphCodyAdapter(KeyedServerAdapter):

    @property
    def format_name(self) -> str:
        return "sourcegraph-cody"

    @property
    def display_name(self) -> str:
        return "Sourcegraph Cody"

    @property
    def description(self) -> str:
        return "AI coding assistant by Sourcegraph"

    @property
    def config_file_name(self) -> str:
        return "mcp_servers.json"

    @property
    def docs_url(self) -> str:
        return "https://sourcegraph.com/docs/cody/clients/mcp"

    def can_handle(self, file_path: Path) -> bool:
        return path_matches(file_path, 'mcp_servers.json', ['cody'])
