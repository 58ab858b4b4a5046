"""
Adapters for editors that add per-server permission fields to ``mcpServers``.

- Cursor:   ``disabled``, ``autoApprove``
- Roo Code: ``cwd``, ``alwaysAllow``, ``disabled``
- Cline:    ``disabled``, ``alwaysAllow``, ``autoApprove``

Permission lists name tools of one particular server in one particular
editor, so they are kept as format metadata rather than canonical fields.
They survive a round trip through the same editor (empty lists included) and
are dropped when converting elsewhere.
"""

from pathlib import Path

from adapters.shared.keyed_adapter import KeyedServerAdapter
from adapters.shared.paths import path_matches


class CursorAdapter(KeyedServerAdapter):

    passthrough_fields = (
        ('disabled', 'disabled'),
        ('autoApprove', 'auto_approve'),
    )

    @property
    def format_name(self) -> str:
        return "cursor"

    @property
    def display_name(self) -> str:
        return "Cursor"

    @property
    def description(self) -> str:
        return "AI-first code editor (global: ~/.cursor/mcp.json, project: .cursor/mcp.json)"

    @property
    def config_file_name(self) -> str:
        return ".cursor/mcp.json"

    @property
    def docs_url(self) -> str:
        return "https://docs.cursor.com/context/model-context-protocol"

    def can_handle(self, file_path: Path) -> bool:
        return path_matches(file_path, 'mcp.json', ['.cursor'])


class RooCodeAdapter(KeyedServerAdapter):

    supports_cwd = True
    passthrough_fields = (
        ('alwaysAllow', 'always_allow'),
        ('disabled', 'disabled'),
    )

    @property
    def format_name(self) -> str:
        return "roo-code"

    @property
    def display_name(self) -> str:
        return "Roo Code"

    @property
    def description(self) -> str:
        return "AI coding assistant VS Code extension"

    @property
    def config_file_name(self) -> str:
        return ".roo/mcp.json"

    @property
    def docs_url(self) -> str:
        return "https://docs.roocode.com/features/mcp/using-mcp-in-roo"

    def can_handle(self, file_path: Path) -> bool:
        return (path_matches(file_path, 'mcp.json', ['.roo']) or
                path_matches(file_path, 'cline_mcp_settings.json',
                             ['settings', 'rooveterinaryinc.roo-cline']))


class ClineAdapter(KeyedServerAdapter):
    """
    Cline carries both ``alwaysAllow`` and ``autoApprove``. Seeing both on
    one entry is what identifies a Cline config during detection.
    """

    passthrough_fields = (
        ('disabled', 'disabled'),
        ('alwaysAllow', 'always_allow'),
        ('autoApprove', 'auto_approve'),
    )

    @property
    def format_name(self) -> str:
        return "cline"

    @property
    def display_name(self) -> str:
        return "Cline"

    @property
    def description(self) -> str:
        return "Autonomous Coding Agent"

    @property
    def config_file_name(self) -> str:
        return "cline_mcp_settings.json"

    @property
    def docs_url(self) -> str:
        return "https://github.com/cline/cline"

    def can_handle(self, file_path: Path) -> bool:
        return path_matches(file_path, 'cline_mcp_settings.json')
