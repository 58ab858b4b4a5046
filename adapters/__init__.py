"""
Format adapters for converting between editor-specific MCP configs and canonical representation.

This module contains one FormatAdapter implementation per supported editor.
Each adapter knows how to:
- Walk the editor's server container (object keyed by name, or list of records)
- Convert to canonical representation
- Convert from canonical back to the editor's layout
- Preserve editor-specific fields via metadata

Adding a new adapter:
1. Subclass KeyedServerAdapter (adapters/shared/keyed_adapter.py) and describe
   the field differences with class attributes
2. Override the parse/build hooks only where the layout really differs
3. Add the class to ADAPTER_CLASSES
"""

from .ampcode import AmpCodeAdapter
from .antigravity import AntigravityAdapter
from .claude_code import ClaudeCodeAdapter
from .codex import CodexCliAdapter
from .continue_dev import ContinueDevAdapter
from .gemini import GeminiCliAdapter
from .goose import GooseAdapter
from .librechat import LibreChatAdapter
from .opencode import OpenCodeAdapter
from .permissions import ClineAdapter, CursorAdapter, RooCodeAdapter
from .standard import (
    ClaudeDesktopAdapter,
    JunieAdapter,
    LMStudioAdapter,
    SourcegraphCodyAdapter,
    WindsurfAdapter,
)
from .vscode import CopilotCliAdapter, VSCodeAdapter
from .zed import ZedAdapter

from core.registry import FormatRegistry

# Registration order is also path-detection order: Windsurf's mcp_config.json
# must be tried before Antigravity's, Roo Code's cline_mcp_settings.json
# before Cline's.
ADAPTER_CLASSES = (
    ClaudeDesktopAdapter,
    WindsurfAdapter,
    CursorAdapter,
    VSCodeAdapter,
    OpenCodeAdapter,
    GeminiCliAdapter,
    LMStudioAdapter,
    AntigravityAdapter,
    JunieAdapter,
    RooCodeAdapter,
    CopilotCliAdapter,
    ContinueDevAdapter,
    CodexCliAdapter,
    ClineAdapter,
    ClaudeCodeAdapter,
    AmpCodeAdapter,
    ZedAdapter,
    SourcegraphCodyAdapter,
    GooseAdapter,
    LibreChatAdapter,
)


def create_registry() -> FormatRegistry:
    """Build a registry holding a fresh instance of every supported adapter."""
    registry = FormatRegistry()
    for adapter_class in ADAPTER_CLASSES:
        registry.register(adapter_class())
    return registry


__all__ = [
    'ADAPTER_CLASSES',
    'create_registry',
    'AmpCodeAdapter',
    'AntigravityAdapter',
    'ClaudeCodeAdapter',
    'ClaudeDesktopAdapter',
    'ClineAdapter',
    'CodexCliAdapter',
    'ContinueDevAdapter',
    'CopilotCliAdapter',
    'CursorAdapter',
    'GeminiCliAdapter',
    'GooseAdapter',
    'JunieAdapter',
    'LMStudioAdapter',
    'LibreChatAdapter',
    'OpenCodeAdapter',
    'RooCodeAdapter',
    'SourcegraphCodyAdapter',
    'VSCodeAdapter',
    'WindsurfAdapter',
    'ZedAdapter',
]
