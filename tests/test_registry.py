"""
Unit tests for format registry.

Tests cover:
- Adapter registration and unregistration
- Adapter lookup
- Format detection from file paths
- Raw format queries
- The default registry with every editor format
"""

import pytest
from pathlib import Path

from core.registry import FormatRegistry
from core.canonical_models import RawFormat
from adapters import (
    ADAPTER_CLASSES,
    ClaudeDesktopAdapter,
    CodexCliAdapter,
    GooseAdapter,
    create_registry,
)

ALL_FORMATS = [
    'claude-desktop', 'windsurf', 'cursor', 'vscode', 'opencode', 'gemini-cli',
    'lmstudio', 'antigravity', 'junie', 'roo-code', 'copilot-cli', 'continue-dev',
    'codex-cli', 'cline', 'claude-code', 'ampcode', 'zed', 'sourcegraph-cody',
    'goose', 'librechat',
]


class TestFormatRegistry:
    """Tests for FormatRegistry."""

    @pytest.fixture
    def registry(self):
        """Create FormatRegistry with some adapters."""
        registry = FormatRegistry()
        registry.register(ClaudeDesktopAdapter())
        registry.register(CodexCliAdapter())
        return registry

    def test_register_adapter(self):
        """Test registering an adapter."""
        registry = FormatRegistry()
        registry.register(GooseAdapter())
        assert 'goose' in registry.list_formats()
        assert registry.get_adapter('goose') is not None

    def test_register_duplicate_raises_error(self, registry):
        """Test that registering duplicate format raises error."""
        with pytest.raises(ValueError, match="already registered"):
            registry.register(ClaudeDesktopAdapter())

    def test_get_adapter(self, registry):
        """Test retrieving adapter by name."""
        adapter = registry.get_adapter('codex-cli')
        assert adapter is not None
        assert adapter.format_name == 'codex-cli'

    def test_get_nonexistent_adapter(self, registry):
        """Test retrieving non-existent adapter returns None."""
        assert registry.get_adapter('nonexistent') is None

    def test_unregister(self, registry):
        """Test removing an adapter; unknown names are ignored."""
        registry.unregister('codex-cli')
        assert 'codex-cli' not in registry
        registry.unregister('never-registered')
        assert len(registry) == 1

    def test_detect_format(self, registry):
        """Test auto-detecting format from file path."""
        adapter = registry.detect_format(Path('~/.codex/config.toml'))
        assert adapter is not None
        assert adapter.format_name == 'codex-cli'

    def test_detect_format_no_match(self, registry):
        """Test that detecting unknown format returns None."""
        assert registry.detect_format(Path('notes.txt')) is None
        assert registry.detect_format(Path('config.toml')) is None

    def test_get_formats_using(self, registry):
        assert registry.get_formats_using(RawFormat.TOML) == ['codex-cli']
        assert registry.get_formats_using(RawFormat.JSON) == ['claude-desktop']
        assert registry.get_formats_using(RawFormat.YAML) == []


class TestDefaultRegistry:
    """Tests for the registry holding every editor format."""

    @pytest.fixture
    def registry(self):
        return create_registry()

    def test_all_formats_registered_in_order(self, registry):
        assert registry.list_formats() == ALL_FORMATS
        assert len(ADAPTER_CLASSES) == 20

    def test_fresh_instances_per_registry(self, registry):
        """Adapters keep per-conversion warnings, so registries never share them."""
        other = create_registry()
        assert registry.get_adapter('cursor') is not other.get_adapter('cursor')

    def test_raw_formats(self, registry):
        assert set(registry.get_formats_using(RawFormat.YAML)) == {'continue-dev', 'goose', 'librechat'}
        assert registry.get_formats_using(RawFormat.TOML) == ['codex-cli']
        assert len(registry.get_formats_using(RawFormat.JSON)) == 16

    def test_every_adapter_describes_itself(self, registry):
        for adapter in registry.list_adapters():
            assert adapter.display_name
            assert adapter.description
            assert adapter.config_file_name
            assert adapter.docs_url.startswith('https://')

    @pytest.mark.parametrize("path,expected", [
        ('~/Library/Application Support/Claude/claude_desktop_config.json', 'claude-desktop'),
        ('~/.codeium/windsurf/mcp_config.json', 'windsurf'),
        ('~/.gemini/antigravity/mcp_config.json', 'antigravity'),
        ('project/.cursor/mcp.json', 'cursor'),
        ('project/.vscode/mcp.json', 'vscode'),
        ('~/.config/Code/User/mcp.json', 'vscode'),
        ('project/opencode.json', 'opencode'),
        ('~/.gemini/settings.json', 'gemini-cli'),
        ('~/.lmstudio/mcp.json', 'lmstudio'),
        ('project/.junie/mcp/mcp.json', 'junie'),
        ('project/.roo/mcp.json', 'roo-code'),
        ('Code/User/globalStorage/rooveterinaryinc.roo-cline/settings/cline_mcp_settings.json', 'roo-code'),
        ('Code/User/globalStorage/saoudrizwan.claude-dev/settings/cline_mcp_settings.json', 'cline'),
        ('~/.copilot/mcp-config.json', 'copilot-cli'),
        ('~/.continue/config.yaml', 'continue-dev'),
        ('~/.codex/config.toml', 'codex-cli'),
        ('~/.claude.json', 'claude-code'),
        ('~/.amp/settings.json', 'ampcode'),
        ('~/.config/.zed/settings.json', 'zed'),
        ('~/.config/goose/config.yaml', 'goose'),
        ('librechat.yaml', 'librechat'),
    ])
    def test_detect_format_from_path(self, registry, path, expected):
        adapter = registry.detect_format(Path(path))
        assert adapter is not None
        assert adapter.format_name == expected

    @pytest.mark.parametrize("path", [
        'settings.json',
        'mcp.json',
        'config.yaml',
        'project/.vscode/settings.json',
    ])
    def test_generic_names_not_claimed(self, registry, path):
        assert registry.detect_format(Path(path)) is None
