"""
Unit tests for format detection.

Tests cover:
- Every detection rule and its precedence
- First-entry classification of plain mcpServers documents
- Detection from file paths and from raw text
"""

import pytest
from pathlib import Path

from core.detector import detect_format, detect_format_from_path, detect_text_format

FIXTURES = Path(__file__).parent / "fixtures"


class TestDetectFormat:
    """Tests for detect_format on deserialized documents."""

    @pytest.mark.parametrize("document,expected", [
        ({"mcpServers": {}, "allowedMcpServers": []}, 'claude-code'),
        ({"deniedMcpServers": ["x"]}, 'claude-code'),
        ({"mcp_servers": {"a": {"command": "npx"}}}, 'codex-cli'),
        ({"servers": {"a": {"command": "npx"}}}, 'vscode'),
        ({"amp.mcpServers": {"a": {"command": "npx"}}}, 'ampcode'),
        ({"context_servers": {"a": {"command": "npx"}}}, 'zed'),
        ({"extensions": {"a": {"cmd": "npx"}}}, 'goose'),
        ({"mcp": {"a": {"type": "local", "command": ["npx"]}}}, 'opencode'),
        ({"mcpServers": [{"name": "a", "command": "npx"}]}, 'continue-dev'),
        ({"mcpServers": {"a": {"command": "npx"}}}, 'claude-desktop'),
    ])
    def test_detection_rules(self, document, expected):
        assert detect_format(document) == expected

    @pytest.mark.parametrize("entry,expected", [
        ({"httpUrl": "https://example.com"}, 'gemini-cli'),
        ({"command": "npx", "trust": True}, 'gemini-cli'),
        ({"command": "npx", "includeTools": ["a"]}, 'gemini-cli'),
        ({"command": "npx", "alwaysAllow": [], "autoApprove": []}, 'cline'),
        ({"command": "npx", "alwaysAllow": ["read"]}, 'roo-code'),
        ({"command": "npx", "autoApprove": ["read"]}, 'cursor'),
        ({"command": "npx", "disabled": False}, 'claude-desktop'),
    ])
    def test_first_entry_fields(self, entry, expected):
        assert detect_format({"mcpServers": {"a": entry}}) == expected

    def test_first_entry_wins(self):
        """Only the first server decides between permission-field vendors."""
        document = {"mcpServers": {
            "a": {"command": "npx", "alwaysAllow": []},
            "b": {"command": "npx", "autoApprove": []},
        }}
        assert detect_format(document) == 'roo-code'

    def test_earlier_rule_wins(self):
        """A document matching two rules is classified by the earlier one."""
        assert detect_format({"servers": {}, "mcpServers": []}) == 'vscode'
        assert detect_format({"mcp_servers": {}, "allowedMcpServers": []}) == 'claude-code'
        assert detect_format({"extensions": {}, "mcp": {}}) == 'goose'

    def test_empty_mcp_servers_is_claude_desktop(self):
        assert detect_format({"mcpServers": {}}) == 'claude-desktop'

    def test_scalar_container_does_not_match(self):
        """Keys only count when they hold an object or array."""
        assert detect_format({"servers": "none"}) is None

    @pytest.mark.parametrize("value", [None, [], "text", 42, {"other": {}}])
    def test_unknown(self, value):
        assert detect_format(value) is None


class TestDetectFromPathAndText:
    """Tests for detect_format_from_path and detect_text_format."""

    def test_from_path(self):
        assert detect_format_from_path(Path('.cursor/mcp.json')) == 'cursor'
        assert detect_format_from_path('~/.codex/config.toml') == 'codex-cli'
        assert detect_format_from_path(Path('unknown.json')) is None

    def test_text_json(self):
        assert detect_text_format('{"servers": {"a": {"command": "npx"}}}') == 'vscode'

    def test_text_json_fragment(self):
        """Detection uses the same recovery as conversion."""
        assert detect_text_format('"mcpServers": {"a": {"command": "npx", "autoApprove": []}}') == 'cursor'

    def test_text_yaml(self):
        text = (FIXTURES / "goose_config.yaml").read_text(encoding='utf-8')
        assert detect_text_format(text) == 'goose'

    def test_text_continue_yaml(self):
        text = (FIXTURES / "continue_config.yaml").read_text(encoding='utf-8')
        assert detect_text_format(text) == 'continue-dev'

    def test_text_toml(self):
        text = (FIXTURES / "codex_config.toml").read_text(encoding='utf-8')
        assert detect_text_format(text) == 'codex-cli'

    def test_text_unknown(self):
        assert detect_text_format('just some words') is None
