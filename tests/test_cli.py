"""
Unit tests for the command-line interface.

Tests cover:
- Argument parsing (all flags and options)
- Format listing and detection
- Conversion from files and stdin to files and stdout
- Source format auto-detection (path first, then content)
- Error handling (missing args, invalid paths, unconvertible input)
"""

import io
import json

import pytest
import yaml
from pathlib import Path

from cli.main import create_parser, main, setup_registry

FIXTURES = Path(__file__).parent / "fixtures"

CURSOR_CONFIG = {
    "mcpServers": {
        "filesystem": {"command": "npx", "args": ["-y", "pkg"], "autoApprove": ["read"]},
    }
}


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep user environment settings out of CLI runs."""
    for name in ('MCP_CONVERTER_LOCALE', 'MCP_CONVERTER_JSON_INDENT', 'MCP_CONVERTER_LOG_LEVEL'):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def cursor_file(tmp_path):
    """A Cursor config at its conventional location."""
    path = tmp_path / ".cursor" / "mcp.json"
    path.parent.mkdir()
    path.write_text(json.dumps(CURSOR_CONFIG), encoding='utf-8')
    return path


class TestCLIArgumentParsing:
    """Tests for argument parsing (all flags and options)."""

    @pytest.fixture
    def parser(self):
        """Create argument parser instance."""
        return create_parser()

    def test_defaults(self, parser):
        args = parser.parse_args([])
        assert args.input is None
        assert args.output is None
        assert args.source_format is None
        assert args.target_format is None
        assert not args.detect
        assert not args.list_formats
        assert not args.verbose

    def test_paths(self, parser, tmp_path):
        args = parser.parse_args(['--input', str(tmp_path / 'in.json'), '-o', str(tmp_path / 'out.json')])
        assert args.input == tmp_path / 'in.json'
        assert args.output == tmp_path / 'out.json'

    def test_format_choices(self, parser):
        """Every registered format is accepted."""
        for name in setup_registry().list_formats():
            args = parser.parse_args(['--source-format', name, '--target-format', name])
            assert args.source_format == name
            assert args.target_format == name

    def test_unknown_format_rejected(self, parser):
        with pytest.raises(SystemExit):
            parser.parse_args(['--target-format', 'notepad'])

    def test_locale_choices(self, parser):
        assert parser.parse_args(['--locale', 'ko']).locale == 'ko'
        with pytest.raises(SystemExit):
            parser.parse_args(['--locale', 'fr'])


class TestCLICommands:
    """Tests for --list-formats and --detect."""

    def test_list_formats(self, capsys):
        assert main(['--list-formats']) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 20
        assert lines[0].startswith('claude-desktop')
        assert 'Codex CLI (toml' in '\n'.join(lines)

    def test_detect_from_path(self, cursor_file, capsys):
        assert main(['--input', str(cursor_file), '--detect']) == 0
        assert capsys.readouterr().out.strip() == 'cursor'

    def test_detect_from_content(self, capsys):
        assert main(['--input', str(FIXTURES / 'goose_config.yaml'), '--detect']) == 0
        assert capsys.readouterr().out.strip() == 'goose'

    def test_detect_failure(self, tmp_path, capsys):
        path = tmp_path / 'notes.txt'
        path.write_text('nothing to see', encoding='utf-8')
        assert main(['--input', str(path), '--detect']) == 1
        assert 'Cannot detect' in capsys.readouterr().err


class TestCLIConversion:
    """Tests for converting documents."""

    def test_file_to_stdout(self, cursor_file, capsys):
        assert main(['--input', str(cursor_file), '--target-format', 'vscode']) == 0
        output = json.loads(capsys.readouterr().out)
        assert output == {"servers": {"filesystem": {"command": "npx", "args": ["-y", "pkg"]}}}

    def test_file_to_file(self, cursor_file, tmp_path):
        output_file = tmp_path / 'out' / 'config.yaml'
        assert main(['--input', str(cursor_file), '--target-format', 'goose',
                     '--output', str(output_file)]) == 0

        document = yaml.safe_load(output_file.read_text(encoding='utf-8'))
        assert document["extensions"]["filesystem"]["cmd"] == "npx"

    def test_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr('sys.stdin', io.StringIO('"mcp": {"s": {"command": ["uvx", "pkg"]}}'))
        assert main(['--source-format', 'opencode', '--target-format', 'claude-desktop']) == 0
        output = json.loads(capsys.readouterr().out)
        assert output == {"mcpServers": {"s": {"command": "uvx", "args": ["pkg"]}}}

    def test_stdin_detected_from_content(self, monkeypatch, capsys):
        monkeypatch.setattr('sys.stdin', io.StringIO(json.dumps(CURSOR_CONFIG)))
        assert main(['--target-format', 'cline']) == 0
        assert json.loads(capsys.readouterr().out)["mcpServers"]["filesystem"]["command"] == "npx"

    def test_explicit_source_overrides_path(self, cursor_file, capsys):
        """--source-format wins over the file location."""
        assert main(['--input', str(cursor_file), '--source-format', 'vscode',
                     '--target-format', 'cursor']) == 1
        assert 'No MCP servers found' in capsys.readouterr().err

    def test_verbose_reports_warnings(self, tmp_path, capsys):
        path = tmp_path / 'mcp.json'
        path.write_text(json.dumps({"servers": {"fs": {"command": "npx", "cwd": "/work"}}}),
                        encoding='utf-8')
        assert main(['-i', str(path), '--target-format', 'claude-desktop', '-v']) == 0
        err = capsys.readouterr().err
        assert "Warning: Dropped unsupported field: cwd (server 'fs')" in err
        assert "Converted 1 server(s)" in err


class TestCLIErrors:
    """Tests for error handling."""

    def test_target_format_required(self, cursor_file, capsys):
        assert main(['--input', str(cursor_file)]) == 1
        assert '--target-format is required' in capsys.readouterr().err

    def test_missing_input_file(self, tmp_path, capsys):
        assert main(['--input', str(tmp_path / 'missing.json'), '--target-format', 'zed']) == 1
        assert 'File not found' in capsys.readouterr().err

    def test_input_is_directory(self, tmp_path, capsys):
        assert main(['--input', str(tmp_path), '--target-format', 'zed']) == 1
        assert 'is a directory' in capsys.readouterr().err

    def test_input_not_utf8(self, tmp_path, capsys):
        path = tmp_path / 'mcp.json'
        path.write_bytes(b'{"mcpServers": {"caf\xe9": {"command": "x"}}}')
        assert main(['--input', str(path), '--target-format', 'zed']) == 1
        assert 'not valid UTF-8' in capsys.readouterr().err

    def test_undetectable_source(self, monkeypatch, capsys):
        monkeypatch.setattr('sys.stdin', io.StringIO('hello'))
        assert main(['--target-format', 'zed']) == 1
        assert 'Cannot auto-detect source format' in capsys.readouterr().err

    def test_conversion_error_localized(self, monkeypatch, capsys):
        monkeypatch.setattr('sys.stdin', io.StringIO('{"mcpServers": {}}'))
        assert main(['--source-format', 'cursor', '--target-format', 'zed', '--locale', 'ko']) == 1
        assert '변환할 MCP 서버를 찾을 수 없습니다' in capsys.readouterr().err
