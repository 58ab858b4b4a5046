"""
Format detection for config documents.

Editor schemas overlap (most use ``mcpServers``), so detection is an ordered
list of rules: the first rule that matches decides. More specific signatures
come first. For plain ``mcpServers`` objects only the first server entry is
inspected; a document mixing permission-field shapes is classified by
whichever server comes first.
"""

import logging
from pathlib import Path
from typing import Any, Callable, List, Optional, Tuple

import tomlkit
import yaml
from tomlkit.exceptions import TOMLKitError

from adapters import create_registry
from core.errors import JsonRecoveryError
from core.flexible_json import parse_json_flexible
from core.registry import FormatRegistry

logger = logging.getLogger(__name__)


def _is_structured(value: Any) -> bool:
    return isinstance(value, (dict, list))


def _has_structured(key: str) -> Callable[[dict], bool]:
    return lambda doc: _is_structured(doc.get(key))


def _classify_mcp_servers(servers: Any) -> str:
    """Pick a vendor for an object-keyed ``mcpServers`` by its first entry."""
    if isinstance(servers, dict) and servers:
        first = next(iter(servers.values()))
        if isinstance(first, dict):
            if 'httpUrl' in first or 'trust' in first or 'includeTools' in first:
                return 'gemini-cli'
            if 'alwaysAllow' in first and 'autoApprove' in first:
                return 'cline'
            if 'alwaysAllow' in first:
                return 'roo-code'
            if 'autoApprove' in first:
                return 'cursor'
    return 'claude-desktop'


# (format id, predicate) pairs, checked in order
DETECTION_RULES: List[Tuple[str, Callable[[dict], bool]]] = [
    ('claude-code', lambda doc: 'allowedMcpServers' in doc or 'deniedMcpServers' in doc),
    ('codex-cli', _has_structured('mcp_servers')),
    ('vscode', _has_structured('servers')),
    ('ampcode', _has_structured('amp.mcpServers')),
    ('zed', _has_structured('context_servers')),
    ('goose', _has_structured('extensions')),
    ('opencode', _has_structured('mcp')),
    ('continue-dev', lambda doc: isinstance(doc.get('mcpServers'), list)),
]


def detect_format(parsed: Any) -> Optional[str]:
    """
    Guess the editor format of an already-deserialized document.

    Returns:
        Format identifier, or None if the document matches no known format
    """
    if not isinstance(parsed, dict):
        return None

    for format_name, matches in DETECTION_RULES:
        if matches(parsed):
            logger.debug("Detected format '%s'", format_name)
            return format_name

    if 'mcpServers' in parsed:
        format_name = _classify_mcp_servers(parsed['mcpServers'])
        logger.debug("Detected format '%s' from first mcpServers entry", format_name)
        return format_name

    logger.debug("No format signature found in keys: %s", list(parsed.keys()))
    return None


def detect_format_from_path(file_path: Path,
                            registry: Optional[FormatRegistry] = None) -> Optional[str]:
    """Guess the editor format from a config file's name and location."""
    if registry is None:
        registry = create_registry()
    adapter = registry.detect_format(Path(file_path))
    return adapter.format_name if adapter else None


def _load_toml(text: str) -> Any:
    return tomlkit.parse(text).unwrap()


def detect_text_format(text: str) -> Optional[str]:
    """
    Guess the editor format of raw text.

    The text is tried as JSON (with fragment recovery), then YAML, then TOML;
    the first structure that matches a detection rule wins.
    """
    loaders = (
        ('json', parse_json_flexible, JsonRecoveryError),
        ('yaml', yaml.safe_load, yaml.YAMLError),
        ('toml', _load_toml, TOMLKitError),
    )
    for label, load, error_type in loaders:
        try:
            parsed = load(text)
        except error_type as e:
            logger.debug("Text is not %s: %s", label, e)
            continue
        format_name = detect_format(parsed)
        if format_name is not None:
            return format_name
    return None
