"""
Text codecs for the three raw config formats.

JSON input goes through the flexible parser so pasted fragments still load.
YAML and TOML are parsed strictly; their syntax errors become
``ConfigParseError`` with a localized message naming the editor.
"""

import json
import logging
from typing import Any, Optional

import tomlkit
import yaml
from tomlkit.exceptions import TOMLKitError

from core.canonical_models import RawFormat
from core.errors import ConfigParseError
from core.flexible_json import parse_json_flexible
from core.messages import get_message

logger = logging.getLogger(__name__)


def loads(text: str, raw_format: RawFormat, editor: str = '',
          locale: Optional[str] = None) -> Any:
    """
    Deserialize config text.

    Args:
        text: Raw document text
        raw_format: Format the text is expected to be in
        editor: Editor display name used in error messages
        locale: Language for error messages

    Raises:
        ConfigParseError: If the text is not valid in ``raw_format``
    """
    if raw_format == RawFormat.JSON:
        return parse_json_flexible(text, locale)

    if raw_format == RawFormat.YAML:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as e:
            logger.debug("YAML parse failed: %s", e)
            raise ConfigParseError(
                get_message('invalid_yaml', locale, editor=editor), RawFormat.YAML
            ) from e

    if raw_format == RawFormat.TOML:
        try:
            return tomlkit.parse(text).unwrap()
        except TOMLKitError as e:
            logger.debug("TOML parse failed: %s", e)
            raise ConfigParseError(
                get_message('invalid_toml', locale, editor=editor), RawFormat.TOML
            ) from e

    raise ValueError(f"Unsupported raw format: {raw_format}")


def dumps(data: Any, raw_format: RawFormat, json_indent: int = 2) -> str:
    """Serialize a config document using each format's conventional layout."""
    if raw_format == RawFormat.JSON:
        return json.dumps(data, indent=json_indent, ensure_ascii=False)
    if raw_format == RawFormat.YAML:
        return yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
    if raw_format == RawFormat.TOML:
        return tomlkit.dumps(data)
    raise ValueError(f"Unsupported raw format: {raw_format}")
