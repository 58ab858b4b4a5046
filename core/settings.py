"""
Runtime settings for the converter.

Defaults can be overridden through environment variables; command-line flags
override both.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from core.messages import normalize_locale

ENV_LOCALE = 'MCP_CONVERTER_LOCALE'
ENV_JSON_INDENT = 'MCP_CONVERTER_JSON_INDENT'
ENV_LOG_LEVEL = 'MCP_CONVERTER_LOG_LEVEL'


@dataclass
class ConverterSettings:
    locale: str = 'en'
    json_indent: int = 2
    log_level: str = 'WARNING'

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'ConverterSettings':
        """Build settings from environment variables, ignoring malformed values."""
        environ = os.environ if environ is None else environ
        settings = cls()

        if environ.get(ENV_LOCALE):
            settings.locale = normalize_locale(environ[ENV_LOCALE])

        indent = environ.get(ENV_JSON_INDENT)
        if indent and indent.isdigit():
            settings.json_indent = int(indent)

        if environ.get(ENV_LOG_LEVEL):
            settings.log_level = environ[ENV_LOG_LEVEL].upper()

        return settings
