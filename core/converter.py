"""
Conversion entry points.

``convert_config`` is the text-in/text-out pipeline used by interactive
callers: deserialize, parse to canonical form, rebuild for the target editor
and serialize. It never raises; every failure becomes a ``ConversionResult``
with a localized message.

``parse_to_universal`` and ``convert_from_universal`` expose the two halves
for callers that already hold deserialized documents (for example a tool that
reads editor config files from disk and merges the result itself).
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from adapters import create_registry
from core.adapter_interface import FormatAdapter
from core.canonical_models import CanonicalConfig
from core.errors import ConfigParseError, NoServersFoundError, UnknownFormatError
from core.messages import get_message
from core.registry import FormatRegistry
from core.serializers import dumps, loads
from core.settings import ConverterSettings

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    """Outcome of ``convert_config``."""
    success: bool
    output: str = ''
    server_count: int = 0
    error: Optional[str] = None
    warnings: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        if self.success:
            return {'success': True, 'output': self.output, 'serverCount': self.server_count}
        return {'success': False, 'error': self.error}


def _require_adapter(registry: FormatRegistry, format_name: str) -> FormatAdapter:
    adapter = registry.get_adapter(format_name)
    if adapter is None:
        raise UnknownFormatError(format_name)
    return adapter


def parse_to_universal(parsed: Any, source_format: str,
                       registry: Optional[FormatRegistry] = None) -> CanonicalConfig:
    """
    Convert a deserialized editor document to canonical form.

    Raises:
        UnknownFormatError: If ``source_format`` is not registered
    """
    if registry is None:
        registry = create_registry()
    return _require_adapter(registry, source_format).to_canonical(parsed)


def convert_from_universal(config: CanonicalConfig, target_format: str,
                           options: Optional[Dict[str, Any]] = None,
                           registry: Optional[FormatRegistry] = None) -> Dict[str, Any]:
    """
    Build an editor document from canonical form.

    For editors whose servers live inside a larger settings file, the result
    holds only the server container (plus any required root fields); merging
    it into the existing document is up to the caller.

    Raises:
        UnknownFormatError: If ``target_format`` is not registered
    """
    if registry is None:
        registry = create_registry()
    return _require_adapter(registry, target_format).from_canonical(config, options)


def convert_config(text: str, source_format: str, target_format: str,
                   locale: Optional[str] = None,
                   settings: Optional[ConverterSettings] = None,
                   registry: Optional[FormatRegistry] = None) -> ConversionResult:
    """
    Convert config text from one editor format to another.

    Args:
        text: Source document text
        source_format: Format identifier of ``text``
        target_format: Format identifier to produce
        locale: Language for error messages (defaults to the settings locale)
        settings: Runtime settings; environment defaults when omitted
        registry: Adapter registry; a fresh default registry when omitted

    Returns:
        ConversionResult with the serialized output and server count on
        success, or a localized error message on failure
    """
    if settings is None:
        settings = ConverterSettings.from_env()
    if registry is None:
        registry = create_registry()
    locale = locale or settings.locale

    try:
        source = _require_adapter(registry, source_format)
        target = _require_adapter(registry, target_format)

        parsed = loads(text, source.raw_format, source.display_name, locale)
        config = source.to_canonical(parsed)
        warnings = list(source.get_conversion_warnings())

        if len(config) == 0:
            raise NoServersFoundError(get_message('no_servers', locale))

        document = target.from_canonical(config)
        warnings.extend(target.get_conversion_warnings())
        output = dumps(document, target.raw_format, settings.json_indent)

    except UnknownFormatError as e:
        logger.debug("Conversion rejected: %s", e)
        return ConversionResult(
            success=False, error=get_message('unknown_format', locale, format=e.format_name)
        )
    except (ConfigParseError, NoServersFoundError) as e:
        logger.debug("Conversion failed: %s", e)
        return ConversionResult(success=False, error=str(e))
    except Exception as e:
        logger.debug("Unexpected conversion error", exc_info=True)
        return ConversionResult(
            success=False, error=str(e) or get_message('unknown_error', locale)
        )

    for warning in warnings:
        logger.info("%s -> %s: %s", source_format, target_format, warning)

    logger.debug("Converted %d server(s) from %s to %s",
                 len(config), source_format, target_format)
    return ConversionResult(
        success=True, output=output, server_count=len(config), warnings=warnings
    )
