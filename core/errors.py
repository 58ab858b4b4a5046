"""Exception hierarchy for config conversion."""

from typing import Optional

from core.canonical_models import RawFormat


class ConverterError(Exception):
    """Base exception for conversion operations."""
    pass


class ConfigParseError(ConverterError):
    """Raw text could not be deserialized as the expected format."""

    def __init__(self, message: str, raw_format: Optional[RawFormat] = None):
        super().__init__(message)
        self.raw_format = raw_format


class JsonRecoveryError(ConfigParseError):
    """Every flexible JSON parsing strategy failed."""

    def __init__(self, message: str, open_braces: int = 0, close_braces: int = 0,
                 open_brackets: int = 0, close_brackets: int = 0):
        super().__init__(message, RawFormat.JSON)
        self.open_braces = open_braces
        self.close_braces = close_braces
        self.open_brackets = open_brackets
        self.close_brackets = close_brackets

    @property
    def brace_imbalance(self) -> int:
        """Positive when braces are left open, negative when closes exceed opens."""
        return self.open_braces - self.close_braces


class NoServersFoundError(ConverterError):
    """A structurally valid document contained no MCP servers."""
    pass


class UnknownFormatError(ConverterError, ValueError):
    """Format identifier is not registered."""

    def __init__(self, format_name: str):
        super().__init__(f"Unknown format: {format_name}")
        self.format_name = format_name
