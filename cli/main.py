"""
Main CLI entry point for the MCP config converter.

Converts one MCP server config document between editor formats. Input comes
from a file or stdin; output goes to a file or stdout. It supports:
- Conversion between all registered editor formats
- Source format auto-detection (from the file path, then from the content)
- Format detection only (--detect)
- Listing supported formats (--list-formats)

Usage:
    python -m cli.main --input ~/.cursor/mcp.json --target-format vscode
    cat config.yaml | python -m cli.main --source-format goose --target-format claude-desktop
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from adapters import create_registry
from core.converter import convert_config
from core.detector import detect_format_from_path, detect_text_format
from core.logging_config import configure_logging
from core.messages import SUPPORTED_LOCALES
from core.registry import FormatRegistry
from core.settings import ConverterSettings


def create_parser() -> argparse.ArgumentParser:
    """
    Create argument parser for CLI.

    Returns:
        Configured ArgumentParser instance
    """
    format_names = setup_registry().list_formats()

    parser = argparse.ArgumentParser(
        description='Convert MCP server configs between AI editor formats',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Convert a Cursor config to VS Code
  %(prog)s --input ~/.cursor/mcp.json --target-format vscode

  # Convert pasted text from stdin, naming the source format
  %(prog)s --source-format goose --target-format claude-desktop < config.yaml

  # Only report which format a file is in
  %(prog)s --input mcp.json --detect
        """
    )

    parser.add_argument(
        '--input', '-i',
        type=Path,
        help='Config file to convert (reads stdin if not specified)'
    )

    parser.add_argument(
        '--output', '-o',
        type=Path,
        help='Output file path (writes stdout if not specified)'
    )

    parser.add_argument(
        '--source-format',
        type=str,
        choices=format_names,
        metavar='FORMAT',
        help='Source format name (auto-detected if not specified)'
    )

    parser.add_argument(
        '--target-format',
        type=str,
        choices=format_names,
        metavar='FORMAT',
        help='Target format name (see --list-formats)'
    )

    parser.add_argument(
        '--detect',
        action='store_true',
        help='Print the detected source format and exit'
    )

    parser.add_argument(
        '--list-formats',
        action='store_true',
        help='List supported formats and exit'
    )

    parser.add_argument(
        '--locale',
        type=str,
        choices=list(SUPPORTED_LOCALES),
        help='Language for error messages (default: MCP_CONVERTER_LOCALE or en)'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Verbose output with detailed logging'
    )

    return parser


def setup_registry() -> FormatRegistry:
    """
    Initialize format registry with all available adapters.

    Returns:
        FormatRegistry with registered adapters
    """
    return create_registry()


def list_formats(registry: FormatRegistry) -> int:
    """Print one line per supported format."""
    width = max(len(name) for name in registry.list_formats())
    for adapter in registry.list_adapters():
        print(f"{adapter.format_name:<{width}}  {adapter.display_name} "
              f"({adapter.raw_format.value}, {adapter.config_file_name})")
    return 0


def read_input(args) -> Optional[str]:
    """
    Read the source document from --input or stdin.

    Returns:
        Document text, or None after reporting an error
    """
    if args.input is None:
        return sys.stdin.read()

    input_file = args.input.expanduser()
    if not input_file.exists():
        print(f"Error: File not found: {input_file}", file=sys.stderr)
        return None
    if input_file.is_dir():
        print(f"Error: Path is a directory, not a file: {input_file}", file=sys.stderr)
        return None
    try:
        return input_file.read_text(encoding='utf-8')
    except UnicodeDecodeError:
        print(f"Error: File is not valid UTF-8 text: {input_file}", file=sys.stderr)
        return None


def resolve_source_format(args, text: str, registry: FormatRegistry) -> Optional[str]:
    """Explicit --source-format, else the input path, else the document content."""
    if args.source_format:
        return args.source_format
    if args.input is not None:
        format_name = detect_format_from_path(args.input, registry)
        if format_name:
            return format_name
    return detect_text_format(text)


def write_output(args, output: str):
    if not output.endswith('\n'):
        output += '\n'
    if args.output is None:
        sys.stdout.write(output)
        return
    output_file = args.output.expanduser()
    output_file.parent.mkdir(parents=True, exist_ok=True)
    output_file.write_text(output, encoding='utf-8')


def main(argv: Optional[list] = None):
    """
    Main entry point for CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, 1 for error)
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = create_parser()
    args = parser.parse_args(argv)

    settings = ConverterSettings.from_env()
    if args.locale:
        settings.locale = args.locale
    configure_logging('DEBUG' if args.verbose else settings.log_level)

    registry = setup_registry()

    if args.list_formats:
        return list_formats(registry)

    if not args.detect and not args.target_format:
        print("Error: --target-format is required for conversion", file=sys.stderr)
        return 1

    try:
        text = read_input(args)
        if text is None:
            return 1

        source_format = resolve_source_format(args, text, registry)
        if args.detect:
            if source_format is None:
                print("Error: Cannot detect the config format", file=sys.stderr)
                return 1
            print(source_format)
            return 0

        if source_format is None:
            print("Error: Cannot auto-detect source format, use --source-format", file=sys.stderr)
            return 1

        if args.verbose:
            print(f"Converting {source_format} -> {args.target_format}", file=sys.stderr)

        result = convert_config(text, source_format, args.target_format,
                                locale=settings.locale, settings=settings, registry=registry)
        if not result.success:
            print(f"Error: {result.error}", file=sys.stderr)
            return 1

        if args.verbose:
            for warning in result.warnings:
                print(f"Warning: {warning}", file=sys.stderr)
            print(f"Converted {result.server_count} server(s)", file=sys.stderr)

        write_output(args, result.output)
        return 0

    except KeyboardInterrupt:
        print("\nConversion cancelled by user", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
