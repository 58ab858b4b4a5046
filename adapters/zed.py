"""Zed format adapter: servers live under ``context_servers`` in Zed's settings."""

from pathlib import Path

from adapters.shared.keyed_adapter import KeyedServerAdapter
from adapters.shared.paths import path_matches


class ZedAdapter(KeyedServerAdapter):

    @property
    def format_name(self) -> str:
        return "zed"

    @property
    def display_name(self) -> str:
        return "Zed"

    @property
    def description(self) -> str:
        return "High-performance code editor"

    @property
    def container_key(self) -> str:
        return 'context_servers'

    @property
    def config_file_name(self) -> str:
        return "settings.json"

    @property
    def docs_url(self) -> str:
        return "https://zed.dev/docs/assistant/model-context-protocol"

    def can_handle(self, file_path: Path) -> bool:
        return path_matches(file_path, 'settings.json', ['.zed'])
