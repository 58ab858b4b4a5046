"""
User-facing messages in every supported UI language.

Callers display these strings verbatim, so they are written for end users
pasting configs rather than for developers.
"""

from typing import Dict

DEFAULT_LOCALE = 'en'

SUPPORTED_LOCALES = ('en', 'ko')

MESSAGES: Dict[str, Dict[str, str]] = {
    'invalid_json': {
        'en': "Invalid JSON format.{detail}\nPlease copy and paste the entire config file.",
        'ko': "유효하지 않은 JSON 형식입니다.{detail}\n전체 설정 파일을 복사해서 붙여넣어 주세요.",
    },
    'brace_unclosed': {
        'en': " (Brace imbalance: {open} '{{', {close} '}}' - {count} not closed)",
        'ko': " (괄호 불균형: {{ {open}개, }} {close}개 - {count}개가 닫히지 않음)",
    },
    'brace_unopened': {
        'en': " (Brace imbalance: {open} '{{', {close} '}}' - {count} opening missing)",
        'ko': " (괄호 불균형: {{ {open}개, }} {close}개 - {count}개의 여는 괄호 부족)",
    },
    'invalid_yaml': {
        'en': "Invalid YAML format. Please check your {editor} config file.",
        'ko': "유효하지 않은 YAML 형식입니다. {editor} 설정 파일을 확인해 주세요.",
    },
    'invalid_toml': {
        'en': "Invalid TOML format. Please check your {editor} config file.",
        'ko': "유효하지 않은 TOML 형식입니다. {editor} 설정 파일을 확인해 주세요.",
    },
    'no_servers': {
        'en': "No MCP servers found to convert. Please check the format.",
        'ko': "변환할 MCP 서버를 찾을 수 없습니다. 올바른 형식인지 확인해 주세요.",
    },
    'unknown_format': {
        'en': "Unknown format: {format}",
        'ko': "알 수 없는 형식입니다: {format}",
    },
    'unknown_error': {
        'en': "An unknown error occurred.",
        'ko': "알 수 없는 오류가 발생했습니다.",
    },
}


def normalize_locale(locale: str = None) -> str:
    """Reduce 'ko-KR' style tags to a supported language, defaulting to English."""
    if not locale:
        return DEFAULT_LOCALE
    language = locale.replace('_', '-').split('-')[0].lower()
    return language if language in SUPPORTED_LOCALES else DEFAULT_LOCALE


def get_message(key: str, locale: str = None, **kwargs) -> str:
    """
    Look up a message and fill in its placeholders.

    Raises:
        KeyError: If the message key does not exist
    """
    entry = MESSAGES[key]
    template = entry.get(normalize_locale(locale), entry[DEFAULT_LOCALE])
    return template.format(**kwargs)
