"""
Best-effort JSON parsing for text pasted by users.

Pasted configs are often fragments (``"mcpServers": {...}`` without the outer
braces) or were cut off mid-copy. Several strategies are tried in order and the
first that yields valid JSON wins:

1. Parse the trimmed text as-is.
2. Wrap a fragment that starts with a quoted key in ``{ }``.
3. Repair brace/bracket balance and parse.
4. Wrap, then repair.
5. Drop anything before the first ``"key": {`` pair, wrap, then repair.

The balance scanner only tracks strings, escapes and the four structural
characters. It does not validate JSON grammar.
"""

import json
import logging
import re
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from core.errors import JsonRecoveryError
from core.messages import get_message

logger = logging.getLogger(__name__)

OPENERS = {'{': '}', '[': ']'}
CLOSERS = {'}': '{', ']': '['}

_LEADING_KEY = re.compile(r'"\w+"\s*:\s*\{')


@dataclass
class BraceCounts:
    open: int = 0
    close: int = 0
    open_bracket: int = 0
    close_bracket: int = 0

    @property
    def balanced(self) -> bool:
        return self.open == self.close and self.open_bracket == self.close_bracket


def _structural_chars(text: str):
    """Yield (index, char) for braces and brackets outside string literals."""
    in_string = False
    escaped = False
    for index, char in enumerate(text):
        if in_string:
            if escaped:
                escaped = False
            elif char == '\\':
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif char in OPENERS or char in CLOSERS:
            yield index, char


def count_braces(text: str) -> BraceCounts:
    """Count structural braces and brackets, ignoring those inside strings."""
    counts = BraceCounts()
    for _, char in _structural_chars(text):
        if char == '{':
            counts.open += 1
        elif char == '}':
            counts.close += 1
        elif char == '[':
            counts.open_bracket += 1
        else:
            counts.close_bracket += 1
    return counts


def _strip_trailing_commas(text: str) -> str:
    """Drop commas that precede a closer or end the text, outside strings."""
    drop = set()
    pending = None
    in_string = False
    escaped = False
    for index, char in enumerate(text):
        if in_string:
            if escaped:
                escaped = False
            elif char == '\\':
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char.isspace():
            continue
        if char in CLOSERS and pending is not None:
            drop.add(pending)
        pending = index if char == ',' else None
        if char == '"':
            in_string = True
    if pending is not None:
        drop.add(pending)
    return ''.join(char for index, char in enumerate(text) if index not in drop)


def repair_json(text: str) -> str:
    """
    Rebalance braces and brackets.

    Openers left unclosed get their closers appended in nesting order.
    Unmatched closers at the very end of the text are dropped as stray paste
    debris; other unmatched closers get matching openers prepended.
    """
    repaired = _strip_trailing_commas(text.strip())
    stack, unmatched = _scan_balance(repaired)

    # Closers with nothing but whitespace or other strays after them
    stray = set()
    tail = len(repaired)
    for index, _ in reversed(unmatched):
        if repaired[index + 1:tail].strip():
            break
        stray.add(index)
        tail = index

    if stray:
        repaired = ''.join(
            char for index, char in enumerate(repaired) if index not in stray
        )
        stack, unmatched = _scan_balance(repaired)

    prefix = ''.join(CLOSERS[char] for _, char in reversed(unmatched))
    suffix = ''.join(OPENERS[char] for char in reversed(stack))
    return _strip_trailing_commas(prefix + repaired + suffix)


def _scan_balance(text: str) -> Tuple[List[str], List[Tuple[int, str]]]:
    """
    Return the openers still unclosed at the end of the text and the closers
    that appeared with no opener before them. Mismatched pairs are ignored.
    """
    stack: List[str] = []
    unmatched: List[Tuple[int, str]] = []
    for index, char in _structural_chars(text):
        if char in OPENERS:
            stack.append(char)
        elif stack and stack[-1] == CLOSERS[char]:
            stack.pop()
        elif not stack:
            unmatched.append((index, char))
    return stack, unmatched


def _wrap(text: str) -> str:
    return '{' + text + '}'


def _strategies(trimmed: str) -> List[tuple]:
    strategies = [('direct', lambda: trimmed)]
    if trimmed.startswith('"'):
        strategies.append(('wrap', lambda: _wrap(trimmed)))
    strategies.append(('repair', lambda: repair_json(trimmed)))
    if trimmed.startswith('"'):
        strategies.append(('wrap+repair', lambda: repair_json(_wrap(trimmed))))
    match = _LEADING_KEY.search(trimmed)
    if match:
        fragment = trimmed[match.start():]
        strategies.append(('key-fragment', lambda: repair_json(_wrap(fragment))))
    return strategies


def brace_detail(counts: BraceCounts, locale: Optional[str] = None) -> str:
    """Describe a brace imbalance for error messages, or '' when balanced."""
    if counts.open == counts.close:
        return ''
    difference = abs(counts.open - counts.close)
    key = 'brace_unclosed' if counts.open > counts.close else 'brace_unopened'
    return get_message(key, locale, open=counts.open, close=counts.close, count=difference)


def parse_json_flexible(text: str, locale: Optional[str] = None) -> Any:
    """
    Parse JSON, trying progressively more aggressive repairs.

    Raises:
        JsonRecoveryError: If no strategy produced valid JSON
    """
    trimmed = text.strip()

    for name, build in _strategies(trimmed):
        candidate = build()
        try:
            value = json.loads(candidate)
        except json.JSONDecodeError as e:
            logger.debug("JSON strategy '%s' failed: %s", name, e)
            continue
        if name != 'direct':
            logger.debug("Recovered JSON input using strategy '%s'", name)
        return value

    counts = count_braces(trimmed)
    message = get_message('invalid_json', locale, detail=brace_detail(counts, locale))
    raise JsonRecoveryError(
        message,
        open_braces=counts.open,
        close_braces=counts.close,
        open_brackets=counts.open_bracket,
        close_brackets=counts.close_bracket,
    )
