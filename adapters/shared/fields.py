"""
Field helpers shared by every adapter.

Reading helpers normalize loosely-typed config values into canonical types and
turn empty collections into ``None``. ``put_if_present`` is the single place
that decides whether a value is worth emitting, so all adapters omit empty
fields the same way.
"""

import copy
import math
from typing import Any, Dict, List, Optional

from core.canonical_models import Transport

# Explicit type tags seen across editors, mapped to canonical transports
TRANSPORT_TAGS = {
    'stdio': Transport.STDIO,
    'local': Transport.STDIO,
    'sse': Transport.SSE,
    'http': Transport.HTTP,
    'streamable-http': Transport.HTTP,
    'streamablehttp': Transport.HTTP,
    'streamable_http': Transport.HTTP,
    'remote': Transport.HTTP,
    'websocket': Transport.HTTP,
}


def is_empty(value: Any) -> bool:
    """None, empty strings and empty collections count as absent. False and 0 do not."""
    if value is None:
        return True
    if isinstance(value, (str, list, tuple, dict)):
        return len(value) == 0
    return False


def put_if_present(target: Dict[str, Any], key: str, value: Any) -> Dict[str, Any]:
    """Set ``target[key]`` only when ``value`` is not empty."""
    if not is_empty(value):
        target[key] = copy.deepcopy(value)
    return target


def as_string(value: Any) -> Optional[str]:
    if value is None or isinstance(value, (dict, list)):
        return None
    text = str(value)
    return text or None


def as_string_list(value: Any) -> Optional[List[str]]:
    if not isinstance(value, (list, tuple)):
        return None
    items = [str(item) for item in value if item is not None]
    return items or None


def as_string_map(value: Any) -> Optional[Dict[str, str]]:
    """Coerce a mapping to str -> str. YAML/TOML booleans become 'true'/'false'."""
    if not isinstance(value, dict):
        return None
    result = {}
    for key, item in value.items():
        if item is None:
            continue
        if isinstance(item, bool):
            item = 'true' if item else 'false'
        result[str(key)] = str(item)
    return result or None


def as_number(value: Any) -> Optional[float]:
    """Coerce to a finite number. NaN and infinities count as missing."""
    if isinstance(value, bool) or value is None:
        return None
    try:
        number = float(value) if isinstance(value, (int, float)) else float(str(value).strip())
    except (OverflowError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return value if isinstance(value, int) else number


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (12.5 -> 13)."""
    return int(math.floor(value + 0.5))


def seconds_to_ms(value: Any) -> Optional[int]:
    seconds = as_number(value)
    if seconds is None:
        return None
    if isinstance(seconds, int):
        return seconds * 1000
    ms = seconds * 1000
    return round_half_up(ms) if math.isfinite(ms) else None


def ms_to_seconds(value: Optional[int]) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, int):
        return (value + 500) // 1000
    return round_half_up(value / 1000)


def as_milliseconds(value: Any) -> Optional[int]:
    number = as_number(value)
    if number is None:
        return None
    if isinstance(number, int):
        return number
    return round_half_up(number)


def transport_from_tag(tag: Any) -> Optional[Transport]:
    """Map an explicit type tag to a transport, or None if unrecognized."""
    if not isinstance(tag, str):
        return None
    return TRANSPORT_TAGS.get(tag.strip().lower())


def infer_transport(tag: Any = None, url: Optional[str] = None) -> Transport:
    """
    Derive the transport for a server entry.

    An explicit, recognized type tag wins; otherwise a populated URL means
    HTTP and anything else is a local stdio process.
    """
    transport = transport_from_tag(tag)
    if transport is not None:
        return transport
    return Transport.HTTP if url else Transport.STDIO
