"""
Query string decomposition and serialization helpers.
"""

import math
import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, List
from urllib.parse import parse_qsl, quote_plus, urlencode, urlsplit, urlunsplit

from ..core.exceptions import ChunkTooSmallError, InvalidURLError

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_BAD_HOST_CHARS = re.compile(r"[\s<>\"{}|\\^`]")


@dataclass
class ParsedURL:
    """An input URL split into its base and its existing query parameters."""
    url: str
    scheme: str
    netloc: str
    path: str
    fragment: str = ""
    params: Dict[str, List[str]] = field(default_factory=dict)

    @property
    def keys(self) -> List[str]:
        """Existing parameter names in first-appearance order."""
        return list(self.params)

    @property
    def param_count(self) -> int:
        return len(self.params)

    def first(self, key: str) -> str:
        values = self.params.get(key)
        return values[0] if values else ""

    def existing_params(self) -> Dict[str, str]:
        """Existing parameters with their first value."""
        return {key: self.first(key) for key in self.params}


def parse_url(url: str) -> ParsedURL:
    """
    Decompose a URL into base parts and a query mapping.

    Args:
        url: The URL to parse

    Returns:
        ParsedURL with parameters in first-appearance order

    Raises:
        InvalidURLError: If the string is not a syntactically valid URL
    """
    if not url:
        raise InvalidURLError(url, "empty URL")

    if _CONTROL_CHARS.search(url):
        raise InvalidURLError(url, "invalid control character in URL")

    try:
        parts = urlsplit(url)
        # Accessing the port validates it
        parts.port
    except ValueError as e:
        raise InvalidURLError(url, str(e)) from e

    if _BAD_ESCAPE.search(parts.netloc) or _BAD_ESCAPE.search(parts.path):
        raise InvalidURLError(url, "invalid URL escape")

    if parts.hostname and _BAD_HOST_CHARS.search(parts.hostname):
        raise InvalidURLError(url, "invalid character in host name")

    params: Dict[str, List[str]] = {}
    for key, value in parse_qsl(parts.query, keep_blank_values=True):
        params.setdefault(key, []).append(value)

    return ParsedURL(
        url=url,
        scheme=parts.scheme,
        netloc=parts.netloc,
        path=parts.path,
        fragment=parts.fragment,
        params=params,
    )


def build_url(parsed: ParsedURL, params: Dict[str, str]) -> str:
    """Serialize the base of ``parsed`` with a new, form-encoded query."""
    query = urlencode(list(params.items()))
    return urlunsplit((parsed.scheme, parsed.netloc, parsed.path, query, parsed.fragment))


def transform_value(value: str, double_encode: bool = False) -> str:
    """Percent-encode the value once up front when double encoding is on."""
    if double_encode:
        return quote_plus(value, safe="")
    return value


def pop_name(stack: List[str]) -> str:
    """Remove and return the last name of the working wordlist."""
    return stack.pop()


def new_names(wordlist: Iterable[str], existing_keys: Iterable[str]) -> List[str]:
    """Wordlist entries that are not already query parameters, order kept."""
    existing = set(existing_keys)
    return [name for name in wordlist if name not in existing]


def iteration_count(wordlist_size: int, chunk: int, existing: int, url: str = "") -> int:
    """
    Number of URLs generated per value by the normal and ignore strategies.

    Raises:
        ChunkTooSmallError: If the chunk leaves no slot for new parameters
    """
    slots = chunk - existing
    if slots < 1:
        raise ChunkTooSmallError(url, chunk, existing)
    return math.ceil(wordlist_size / slots)
