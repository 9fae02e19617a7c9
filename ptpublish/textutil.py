"""Small text helpers: whitespace trimming and query-string decoding."""

import re

_C_WHITESPACE = " \t\n\v\f\r"
_ESCAPE = re.compile(rb"%([0-9A-Fa-f]{2})|\+")


def trim(text: str) -> str:
    """Strip ASCII whitespace from both ends of ``text``."""
    return text.strip(_C_WHITESPACE)


def _replace_escape(match: "re.Match[bytes]") -> bytes:
    hex_digits = match.group(1)
    if hex_digits is None:
        return b" "
    return bytes.fromhex(hex_digits.decode("ascii"))


def url_decode(value: str) -> str:
    """Decode ``%XX`` escapes and ``+`` signs.

    Malformed escapes are kept literally. Bytes that do not form valid
    UTF-8 survive as surrogate escapes.
    """
    raw = value.encode("utf-8", "surrogateescape")
    return _ESCAPE.sub(_replace_escape, raw).decode("utf-8", "surrogateescape")


def parse_query_string(query: str) -> dict[str, str]:
    """Parse ``k=v&k2=v2`` into a dict; later keys overwrite earlier ones."""
    pairs = query.split("&")
    if pairs[-1] == "":
        pairs.pop()
    params: dict[str, str] = {}
    for pair in pairs:
        key, _, value = pair.partition("=")
        params[url_decode(key)] = url_decode(value)
    return params