"""URL encoding, decoding and inspection helpers."""

from __future__ import annotations

import re
import urllib.request
from pathlib import Path

HTTP_PREFIX = "http://"
HTTPS_PREFIX = "https://"
UDP_MULTICAST_PREFIX = "udp://@"
RTP_MULTICAST_PREFIX = "rtp://@"

_SAFE_BYTES = frozenset(
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_.~"
)
_DECODE_PATTERN = re.compile(rb"%(.{2})|%|\+", re.DOTALL)
_CREDENTIALS_PATTERN = re.compile(r"(http:|https:)//[^@/]+:[^@/]+@.*")
_READ_LIMIT = 1024


def url_encode(value: str) -> str:
    """Percent-encode every byte except unreserved characters."""
    return "".join(
        chr(byte) if byte in _SAFE_BYTES else f"%{byte:02x}"
        for byte in value.encode("utf-8", errors="surrogateescape")
    )


def _from_hex(char: int) -> int:
    if 0x30 <= char <= 0x39:
        return char - 0x30
    return bytes([char]).lower()[0] - ord("a") + 10


def _decode_match(match: re.Match) -> bytes:
    token = match.group(0)
    if token == b"+":
        return b" "
    pair = match.group(1)
    if pair is None:
        return b""
    return bytes([((_from_hex(pair[0]) << 4) | _from_hex(pair[1])) & 0xFF])


def url_decode(value: str) -> str:
    """Decode percent escapes and '+' signs."""
    raw = value.encode("utf-8", errors="surrogateescape")
    decoded = _DECODE_PATTERN.sub(_decode_match, raw)
    return decoded.decode("utf-8", errors="surrogateescape")


def is_encoded(value: str) -> bool:
    """Guess whether ``value`` already holds URL escapes."""
    return url_decode(value) != value


def is_http_url(url: str) -> bool:
    return url.startswith(HTTP_PREFIX) or url.startswith(HTTPS_PREFIX)


def redact_url(url: str) -> str:
    """Replace credentials embedded in an HTTP(S) URL."""
    if _CREDENTIALS_PATTERN.fullmatch(url):
        protocol = url[: url.index(":")]
        rest = url[url.index("@") + 1 :]
        return f"{protocol}://USERNAME:PASSWORD@{rest}"
    return url


def _request_for(url: str) -> urllib.request.Request:
    address, _, options = url.partition("|")
    headers = {}
    for option in filter(None, options.split("&")):
        name, sep, value = option.partition("=")
        if sep:
            headers[name] = url_decode(value)
    return urllib.request.Request(address, headers=headers)


def read_file_contents_start_only(url: str) -> tuple[str, int]:
    """Read the first kilobyte of a file or URL.

    Returns the text read and a status code: 200 when anything was read,
    500 otherwise.
    """
    data = b""
    try:
        if is_http_url(url):
            with urllib.request.urlopen(_request_for(url), timeout=30) as response:
                data = response.read(_READ_LIMIT)
        else:
            with Path(url).open("rb") as handle:
                data = handle.read(_READ_LIMIT)
    except (OSError, ValueError):
        data = b""

    content = data.decode("utf-8", errors="replace")
    return content, (200 if content else 500)