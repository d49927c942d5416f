"""Building and classifying catchup source format strings."""

from __future__ import annotations

import re
from typing import Optional

from .settings import CatchupMode

_SPECIFIER = re.compile(r"\{[^{]+\}")

_TERMINATING_SPECIFIERS = (
    "{duration}",
    "{duration:",
    "{lutc}",
    "{lutc:",
    "${timestamp}",
    "${timestamp:",
    "{utcend}",
    "{utcend:",
    "${end}",
    "${end:",
)

_ONE_SECOND_SPECIFIERS = (
    "{utc}",
    "{utc:",
    "${start}",
    "${start:",
    "{S}",
    "{offset:1}",
)

_FLUSSONIC = re.compile(r"(http[s]?://[^/]+)/(.*)/([^/]*)(mpegts|\.m3u8)(\?.+=.+)?")
_FLUSSONIC_GENERIC = re.compile(r"(http[s]?://[^/]+)/(.*)/([^?]*)(\?.+=.+)?")
_XTREAM_CODES = re.compile(r"(http[s]?://[^/]+)/(?:live/)?([^/]+)/([^/]+)/([^/.]+)(\.m3u[8]?)?")

_MODE_TEXT = {
    CatchupMode.DISABLED: "Disabled",
    CatchupMode.DEFAULT: "Default",
    CatchupMode.APPEND: "Append",
    CatchupMode.TIMESHIFT: "Shift (SIPTV)",
    CatchupMode.SHIFT: "Shift (SIPTV)",
    CatchupMode.FLUSSONIC: "Flussonic",
    CatchupMode.XTREAM_CODES: "Xtream codes",
    CatchupMode.VOD: "VOD",
}


def catchup_mode_text(catchup_mode: CatchupMode) -> str:
    """Human readable name of a catchup mode."""
    return _MODE_TEXT.get(catchup_mode, "")


def is_valid_timeshifting_catchup_source(format_string: str, catchup_mode: CatchupMode) -> bool:
    """Whether a catchup source can be used to timeshift within a programme."""
    specifiers = len(_SPECIFIER.findall(format_string))
    if specifiers == 0:
        return False
    # A lone catchup-id specifier identifies a programme, not a point in time.
    if ("{catchup-id}" in format_string and specifiers == 1) or catchup_mode == CatchupMode.VOD:
        return False
    return True


def is_terminating_catchup_source(format_string: str) -> bool:
    """Whether the catchup stream has an end time and so terminates."""
    return any(spec in format_string for spec in _TERMINATING_SPECIFIERS)


def catchup_granularity_seconds(format_string: str) -> int:
    """1 when the source can address single seconds, otherwise 60."""
    if any(spec in format_string for spec in _ONE_SECOND_SPECIFIERS):
        return 1
    return 60


def append_catchup_source(url: str, catchup_source: str, query_format: str) -> Optional[str]:
    """Append the channel's catchup source, or else the default query format, to ``url``.

    Returns None when there is nothing to append.
    """
    if catchup_source:
        return url + catchup_source
    if query_format:
        return url + query_format
    return None


def shift_catchup_source(url: str) -> str:
    """Catchup source for shift (SIPTV) mode."""
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}utc={{utc}}&lutc={{lutc}}"


def flussonic_catchup_source(url: str, is_ts_stream: bool) -> Optional[tuple[str, bool]]:
    """Flussonic catchup source for ``url``.

    ``is_ts_stream`` tells whether the channel was tagged as a TS catchup
    stream; it decides the format when the URL's stream name is not a known
    one. Returns the source and whether it is a TS stream, or None when the
    URL does not fit.
    """
    match = _FLUSSONIC.fullmatch(url)
    if match:
        host, channel_id, list_type, stream_type = match.group(1, 2, 3, 4)
        url_append = match.group(5) or ""
        if stream_type == "mpegts":
            return f"{host}/{channel_id}/timeshift_abs-${{start}}.ts{url_append}", True
        if list_type == "index":
            return f"{host}/{channel_id}/timeshift_rel-{{offset:1}}.m3u8{url_append}", False
        return (
            f"{host}/{channel_id}/{list_type}-timeshift_rel-{{offset:1}}.m3u8{url_append}",
            False,
        )

    # Flussonic serves a stream under any name after the channel id.
    generic = _FLUSSONIC_GENERIC.fullmatch(url)
    if generic:
        host, channel_id = generic.group(1, 2)
        url_append = generic.group(4) or ""
        if is_ts_stream:
            return f"{host}/{channel_id}/timeshift_abs-${{start}}.ts{url_append}", True
        return f"{host}/{channel_id}/timeshift_rel-{{offset:1}}.m3u8{url_append}", False

    return None


def xtream_codes_catchup_source(url: str) -> Optional[tuple[str, bool]]:
    """Xtream codes catchup source for ``url``.

    Returns the source and whether the stream had no playlist extension and
    is therefore a TS stream, or None when the URL does not fit.
    """
    match = _XTREAM_CODES.fullmatch(url)
    if not match:
        return None

    host, username, password, channel_id = match.group(1, 2, 3, 4)
    extension = match.group(5) or ""
    is_ts = not extension
    if is_ts:
        extension = ".ts"

    source = (
        f"{host}/timeshift/{username}/{password}"
        f"/{{duration:60}}/{{Y}}-{{m}}-{{d}}:{{H}}-{{M}}/{channel_id}{extension}"
    )
    return source, is_ts