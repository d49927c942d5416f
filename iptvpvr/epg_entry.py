"""A single programme read from an XMLTV guide."""

from __future__ import annotations

import math
import re
import time
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Sequence
from xml.etree.ElementTree import Element

from .base_entry import EPG_GENRE_USE_STRING, EPG_TAG_INVALID_SERIES_EPISODE, BaseEntry
from .genres import EpgGenre, match_genre
from .xmlutils import child_value, get_attribute_value, get_joined_node_values, get_node_value

STAR_RATING_SCALE = 10.0
DATESTRING_LENGTH = 8

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"
_FLOAT = re.compile(r"[ \t\n\v\f\r]*([+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")
_DATE = re.compile(r"[1-9][0-9]{7}")
_UNWANTED_ONSCREEN_CHARS = re.compile(r"[ \txX_.]")
_SEASON_EPISODE = re.compile(r"[sS]([0-9]+)[eE][pP]?([0-9]+)")
_EPISODE_ONLY = re.compile(r"[eE][pP]?([0-9]+)")


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    return pos


def _scan_int(text: str, pos: int, width: Optional[int] = None) -> Optional[tuple[int, int]]:
    """Read a decimal integer as scanf's %d would, at most ``width`` characters."""
    pos = _skip_whitespace(text, pos)
    limit = len(text) if width is None else min(len(text), pos + width)
    digits_start = pos
    if digits_start < limit and text[digits_start] in "+-":
        digits_start += 1
    end = digits_start
    while end < limit and text[end] in _DIGITS:
        end += 1
    if end == digits_start:
        return None
    return int(text[pos:end]), end


def _scan_float(text: str, pos: int) -> Optional[tuple[float, int]]:
    match = _FLOAT.match(text, pos)
    if match is None:
        return None
    return float(match.group(1)), match.end()


def _scan_fields(text: str, widths: Sequence[int], defaults: Sequence[int]) -> tuple[list[int], int, bool]:
    """Read consecutive fixed-width integers; stop at the first that fails."""
    values = list(defaults)
    pos = 0
    for index, width in enumerate(widths):
        scanned = _scan_int(text, pos, width)
        if scanned is None:
            return values, pos, False
        values[index], pos = scanned
    return values, pos, True


def _atoi(text: str) -> int:
    scanned = _scan_int(text, 0)
    return 0 if scanned is None else scanned[0]


def _c_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def _to_int32(value: int) -> int:
    return ((value + 2**31) % 2**32) - 2**31


def _make_time(year: int, month: int, day: int) -> int:
    return (
        year * 365
        + _c_div(year, 4)
        - _c_div(_c_div(year, 100) * 3, 4)
        + _c_div((month + 2) * 153, 5)
        + day
    )


def _utc_time(year: int, mon: int, mday: int, hour: int, minute: int, sec: int) -> int:
    month = mon - 1
    shifted_year = year + 100
    if month < 2:
        month += 12
        shifted_year -= 1
    days = _make_time(shifted_year, month, mday) - _make_time(1970 + 99, 12, 1)
    return ((days * 24 + hour) * 60 + minute) * 60 + sec


def parse_date_time(value: str) -> int:
    """Seconds since the epoch of an XMLTV time such as '20200315123045 +0100'."""
    fields, pos, complete = _scan_fields(value, (4, 2, 2, 2, 2, 2), (2000, 1, 1, 0, 0, 0))
    offset_sign = "+"
    offset_hours = 0
    offset_minutes = 0

    if complete:
        pos = _skip_whitespace(value, pos)
        if pos < len(value):
            offset_sign = value[pos]
            hours = _scan_int(value, pos + 1, 2)
            if hours is not None:
                offset_hours, pos = hours
                minutes = _scan_int(value, pos, 2)
                if minutes is not None:
                    offset_minutes = minutes[0]

    offset = (offset_hours * 60 + offset_minutes) * 60
    if offset_sign == "-":
        offset = -offset

    return _utc_time(*fields) - offset


def _w3c_date_from_string(value: str) -> str:
    (year, month, day), _, _ = _scan_fields(value, (4, 2, 2), (2000, 1, 1))
    return f"{year:04d}-{month:02d}-{day:02d}"


def _w3c_date_from_time(timestamp: int) -> str:
    return time.strftime("%Y-%m-%d", time.localtime(timestamp))


def _round_half_away(value: float) -> int:
    return math.floor(value + 0.5) if value >= 0 else math.ceil(value - 0.5)


def parse_star_rating(value: str) -> int:
    """Star rating out of ten from text such as '7/10' or '3/5'."""
    rating = 0.0
    scale = 0.0
    parsed = 0

    first = _scan_float(value, 0)
    if first is not None:
        rating, pos = first
        parsed = 1
        if pos < len(value) and value[pos] == "/":
            second = _scan_float(value, pos + 1)
            if second is not None:
                scale = second[0]
                parsed = 2

    if parsed == 2 and scale != STAR_RATING_SCALE and scale != 0.0:
        rating = rating / scale * 10

    if parsed >= 1 and rating > STAR_RATING_SCALE:
        rating = STAR_RATING_SCALE

    return _round_half_away(rating)


@dataclass(kw_only=True)
class EpgEntry(BaseEntry):
    """A programme on one channel's guide."""

    broadcast_id: int = 0
    channel_id: int = 0
    start_time: int = 0
    end_time: int = 0
    catchup_id: str = ""

    def _apply_genre_mapping(self, genre_mappings: Iterable[EpgGenre]) -> bool:
        mapping = match_genre(self.genre_string, genre_mappings)
        if mapping is None:
            return False
        self.genre_type = mapping.genre_type
        self.genre_sub_type = mapping.genre_sub_type
        return True

    def to_epg_tag(
        self, channel_uid: int, time_shift: int, genre_mappings: Iterable[EpgGenre]
    ) -> dict[str, Any]:
        """The programme as the PVR frontend sees it, shifted by ``time_shift`` seconds."""
        genre_sub_type = 0
        genre_description = ""
        if self._apply_genre_mapping(genre_mappings):
            genre_type = self.genre_type
            if self.settings is not None and self.settings.use_epg_genre_text_when_mapping:
                # A string sub type shows the custom text while the type keeps the colour.
                genre_sub_type = EPG_GENRE_USE_STRING
                genre_description = self.genre_string
            else:
                genre_sub_type = self.genre_sub_type
        else:
            genre_type = EPG_GENRE_USE_STRING
            genre_description = self.genre_string

        if self.parental_rating_system:
            rating_code = f"{self.parental_rating_system}-{self.parental_rating}"
        else:
            rating_code = self.parental_rating

        return {
            "unique_broadcast_id": self.broadcast_id,
            "title": self.title,
            "unique_channel_id": channel_uid,
            "start_time": self.start_time + time_shift,
            "end_time": self.end_time + time_shift,
            "plot_outline": self.plot_outline,
            "plot": self.plot,
            "cast": self.cast,
            "director": self.director,
            "writer": self.writer,
            "year": self.year,
            "icon_path": self.icon_path,
            "genre_type": genre_type,
            "genre_sub_type": genre_sub_type,
            "genre_description": genre_description,
            "parental_rating_code": rating_code,
            "star_rating": self.star_rating,
            "series_number": self.season_number,
            "episode_number": self.episode_number,
            "episode_part_number": self.episode_part_number,
            "episode_name": self.episode_name,
            "first_aired": self.first_aired,
            "flags": self.flags(),
        }

    def update_from(
        self,
        programme_node: Element,
        channel_id: str,
        epg_window_start: int,
        epg_window_end: int,
        min_shift_time: int,
        max_shift_time: int,
    ) -> bool:
        """Fill from a ``<programme>`` element.

        Returns False when the element lacks start or stop times, or when,
        outside the first run, the programme lies wholly outside the window.
        """
        start_text = get_attribute_value(programme_node, "start")
        stop_text = get_attribute_value(programme_node, "stop")
        if start_text is None or stop_text is None:
            return False

        programme_start = parse_date_time(start_text)
        programme_end = parse_date_time(stop_text)

        catchup_id = get_attribute_value(programme_node, "catchup-id")
        if catchup_id is not None:
            self.catchup_id = catchup_id
        self.catchup_id = self.catchup_id.strip()

        first_run = epg_window_start == 0 and epg_window_end == 0
        if not first_run and (
            programme_end + max_shift_time < epg_window_start
            or programme_start + min_shift_time > epg_window_end
        ):
            return False

        self.broadcast_id = _to_int32(programme_start)
        self.channel_id = _atoi(channel_id)
        self.genre_type = 0
        self.genre_sub_type = 0
        self.plot_outline = ""
        self.start_time = programme_start
        self.end_time = programme_end
        self.year = 0
        self.star_rating = 0
        self.episode_number = EPG_TAG_INVALID_SERIES_EPISODE
        self.episode_part_number = EPG_TAG_INVALID_SERIES_EPISODE
        self.season_number = EPG_TAG_INVALID_SERIES_EPISODE

        self.title = get_node_value(programme_node, "title")
        self.plot = get_node_value(programme_node, "desc")
        self.episode_name = get_node_value(programme_node, "sub-title")
        self.genre_string = get_joined_node_values(programme_node, "category")

        self._read_date(get_node_value(programme_node, "date"), start_text)
        self._read_ratings(programme_node)

        if programme_node.find("new") is not None:
            self.is_new = True
        if programme_node.find("premiere") is not None:
            self.is_premiere = True

        episode_numbers = [
            (system, child_value(node))
            for node in programme_node.findall("episode-num")
            if (system := get_attribute_value(node, "system")) is not None
        ]
        if episode_numbers:
            self.parse_episode_number_info(episode_numbers)
            # A TV show's year is that of its first episode, which is not known here.
            if (
                self.episode_number != EPG_TAG_INVALID_SERIES_EPISODE
                or self.season_number != EPG_TAG_INVALID_SERIES_EPISODE
            ):
                self.year = 0

        credits = programme_node.find("credits")
        if credits is not None:
            self.cast = get_joined_node_values(credits, "actor")
            self.director = get_joined_node_values(credits, "director")
            self.writer = get_joined_node_values(credits, "writer")

        self.icon_path = self._icon_source(programme_node)
        return True

    @staticmethod
    def _icon_source(programme_node: Element) -> str:
        icon = programme_node.find("icon")
        if icon is None:
            return ""
        return get_attribute_value(icon, "src") or ""

    def _read_date(self, date_text: str, start_text: str) -> None:
        if not date_text:
            return

        if _DATE.fullmatch(date_text):
            first_aired_time = parse_date_time(
                date_text[:DATESTRING_LENGTH] + start_text[DATESTRING_LENGTH:]
            )
            # Negative times cannot be converted to local dates on every platform.
            if first_aired_time < 0:
                self.first_aired = _w3c_date_from_string(date_text)
                self.is_new = self.first_aired == _w3c_date_from_string(start_text)
            else:
                self.first_aired = _w3c_date_from_time(first_aired_time)
                self.is_new = self.first_aired == _w3c_date_from_time(self.start_time)

        year = _scan_int(date_text, 0, 4)
        if year is not None:
            self.year = year[0]

    def _read_ratings(self, programme_node: Element) -> None:
        rating = programme_node.find("rating")
        if rating is not None:
            self.parental_rating = get_node_value(rating, "value")
            system = get_attribute_value(rating, "system")
            if system is not None:
                self.parental_rating_system = system
            self.parental_rating_icon_path = self._icon_source(programme_node)

        star_rating = programme_node.find("star-rating")
        if star_rating is not None:
            self.star_rating = parse_star_rating(get_node_value(star_rating, "value"))

    def parse_episode_number_info(self, episode_numbers: Iterable[tuple[str, str]]) -> bool:
        """Read season and episode from (system, text) pairs, preferring xmltv_ns."""
        pairs = list(episode_numbers)
        if any(
            system == "xmltv_ns" and self._parse_xmltv_ns(text) for system, text in pairs
        ):
            return True
        return any(
            system == "onscreen" and self._parse_onscreen(text) for system, text in pairs
        )

    def _parse_xmltv_ns(self, text: str) -> bool:
        season_text, dot, episode_text = text.partition(".")
        if dot:
            episode_text, part_dot, part_text = episode_text.partition(".")
            if not part_dot:
                part_text = ""

            season = _scan_int(season_text, 0)
            if season is not None:
                self.season_number = season[0] + 1

            episode = _scan_int(episode_text, 0)
            if episode is not None:
                self.episode_number = episode[0] + 1

            if part_text:
                part = _scan_int(part_text, 0)
                if part is not None:
                    part_number, pos = part
                    total = None
                    if pos < len(part_text) and part_text[pos] == "/":
                        total = _scan_int(part_text, pos + 1)
                    if total is not None:
                        self.episode_part_number = part_number + 1
                    else:
                        self.episode_part_number = EPG_TAG_INVALID_SERIES_EPISODE

        return self.episode_number != 0

    def _parse_onscreen(self, text: str) -> bool:
        cleaned = _UNWANTED_ONSCREEN_CHARS.sub("", text)

        if cleaned[:1] in ("s", "S"):
            match = _SEASON_EPISODE.fullmatch(cleaned)
            if match:
                self.season_number = int(match.group(1))
                self.episode_number = int(match.group(2))
                return True
        elif cleaned[:1] in ("e", "E"):
            match = _EPISODE_ONLY.fullmatch(cleaned)
            if match:
                self.episode_number = int(match.group(1))
                return True

        return False