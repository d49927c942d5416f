"""Titles and directories used when presenting media entries."""

from __future__ import annotations

import re
from typing import Pattern, Union

from .base_entry import EPG_TAG_INVALID_SERIES_EPISODE

_SEASON_EPISODE = re.compile(r"[sS]\.?[0-9]+ ?[eE][pP]?\.?[0-9]+/?[0-9]* *")

SEASON_TEXT_PATTERN = re.compile(r"^.*([sS]\.?[0-9]+) ?[\s\S]*$")


def extract_folder_title(title: str) -> str:
    """Title with any season/episode markers such as 'S01E02' removed."""
    return _SEASON_EPISODE.sub("", title)


def season_prefix(season_number: int) -> str:
    """'S' and a two digit season number, or '' when there is no season."""
    if season_number == EPG_TAG_INVALID_SERIES_EPISODE:
        return ""
    return f"S0{season_number}" if season_number < 10 else f"S{season_number}"


def episode_prefix(episode_number: int) -> str:
    """'E' and a two digit episode number, or '' when there is no episode."""
    if episode_number == EPG_TAG_INVALID_SERIES_EPISODE:
        return ""
    return f"E0{episode_number}" if episode_number < 10 else f"E{episode_number}"


def create_title(title: str, season_number: int, episode_number: int, settings) -> str:
    """Title prefixed with season and episode when the settings ask for it."""
    if not settings.include_show_info_in_media_title:
        return title

    prefix = season_prefix(season_number) + episode_prefix(episode_number)
    return f"{prefix} - {title}" if prefix else title


def fix_path(path: str) -> str:
    """Directory path with a leading and a trailing '/'."""
    if not path:
        return "/"
    if not path.startswith("/"):
        path = "/" + path
    if not path.endswith("/"):
        path += "/"
    return path


def match_text_from_string(text: str, pattern: Union[str, Pattern[str]]) -> str:
    """The single group captured when ``pattern`` matches all of ``text``, else ''."""
    compiled = re.compile(pattern)
    match = compiled.fullmatch(text)
    if match is None or compiled.groups != 1:
        return ""
    return match.group(1) or ""