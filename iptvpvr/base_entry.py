"""Fields shared by EPG entries and media entries."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntFlag
from typing import Any

EPG_TAG_INVALID_SERIES_EPISODE = -1
EPG_GENRE_USE_STRING = 0x100


class EpgTagFlag(IntFlag):
    UNDEFINED = 0
    IS_SERIES = 1 << 0
    IS_NEW = 1 << 1
    IS_PREMIERE = 1 << 2
    IS_FINALE = 1 << 3
    IS_LIVE = 1 << 4


@dataclass(kw_only=True)
class BaseEntry:
    """Programme details common to EPG and media entries."""

    genre_type: int = 0
    genre_sub_type: int = 0
    year: int = 0
    episode_number: int = EPG_TAG_INVALID_SERIES_EPISODE
    episode_part_number: int = EPG_TAG_INVALID_SERIES_EPISODE
    season_number: int = EPG_TAG_INVALID_SERIES_EPISODE

    first_aired: str = ""
    title: str = ""
    episode_name: str = ""
    plot_outline: str = ""
    plot: str = ""
    icon_path: str = ""
    genre_string: str = ""

    cast: str = ""
    director: str = ""
    writer: str = ""

    parental_rating: str = ""
    parental_rating_system: str = ""
    parental_rating_icon_path: str = ""
    star_rating: int = 0

    is_new: bool = False
    is_premiere: bool = False

    settings: Any = field(default=None, repr=False, compare=False)

    def flags(self) -> EpgTagFlag:
        """Tag flags describing whether the entry is new or a premiere."""
        result = EpgTagFlag.UNDEFINED
        if self.is_new:
            result |= EpgTagFlag.IS_NEW
        if self.is_premiere:
            result |= EpgTagFlag.IS_PREMIERE
        return result