"""EPG genre mappings read from genre definition files."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Optional
from xml.etree.ElementTree import Element

from .xmlutils import child_value, get_attribute_value

EPG_STRING_TOKEN_SEPARATOR = ","

_HEX_NUMBER = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")
_NATURAL_NUMBER = re.compile(r"\s*[0-9]+\s*")


def _parse_hex(text: str) -> int:
    match = _HEX_NUMBER.match(text)
    digits = match.group(2)
    if not digits:
        return 0
    value = int(digits, 16)
    return -value if match.group(1) == "-" else value


def _is_natural_number(text: str) -> bool:
    return _NATURAL_NUMBER.fullmatch(text) is not None


@dataclass
class EpgGenre:
    """Maps a genre text to a type and sub type."""

    genre_type: int = 0
    genre_sub_type: int = 0
    genre_string: str = ""

    def update_from(self, genre_node: Element) -> bool:
        """Fill from a ``<genre>`` element; False when it cannot be used."""
        genre_id = get_attribute_value(genre_node, "genreId")
        if genre_id is not None:
            # Combined genre id read as a single hex value.
            combined = _parse_hex(genre_id)
            self.genre_string = child_value(genre_node)
            self.genre_type = combined & 0xF0
            self.genre_sub_type = combined & 0x0F
            return True

        genre_type = get_attribute_value(genre_node, "type")
        if genre_type is None or not _is_natural_number(genre_type):
            return False

        self.genre_string = child_value(genre_node)
        self.genre_type = int(genre_type)
        self.genre_sub_type = 0

        sub_type = get_attribute_value(genre_node, "subtype")
        if sub_type is not None and _is_natural_number(sub_type):
            self.genre_sub_type = int(sub_type)

        return True


def match_genre(genre_string: str, genre_mappings: Iterable[EpgGenre]) -> Optional[EpgGenre]:
    """First mapping whose text equals, ignoring case, a genre in ``genre_string``."""
    mappings = list(genre_mappings)
    if not mappings:
        return None

    for genre in genre_string.split(EPG_STRING_TOKEN_SEPARATOR):
        if not genre:
            continue
        wanted = genre.lower()
        for mapping in mappings:
            if mapping.genre_string.lower() == wanted:
                return mapping

    return None