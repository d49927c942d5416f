"""A channel's guide data: its names, icon and programmes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable
from xml.etree.ElementTree import Element

from .epg_entry import EpgEntry
from .genres import EPG_STRING_TOKEN_SEPARATOR
from .xmlutils import child_value, get_attribute_value


@dataclass
class DisplayNamePair:
    """A display name, and the same with spaces turned into underscores."""

    display_name: str = ""
    display_name_with_underscores: str = ""


@dataclass
class ChannelEpg:
    """Guide data for one XMLTV channel, programmes keyed by start time."""

    id: str = ""
    display_names: list[DisplayNamePair] = field(default_factory=list)
    icon_path: str = ""
    epg_entries: dict[int, EpgEntry] = field(default_factory=dict)

    def add_display_name(self, value: str) -> None:
        self.display_names.append(DisplayNamePair(value, value.replace(" ", "_")))

    def joined_display_names(self) -> str:
        return EPG_STRING_TOKEN_SEPARATOR.join(pair.display_name for pair in self.display_names)

    def add_epg_entry(self, epg_entry: EpgEntry) -> None:
        """Store a programme, replacing any with the same start; keys stay sorted."""
        key = epg_entry.start_time
        out_of_order = key not in self.epg_entries and bool(self.epg_entries) and key < next(
            reversed(self.epg_entries)
        )
        self.epg_entries[key] = epg_entry
        if out_of_order:
            self.epg_entries = dict(sorted(self.epg_entries.items()))

    def update_from(self, channel_node: Element, is_known: Callable[[str, str], bool]) -> bool:
        """Fill from a ``<channel>`` element.

        ``is_known(id, display_name)`` tells whether a playlist channel or
        media entry matches; only matching display names are kept. Returns
        False when the element has no id or matches nothing.
        """
        channel_id = get_attribute_value(channel_node, "id")
        if channel_id is None:
            return False
        self.id = channel_id
        if not channel_id:
            return False

        found = False
        display_name_nodes = channel_node.findall("display-name")
        for node in display_name_nodes:
            name = child_value(node)
            if is_known(channel_id, name):
                found = True
                self.add_display_name(name)

        # Without display names the id alone may match.
        if not display_name_nodes and is_known(channel_id, ""):
            found = True

        if not found:
            return False

        icon = channel_node.find("icon")
        self.icon_path = "" if icon is None else (get_attribute_value(icon, "src") or "")
        return True

    def combine_names_and_icon_path_from(self, other: "ChannelEpg") -> bool:
        """Take over ``other``'s names, and its icon when this one has none."""
        combined = False
        for pair in other.display_names:
            self.add_display_name(pair.display_name)
            combined = True

        if not self.icon_path and other.icon_path:
            self.icon_path = other.icon_path
            combined = True

        return combined