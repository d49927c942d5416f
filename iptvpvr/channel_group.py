"""A named group of channels."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ChannelGroup:
    """A channel group and the indexes of its member channels."""

    radio: bool = False
    unique_id: int = 0
    group_name: str = ""
    member_channel_indexes: list[int] = field(default_factory=list)

    def add_member_channel_index(self, channel_index: int) -> None:
        self.member_channel_indexes.append(channel_index)

    def is_empty(self) -> bool:
        return not self.member_channel_indexes

    def to_pvr_channel_group(self) -> dict[str, Any]:
        """The group as the PVR frontend sees it; groups keep their default order."""
        return {"is_radio": self.radio, "position": 0, "group_name": self.group_name}