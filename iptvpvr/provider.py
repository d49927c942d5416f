"""Content providers that channels and media can belong to."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ProviderType(IntEnum):
    UNKNOWN = 0
    ADDON = 1
    SATELLITE = 2
    CABLE = 3
    AERIAL = 4
    IPTV = 5
    OTHER = 6


@dataclass
class Provider:
    """A provider; equality ignores the unique id."""

    unique_id: int = field(default=-1, compare=False)
    provider_name: str = ""
    provider_type: ProviderType = ProviderType.UNKNOWN
    icon_path: str = ""
    countries: list[str] = field(default_factory=list)
    languages: list[str] = field(default_factory=list)

    def like(self, other: "Provider") -> bool:
        """Whether both providers have the same name."""
        return self.provider_name == other.provider_name

    def to_pvr_provider(self) -> dict[str, Any]:
        """The provider as the PVR frontend sees it."""
        return {
            "unique_id": self.unique_id,
            "name": self.provider_name,
            "type": self.provider_type,
            "icon_path": self.icon_path,
            "countries": list(self.countries),
            "languages": list(self.languages),
        }