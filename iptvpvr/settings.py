"""Instance settings, the enums they use, and migration of legacy settings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Mapping, MutableMapping

INSTANCE_NAME_KEY = "kodi_addon_instance_name"
MIGRATED_INSTANCE_NAME = "Migrated Add-on Config"
IGNORE_CATCHUP_DAYS = -1


class PathType(IntEnum):
    LOCAL_PATH = 0
    REMOTE_PATH = 1


class CatchupMode(IntEnum):
    """Catchup modes, numbered as in the add-on settings."""

    DISABLED = 0
    DEFAULT = 1
    APPEND = 2
    SHIFT = 3
    FLUSSONIC = 4
    XTREAM_CODES = 5
    TIMESHIFT = 6  # obsolete, predates SHIFT, still used by some providers
    VOD = 7


class CatchupOverrideMode(IntEnum):
    WITHOUT_TAGS = 0
    WITH_TAGS = 1
    ALL_CHANNELS = 2


@dataclass
class InstanceSettings:
    """Settings of one add-on instance that channels and streams consult."""

    user_path: str = ""

    logo_path_type: PathType = PathType.REMOTE_PATH
    logo_path: str = ""
    logo_base_url: str = ""

    default_user_agent: str = ""
    default_inputstream: str = ""
    default_mime_type: str = ""

    transform_multicast_stream_urls: bool = False
    udpxy_host: str = ""
    udpxy_port: int = 4022

    tv_channel_groups_only: bool = False
    radio_channel_groups_only: bool = False

    catchup_enabled: bool = False
    catchup_days: int = 5
    all_channels_catchup_mode: CatchupMode = CatchupMode.DISABLED
    catchup_override_mode: CatchupOverrideMode = CatchupOverrideMode.WITHOUT_TAGS
    catchup_query_format: str = ""

    timeshift_enabled: bool = False
    timeshift_enabled_all: bool = False
    timeshift_enabled_http: bool = False
    timeshift_enabled_udp: bool = False
    always_enable_timeshift_mode_if_missing: bool = False

    use_inputstream_adaptive_for_hls: bool = False
    use_ffmpeg_reconnect: bool = True

    use_epg_genre_text_when_mapping: bool = False
    include_show_info_in_media_title: bool = False
    group_media_by_title: bool = True
    group_media_by_season: bool = True

    @property
    def logo_location(self) -> str:
        """Base location for channel logos, according to the logo path type."""
        if self.logo_path_type == PathType.REMOTE_PATH:
            return self.logo_base_url
        return self.logo_path


# Legacy setting name -> default value, in migration order.
STRING_SETTINGS: dict[str, str] = {
    "m3uPath": "",
    "m3uUrl": "",
    "defaultProviderName": "",
    "providerMappingFile": "special://userdata/addon_data/pvr.iptvsimple/providers/providerMappings.xml",
    "onetvgroup": "",
    "twotvgroup": "",
    "threetvgroup": "",
    "fourtvgroup": "",
    "fivetvgroup": "",
    "customtvgroupsfile": "special://userdata/addon_data/pvr.iptvsimple/channelGroups/customTVGroups-example.xml",
    "oneradiogroup": "",
    "tworadiogroup": "",
    "threeradiogroup": "",
    "fourradiogroup": "",
    "fiveradiogroup": "",
    "customradiogroupsfile": "special://userdata/addon_data/pvr.iptvsimple/channelGroups/customRadioGroups-example.xml",
    "epgPath": "",
    "epgUrl": "",
    "genresPath": "special://userdata/addon_data/pvr.iptvsimple/genres/genreTextMappings/genres.xml",
    "genresUrl": "",
    "logoPath": "",
    "logoBaseUrl": "",
    "catchupQueryFormat": "",
    "udpxyHost": "",
    "defaultUserAgent": "",
    "defaultInputstream": "",
    "defaultMimeType": "",
}

INT_SETTINGS: dict[str, int] = {
    "m3uPathType": 1,
    "startNum": 1,
    "m3uRefreshMode": 0,
    "m3uRefreshIntervalMins": 60,
    "m3uRefreshHour": 4,
    "tvgroupmode": 0,
    "numtvgroups": 1,
    "radiogroupmode": 0,
    "numradiogroups": 1,
    "epgPathType": 1,
    "genresPathType": 0,
    "logoPathType": 1,
    "logoFromEpg": 1,
    "catchupDays": 5,
    "allChannelsCatchupMode": 0,
    "catchupOverrideMode": 0,
    "catchupWatchEpgBeginBufferMins": 5,
    "catchupWatchEpgEndBufferMins": 15,
    "udpxyPort": 4022,
}

FLOAT_SETTINGS: dict[str, float] = {
    "epgTimeShift": 0.0,
    "catchupCorrection": 0.0,
}

BOOL_SETTINGS: dict[str, bool] = {
    "m3uCache": True,
    "numberByOrder": False,
    "enableProviderMappings": False,
    "tvChannelGroupsOnly": False,
    "radioChannelGroupsOnly": False,
    "epgCache": True,
    "epgTSOverride": False,
    "epgIgnoreCaseForChannelIds": True,
    "useEpgGenreText": False,
    "useLogosLocalPathOnly": False,
    "mediaEnabled": True,
    "mediaGroupByTitle": True,
    "mediaGroupBySeason": True,
    "mediaTitleSeasonEpisode": False,
    "mediaVODAsRecordings": True,
    "timeshiftEnabled": False,
    "timeshiftEnabledAll": False,
    "timeshiftEnabledHttp": False,
    "timeshiftEnabledUdp": False,
    "timeshiftEnabledCustom": False,
    "catchupEnabled": False,
    "catchupPlayEpgAsLive": False,
    "catchupOnlyOnFinishedProgrammes": False,
    "transformMulticastStreamUrls": False,
    "useFFmpegReconnect": True,
    "useInputstreamAdaptiveforHls": False,
}

_ALL_DEFAULTS: tuple[Mapping[str, Any], ...] = (
    STRING_SETTINGS,
    INT_SETTINGS,
    FLOAT_SETTINGS,
    BOOL_SETTINGS,
)


def is_migration_setting(key: str) -> bool:
    """Whether ``key`` is a legacy setting that migration carries over."""
    return any(key in defaults for defaults in _ALL_DEFAULTS)


def migrate_settings(legacy: Mapping[str, Any], target: MutableMapping[str, Any]) -> bool:
    """Copy non-default legacy settings into ``target``, an instance's settings.

    Nothing happens when the target already has an instance name. Returns
    True when at least one setting was migrated; the target is then named.
    """
    if target.get(INSTANCE_NAME_KEY):
        return False

    changed = False
    for defaults in _ALL_DEFAULTS:
        for key, default in defaults.items():
            if key in legacy and legacy[key] != default:
                target[key] = legacy[key]
                changed = True

    if changed:
        target[INSTANCE_NAME_KEY] = MIGRATED_INSTANCE_NAME
    return changed