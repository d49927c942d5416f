import pytest

from iptvpvr.settings import (
    BOOL_SETTINGS,
    INSTANCE_NAME_KEY,
    CatchupMode,
    CatchupOverrideMode,
    InstanceSettings,
    PathType,
    is_migration_setting,
    migrate_settings,
)


def test_catchup_mode_values_match_settings_numbering():
    assert CatchupMode(0) is CatchupMode.DISABLED
    assert CatchupMode(6) is CatchupMode.TIMESHIFT
    assert CatchupMode(7) is CatchupMode.VOD


def test_override_mode_and_path_type_numbering():
    assert CatchupOverrideMode(2) is CatchupOverrideMode.ALL_CHANNELS
    assert PathType(1) is PathType.REMOTE_PATH


def test_instance_settings_defaults_follow_setting_defaults():
    settings = InstanceSettings()
    assert settings.catchup_days == 5
    assert settings.udpxy_port == 4022
    assert settings.use_ffmpeg_reconnect is True
    assert settings.all_channels_catchup_mode is CatchupMode.DISABLED


def test_logo_location_depends_on_path_type():
    settings = InstanceSettings(logo_path="/logos", logo_base_url="http://example.com/logos")
    assert settings.logo_location == "http://example.com/logos"
    settings.logo_path_type = PathType.LOCAL_PATH
    assert settings.logo_location == "/logos"


@pytest.mark.parametrize("key", ["m3uPath", "udpxyPort", "epgTimeShift", "m3uCache"])
def test_known_keys_are_migration_settings(key):
    assert is_migration_setting(key)


@pytest.mark.parametrize("key", [INSTANCE_NAME_KEY, "", "M3UPATH", "unknown"])
def test_other_keys_are_not_migration_settings(key):
    assert not is_migration_setting(key)


def test_migration_copies_only_non_default_values():
    legacy = {"m3uUrl": "http://example.com/list.m3u", "udpxyPort": 4022, "catchupDays": 7}
    target = {}
    assert migrate_settings(legacy, target) is True
    assert target["m3uUrl"] == "http://example.com/list.m3u"
    assert target["catchupDays"] == 7
    assert "udpxyPort" not in target
    assert target[INSTANCE_NAME_KEY] == "Migrated Add-on Config"


def test_migration_of_defaults_only_changes_nothing():
    legacy = {key: value for key, value in BOOL_SETTINGS.items()}
    target = {}
    assert migrate_settings(legacy, target) is False
    assert target == {}


def test_migration_skipped_when_instance_already_named():
    target = {INSTANCE_NAME_KEY: "Mine"}
    assert migrate_settings({"m3uUrl": "http://example.com/a.m3u"}, target) is False
    assert target == {INSTANCE_NAME_KEY: "Mine"}


def test_migration_runs_when_instance_name_empty():
    target = {INSTANCE_NAME_KEY: ""}
    assert migrate_settings({"epgTimeShift": 1.5}, target) is True
    assert target["epgTimeShift"] == 1.5


def test_unknown_legacy_keys_are_ignored():
    target = {}
    assert migrate_settings({"notASetting": "x"}, target) is False
    assert "notASetting" not in target