import pytest

from iptvpvr.catchup import (
    append_catchup_source,
    catchup_granularity_seconds,
    catchup_mode_text,
    flussonic_catchup_source,
    is_terminating_catchup_source,
    is_valid_timeshifting_catchup_source,
    shift_catchup_source,
    xtream_codes_catchup_source,
)
from iptvpvr.settings import CatchupMode


@pytest.mark.parametrize(
    "mode, text",
    [
        (CatchupMode.DISABLED, "Disabled"),
        (CatchupMode.DEFAULT, "Default"),
        (CatchupMode.APPEND, "Append"),
        (CatchupMode.SHIFT, "Shift (SIPTV)"),
        (CatchupMode.TIMESHIFT, "Shift (SIPTV)"),
        (CatchupMode.FLUSSONIC, "Flussonic"),
        (CatchupMode.XTREAM_CODES, "Xtream codes"),
        (CatchupMode.VOD, "VOD"),
    ],
)
def test_catchup_mode_text(mode, text):
    assert catchup_mode_text(mode) == text


def test_timeshifting_requires_specifiers():
    assert not is_valid_timeshifting_catchup_source("http://example.com/a", CatchupMode.DEFAULT)
    assert is_valid_timeshifting_catchup_source("http://example.com/?utc={utc}", CatchupMode.DEFAULT)


def test_lone_catchup_id_or_vod_cannot_timeshift():
    assert not is_valid_timeshifting_catchup_source("{catchup-id}", CatchupMode.DEFAULT)
    assert is_valid_timeshifting_catchup_source("{catchup-id}/{utc}", CatchupMode.DEFAULT)
    assert not is_valid_timeshifting_catchup_source("{utc}", CatchupMode.VOD)


@pytest.mark.parametrize("fmt", ["{duration}", "{lutc:x}", "${timestamp}", "{utcend}", "${end:Y}"])
def test_terminating_sources(fmt):
    assert is_terminating_catchup_source("http://example.com/" + fmt)


def test_non_terminating_source():
    assert not is_terminating_catchup_source("http://example.com/{utc}")


@pytest.mark.parametrize("fmt", ["{utc}", "${start}", "{S}", "{offset:1}", "{utc:Y}"])
def test_one_second_granularity(fmt):
    assert catchup_granularity_seconds("x" + fmt) == 1


def test_minute_granularity():
    assert catchup_granularity_seconds("{Y}-{m}-{d}:{H}-{M}") == 60


def test_append_catchup_source():
    url = "http://example.com/live"
    assert append_catchup_source(url, "?a={utc}", "?b={utc}") == url + "?a={utc}"
    assert append_catchup_source(url, "", "?b={utc}") == url + "?b={utc}"
    assert append_catchup_source(url, "", "") is None


def test_shift_catchup_source():
    assert shift_catchup_source("http://example.com/live") == "http://example.com/live?utc={utc}&lutc={lutc}"
    assert shift_catchup_source("http://example.com/live?x=1") == "http://example.com/live?x=1&utc={utc}&lutc={lutc}"


def test_flussonic_mpegts():
    result = flussonic_catchup_source("http://example.com/151/mpegts?token=token", False)
    assert result == ("http://example.com/151/timeshift_abs-${start}.ts?token=token", True)


def test_flussonic_index_playlist():
    result = flussonic_catchup_source("http://example.com:8888/325/index.m3u8?token=token", False)
    assert result == ("http://example.com:8888/325/timeshift_rel-{offset:1}.m3u8?token=token", False)


def test_flussonic_named_playlist():
    result = flussonic_catchup_source("http://example.com:8888/325/mono.m3u8?token=token", True)
    assert result == ("http://example.com:8888/325/mono-timeshift_rel-{offset:1}.m3u8?token=token", False)


def test_flussonic_generic_uses_tagged_stream_kind():
    url = "http://example.com:8888/325/live?token=token"
    assert flussonic_catchup_source(url, False) == (
        "http://example.com:8888/325/timeshift_rel-{offset:1}.m3u8?token=token",
        False,
    )
    assert flussonic_catchup_source(url, True) == (
        "http://example.com:8888/325/timeshift_abs-${start}.ts?token=token",
        True,
    )


def test_flussonic_rejects_non_http():
    assert flussonic_catchup_source("rtp://@239.0.0.1:1234", False) is None


def test_xtream_codes_without_extension_is_ts():
    result = xtream_codes_catchup_source("http://example.com:8080/user/password/1477")
    assert result == (
        "http://example.com:8080/timeshift/user/password/{duration:60}/{Y}-{m}-{d}:{H}-{M}/1477.ts",
        True,
    )


def test_xtream_codes_live_playlist():
    result = xtream_codes_catchup_source("http://example.com:8080/live/user/password/1477.m3u8")
    assert result == (
        "http://example.com:8080/timeshift/user/password/{duration:60}/{Y}-{m}-{d}:{H}-{M}/1477.m3u8",
        False,
    )


def test_xtream_codes_rejects_other_urls():
    assert xtream_codes_catchup_source("http://example.com/only/two") is None
    assert xtream_codes_catchup_source("http://example.com:8080/user/password/1477.ts") is None