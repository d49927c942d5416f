from iptvpvr.headers import add_header, add_header_to_stream_url, url_encoded_protocol_options
from iptvpvr.weburls import url_decode


def test_first_header_starts_protocol_options():
    url = "http://example.com/stream"
    assert add_header_to_stream_url(url, "user-agent", "agent") == url + "|user-agent=agent"


def test_second_header_uses_ampersand():
    url = add_header_to_stream_url("http://example.com/s", "a", "1")
    result = add_header_to_stream_url(url, "b", "2")
    assert result.startswith(url)
    assert result.endswith("&b=2")
    assert result.count("|") == 1


def test_existing_header_is_not_duplicated():
    url = "http://example.com/s|referer=http://example.com"
    assert add_header_to_stream_url(url, "referer", "other") == url


def test_header_name_before_pipe_is_ignored():
    url = "http://example.com/?referer=x"
    result = add_header_to_stream_url(url, "referer", "y")
    assert result.endswith("|referer=y")


def test_add_header_encodes_value():
    result = add_header("", "name", "a b/c", True)
    _, value = result.split("=", 1)
    assert " " not in value
    assert url_decode(value) == "a b/c"


def test_url_encoded_protocol_options_round_trip():
    options = "User-Agent=My Agent&Referer=http://example.com/"
    encoded = url_encoded_protocol_options(options)
    assert not encoded.startswith("|")
    pairs = [item.split("=", 1) for item in encoded.split("&")]
    assert [name for name, _ in pairs] == ["User-Agent", "Referer"]
    assert [url_decode(value) for _, value in pairs] == ["My Agent", "http://example.com/"]


def test_options_without_equals_are_skipped():
    assert url_encoded_protocol_options("novalue&x=1") == "x=1"


def test_empty_options():
    assert url_encoded_protocol_options("") == ""