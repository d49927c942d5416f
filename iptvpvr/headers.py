"""Manipulation of protocol options appended to stream URLs after '|'."""

from __future__ import annotations

from .weburls import url_encode


def add_header(
    header_target: str, header_name: str, header_value: str, encode_header_value: bool
) -> str:
    """Append ``name=value`` unless a header of that name is already present."""
    pipe = header_target.find("|")
    if pipe != -1 and header_target.find(f"{header_name}=", pipe + 1) != -1:
        return header_target

    separator = "&" if pipe != -1 else "|"
    value = url_encode(header_value) if encode_header_value else header_value
    return f"{header_target}{separator}{header_name}={value}"


def add_header_to_stream_url(stream_url: str, header_name: str, header_value: str) -> str:
    return add_header(stream_url, header_name, header_value, False)


def url_encoded_protocol_options(protocol_options: str) -> str:
    """Re-encode the values of ``a=b&c=d`` options, without a leading '|'."""
    encoded = ""
    for header in protocol_options.split("&"):
        name, sep, value = header.partition("=")
        if not sep:
            continue
        encoded = add_header(encoded, name, value, True)

    return encoded[1:] if encoded.startswith("|") else encoded