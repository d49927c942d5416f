"""Small helpers for reading values out of ElementTree elements."""

from __future__ import annotations

from typing import Optional
from xml.etree.ElementTree import Element


def child_value(node: Element) -> str:
    """Return the first non-blank text run directly inside ``node``."""
    runs = [node.text, *(child.tail for child in node)]
    return next((run for run in runs if run is not None and run.strip()), "")


def get_node_value(root_node: Element, tag: str) -> str:
    """Text of the first child named ``tag``, or an empty string."""
    child = root_node.find(tag)
    return "" if child is None else child_value(child)


def get_node_values_list(root_node: Element, tag: str) -> list[str]:
    return [child_value(child) for child in root_node.findall(tag)]


def get_joined_node_values(root_node: Element, tag: str) -> str:
    """Texts of every child named ``tag``, joined with commas."""
    return ",".join(get_node_values_list(root_node, tag))


def get_attribute_value(node: Element, attribute_name: str) -> Optional[str]:
    """Value of an attribute, or None when it is absent."""
    return node.get(attribute_name)


def get_parse_error_string(buffer: str, error_offset: int) -> tuple[str, int]:
    """Excerpt of ``buffer`` around a parse error.

    The excerpt starts up to two newlines before ``error_offset`` and ends at
    the next newline. Returns the excerpt and the error's offset within it.
    """
    start = error_offset
    found = buffer.rfind("\n", 0, error_offset + 1)
    if found != -1:
        start = found
        if start != 0:
            found = buffer.rfind("\n", 0, start)
            if found != -1:
                start = found

    end = error_offset
    found = buffer.find("\n", error_offset)
    if found != -1:
        end = found

    return buffer[start:end], error_offset - start