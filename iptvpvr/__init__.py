"""Catch-up, XMLTV programme, genre, settings and URL helpers for IPTV PVR clients."""

__version__ = "0.1.0"