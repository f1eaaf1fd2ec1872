"""Helpers for Graph API results, permissions, media, colours, URIs, paging and app events."""

__version__ = "0.1.0"