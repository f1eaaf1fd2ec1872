"""Builder for Graph API request URIs."""

from __future__ import annotations

import re
from urllib.parse import parse_qsl, quote, urlsplit

GRAPH_DOMAIN = "https://graph.facebook.com/"

_API_VERSION = re.compile(r".?(v\d\.\d)(.*)")


class GraphUriBuilder:
    """Normalises a Graph path, fixes its API version and appends query parameters."""

    def __init__(self, path: str, api_major_version: int = 2, api_minor_version: int = 1) -> None:
        parts = urlsplit(path)
        if not (parts.scheme and parts.netloc):
            parts = urlsplit(GRAPH_DOMAIN + path)

        self._scheme = parts.scheme
        self._host = parts.hostname or ""
        self._path = self._fix_path_delimiters(parts.path)
        self._api_version = ""
        self._build_api_version(api_major_version, api_minor_version)
        self._query_params: dict[str, str] = {}
        for name, value in parse_qsl(parts.query, keep_blank_values=True):
            self._query_params[name] = value

    @staticmethod
    def _fix_path_delimiters(path: str) -> str:
        return "".join("/" + token for token in path.split("/") if token)

    def _build_api_version(self, major: int, minor: int) -> None:
        match = _API_VERSION.fullmatch(self._path)
        if match is not None:
            self._api_version = match.group(1)
            self._path = match.group(2)
        elif major:
            self._api_version = f"v{major}.{minor}"

    def add_query_param(self, query: str, param: str) -> None:
        """Set a query parameter, replacing any earlier value."""
        self._query_params[query] = param

    def make_uri(self) -> str:
        """Return the full request URI."""
        if "request_host" in self._query_params:
            self._host = str(self._query_params["request_host"])
        uri = f"{self._scheme}://{self._host}/{self._api_version}{self._path}"
        if self._query_params:
            uri += "?" + "&".join(
                f"{quote(str(key), safe='')}={quote(str(value), safe='')}"
                for key, value in self._query_params.items()
            )
        return uri