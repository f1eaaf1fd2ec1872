"""Shared entry point for HTTP requests to the Graph API."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any


class HttpClient(ABC):
    """Interface of the client that performs Graph API HTTP requests."""

    @abstractmethod
    async def get(self, path: str, parameters: Mapping[str, Any]) -> str | None:
        """Send a GET request and return the response body."""

    @abstractmethod
    async def post(self, path: str, parameters: Mapping[str, Any]) -> str | None:
        """Send a POST request and return the response body."""

    @abstractmethod
    async def delete(self, path: str, parameters: Mapping[str, Any]) -> str | None:
        """Send a DELETE request and return the response body."""

    @abstractmethod
    def parameters_to_query_string(self, parameters: Mapping[str, Any]) -> str:
        """Encode parameters as a query string."""


class HttpManager(HttpClient):
    """Forwards requests to a replaceable :class:`HttpClient`."""

    _instance: HttpManager | None = None

    def __init__(self, http_client: HttpClient | None = None) -> None:
        self._http_client = http_client

    @classmethod
    def instance(cls) -> HttpManager:
        """The process-wide manager, created on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def set_http_client(self, http_client: HttpClient) -> None:
        """Replace the client that requests are forwarded to."""
        self._http_client = http_client

    @property
    def _client(self) -> HttpClient:
        if self._http_client is None:
            raise RuntimeError("no HTTP client has been set")
        return self._http_client

    async def get(self, path: str, parameters: Mapping[str, Any]) -> str | None:
        return await self._client.get(path, parameters)

    async def post(self, path: str, parameters: Mapping[str, Any]) -> str | None:
        return await self._client.post(path, parameters)

    async def delete(self, path: str, parameters: Mapping[str, Any]) -> str | None:
        return await self._client.delete(path, parameters)

    def parameters_to_query_string(self, parameters: Mapping[str, Any]) -> str:
        return self._client.parameters_to_query_string(parameters)