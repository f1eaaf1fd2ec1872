"""Access to Graph API calls whose results come back in pages."""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from .http_manager import HttpClient, HttpManager
from .result import FBError, FBResult

JsonClassFactory = Callable[[str], Any]

_BAD_CALL = "Invalid SDK call: no current page"
_BAD_OBJECT = "Invalid object in Graph API response"


def _stringify(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def _parse_json(text: str) -> Any:
    try:
        return json.loads(text)
    except (TypeError, ValueError):
        return _INVALID


_INVALID = object()


def _error_from_json(value: Any) -> FBError:
    if isinstance(value, Mapping):
        code = value.get("code", 0)
        return FBError(
            code=code if isinstance(code, int) else 0,
            error_type=str(value.get("type", "")),
            message=str(value.get("message", "")),
        )
    return FBError(0, "", _stringify(value))


@dataclass(frozen=True)
class FBPaging:
    """Paging links and cursors that come with a page of Graph data."""

    next: str | None = None
    previous: str | None = None
    before: str | None = None
    after: str | None = None

    @classmethod
    def from_json(cls, json_text: str) -> FBPaging | None:
        """Build from the JSON text of a "paging" object, or None if it is not one."""
        value = _parse_json(json_text)
        if not isinstance(value, dict):
            return None
        cursors = value.get("cursors")
        if not isinstance(cursors, dict):
            cursors = {}

        def text(source: Mapping[str, Any], key: str) -> str | None:
            item = source.get(key)
            return item if isinstance(item, str) else None

        return cls(
            next=text(value, "next"),
            previous=text(value, "previous"),
            before=text(cursors, "before"),
            after=text(cursors, "after"),
        )


class FBPaginatedArray:
    """Walks the pages of a Graph API call that returns a paginated list."""

    def __init__(
        self,
        request: str,
        parameters: Mapping[str, Any] | None = None,
        object_factory: JsonClassFactory | None = None,
        http_client: HttpClient | None = None,
    ) -> None:
        self._request = request
        self._parameters: dict[str, Any] = dict(parameters) if parameters else {}
        self._object_factory: JsonClassFactory = object_factory or json.loads
        self._http_client = http_client
        self._current: list[Any] | None = None
        self._current_data_string: str | None = None
        self._paging: FBPaging | None = None

    @property
    def _client(self) -> HttpClient:
        return self._http_client if self._http_client is not None else HttpManager.instance()

    async def first(self) -> FBResult | None:
        """Fetch the first page."""
        return await self._get_page(self._request)

    async def next(self) -> FBResult | None:
        """Fetch the next page, or return an error result if there is none."""
        if not self.has_next:
            return FBResult(FBError(0, "Invalid SDK call", "No next page"))
        assert self._paging is not None and self._paging.next is not None
        return await self._get_page(self._paging.next)

    async def previous(self) -> FBResult | None:
        """Fetch the previous page, or return an error result if there is none."""
        if not self.has_previous:
            return FBResult(FBError(0, "Invalid SDK call", "No previous page"))
        assert self._paging is not None and self._paging.previous is not None
        return await self._get_page(self._paging.previous)

    @property
    def current(self) -> list[Any]:
        """Objects of the most recently fetched page."""
        if self._current is None:
            raise ValueError(_BAD_CALL)
        return self._current

    @property
    def current_data_string(self) -> str:
        """Raw JSON text of the most recently fetched page's "data" value."""
        if self._current is None:
            raise ValueError(_BAD_CALL)
        assert self._current_data_string is not None
        return self._current_data_string

    @property
    def has_current(self) -> bool:
        return self._current is not None

    @property
    def has_next(self) -> bool:
        return self._paging is not None and self._paging.next is not None

    @property
    def has_previous(self) -> bool:
        return self._paging is not None and self._paging.previous is not None

    def object_array_from_web_response(
        self, response: str, class_factory: JsonClassFactory
    ) -> list[Any] | None:
        """Objects built from the "data" array of a response, or None if it has none."""
        root = _parse_json(response)
        if not isinstance(root, dict):
            return None
        data = root.get("data")
        if not isinstance(data, list):
            return None
        return self._objects_from_json_array(data, class_factory)

    @staticmethod
    def _objects_from_json_array(values: list[Any], class_factory: JsonClassFactory) -> list[Any]:
        objects = []
        for value in values:
            item = class_factory(_stringify(value))
            if not item:
                raise ValueError(_BAD_OBJECT)
            objects.append(item)
        return objects

    def _consume_paged_response(self, json_text: str) -> FBResult | None:
        value = _parse_json(json_text)
        if value is _INVALID:
            return None

        found_data = False
        found_error = False
        result: FBResult | None = None

        if isinstance(value, dict):
            for key, item in value.items():
                if key == "error":
                    result = FBResult(_error_from_json(item))
                    found_error = True
                    break
                if key == "paging":
                    self._paging = FBPaging.from_json(_stringify(item))
                elif key == "data":
                    if not isinstance(item, list):
                        raise ValueError(_BAD_OBJECT)
                    self._current_data_string = _stringify(item)
                    self._current = self._objects_from_json_array(item, self._object_factory)
                    found_data = True

        # A single-page result has no "paging", but "data" must always be present.
        if not (found_error or found_data):
            raise ValueError(_BAD_OBJECT)
        if not found_error:
            result = FBResult(self._current)
        return result

    async def _get_page(self, path: str) -> FBResult | None:
        response = await self._client.get(path, dict(self._parameters))
        if response is None:
            return FBResult(FBError(0, "HTTP request failed", "unable to receive response"))
        return self._consume_paged_response(response)