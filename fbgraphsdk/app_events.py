"""Install tracking and app activation events for mobile app install ads."""

from __future__ import annotations

import asyncio
import inspect
import json
import time
from collections.abc import Awaitable, Callable, MutableMapping
from typing import Any, Union

from .http_manager import HttpClient, HttpManager

ACTIVITIES_PATH = "/activities"
MOBILE_APP_INSTALL = "MOBILE_APP_INSTALL"
CUSTOM_APP_EVENTS = "CUSTOM_APP_EVENTS"
ACTIVATE_APP_EVENT_NAME = "fb_mobile_activate_app"

# Offset between 1601-01-01 and 1970-01-01 in 100-nanosecond ticks.
_EPOCH_OFFSET_TICKS = 116444736000000000

CampaignIdProvider = Callable[[], Union[str, Awaitable[str]]]


def get_activate_app_json() -> str:
    """JSON array text describing the activate-app custom event."""
    events = [{"_eventName": ACTIVATE_APP_EVENT_NAME}]
    return json.dumps(events, separators=(",", ":"))


def _universal_time() -> int:
    """Current time as 100-nanosecond ticks since 1601-01-01 UTC."""
    return time.time_ns() // 100 + _EPOCH_OFFSET_TICKS


def _no_campaign_id() -> str:
    return ""


class FBSDKAppEvents:
    """Publishes install and activation events for one Facebook app."""

    def __init__(
        self,
        app_id: str | None,
        http_client: HttpClient | None = None,
        settings: MutableMapping[str, Any] | None = None,
        advertising_id: str = "",
        campaign_id_provider: CampaignIdProvider | None = None,
    ) -> None:
        self.app_id = app_id
        self._http_client = http_client
        self.settings: MutableMapping[str, Any] = settings if settings is not None else {}
        self.advertising_id = advertising_id or ""
        self._campaign_id_provider = campaign_id_provider or _no_campaign_id

    @property
    def _client(self) -> HttpClient:
        return self._http_client if self._http_client is not None else HttpManager.instance()

    @property
    def _path(self) -> str:
        return f"{self.app_id}{ACTIVITIES_PATH}"

    @property
    def last_ping_key(self) -> str:
        """Settings key holding the time of the last install ping."""
        return f"LastAttributionPing{self.app_id}"

    @property
    def last_response_key(self) -> str:
        """Settings key holding the response to the last install ping."""
        return f"LastInstallResponse{self.app_id}"

    def _advertiser_parameters(self) -> dict[str, str]:
        return {
            "advertiser_id": self.advertising_id,
            "advertiser_tracking_enabled": "0" if not self.advertising_id else "1",
        }

    async def _campaign_id(self) -> str:
        value = self._campaign_id_provider()
        if inspect.isawaitable(value):
            value = await value
        return value

    async def activate_app(self) -> None:
        """Publish the install (once) and log an activation; failures are ignored."""
        if not self.app_id:
            raise ValueError("A Facebook app ID is required")
        # Tracking must never fail the caller, so errors are swallowed.
        await asyncio.gather(
            self.publish_install(),
            self.log_activate_event(),
            return_exceptions=True,
        )

    async def publish_install(self) -> None:
        """Log the install event unless it was already recorded in the settings."""
        if self.settings.get(self.last_ping_key):
            return
        response = await self.log_install_event()
        self.settings[self.last_ping_key] = str(_universal_time())
        self.settings[self.last_response_key] = response or ""

    async def log_install_event(self) -> str | None:
        """Post the install event and return the response, or "" if it failed."""
        parameters: dict[str, str] = {"event": MOBILE_APP_INSTALL}
        parameters.update(self._advertiser_parameters())
        try:
            parameters["windows_attribution_id"] = await self._campaign_id()
            return await self._client.post(self._path, parameters)
        except Exception:
            # Expected while the app is not yet published.
            return ""

    async def log_activate_event(self) -> None:
        """Post the activate-app custom event."""
        parameters: dict[str, str] = {
            "event": CUSTOM_APP_EVENTS,
            "custom_events": get_activate_app_json(),
        }
        parameters.update(self._advertiser_parameters())
        await self._client.post(self._path, parameters)