import json
from collections.abc import Mapping
from typing import Any

import pytest

from fbgraphsdk.app_events import FBSDKAppEvents, get_activate_app_json
from fbgraphsdk.http_manager import HttpClient


class RecordingClient(HttpClient):
    def __init__(self, response: str | None = "ok", fail: bool = False) -> None:
        self.posts: list[tuple[str, dict[str, Any]]] = []
        self.response = response
        self.fail = fail

    async def get(self, path: str, parameters: Mapping[str, Any]) -> str | None:
        raise AssertionError("unexpected GET")

    async def post(self, path: str, parameters: Mapping[str, Any]) -> str | None:
        self.posts.append((path, dict(parameters)))
        if self.fail:
            raise ConnectionError("network down")
        return self.response

    async def delete(self, path: str, parameters: Mapping[str, Any]) -> str | None:
        raise AssertionError("unexpected DELETE")

    def parameters_to_query_string(self, parameters: Mapping[str, Any]) -> str:
        return ""


def test_activate_app_json_is_fixed_event():
    text = get_activate_app_json()
    assert text == '[{"_eventName":"fb_mobile_activate_app"}]'
    assert json.loads(text) == [{"_eventName": "fb_mobile_activate_app"}]


@pytest.mark.asyncio
async def test_log_install_event_posts_parameters():
    client = RecordingClient(response="installed")
    events = FBSDKAppEvents("123", client, {}, "adv-id", lambda: "campaign-7")
    result = await events.log_install_event()
    assert result == "installed"
    path, params = client.posts[0]
    assert path == "123/activities"
    assert params == {
        "event": "MOBILE_APP_INSTALL",
        "advertiser_id": "adv-id",
        "advertiser_tracking_enabled": "1",
        "windows_attribution_id": "campaign-7",
    }


@pytest.mark.asyncio
async def test_tracking_disabled_without_advertising_id():
    client = RecordingClient()
    events = FBSDKAppEvents("123", client, {}, "")
    await events.log_install_event()
    params = client.posts[0][1]
    assert params["advertiser_tracking_enabled"] == "0"
    assert params["windows_attribution_id"] == ""


@pytest.mark.asyncio
async def test_async_campaign_provider():
    async def provider() -> str:
        return "async-campaign"

    client = RecordingClient()
    events = FBSDKAppEvents("9", client, {}, "a", provider)
    await events.log_install_event()
    assert client.posts[0][1]["windows_attribution_id"] == "async-campaign"


@pytest.mark.asyncio
async def test_log_install_event_failure_returns_empty():
    def broken() -> str:
        raise RuntimeError("not published")

    client = RecordingClient()
    events = FBSDKAppEvents("123", client, {}, "a", broken)
    assert await events.log_install_event() == ""
    assert client.posts == []


@pytest.mark.asyncio
async def test_log_activate_event_posts_custom_event():
    client = RecordingClient()
    events = FBSDKAppEvents("55", client, {}, "adv")
    await events.log_activate_event()
    path, params = client.posts[0]
    assert path == "55/activities"
    assert params["event"] == "CUSTOM_APP_EVENTS"
    assert params["custom_events"] == get_activate_app_json()
    assert params["advertiser_tracking_enabled"] == "1"


@pytest.mark.asyncio
async def test_publish_install_records_once():
    client = RecordingClient(response="resp")
    settings: dict[str, Any] = {}
    events = FBSDKAppEvents("77", client, settings, "adv")
    await events.publish_install()
    assert settings["LastInstallResponse77"] == "resp"
    assert int(settings["LastAttributionPing77"]) > 0
    await events.publish_install()
    assert len(client.posts) == 1


@pytest.mark.asyncio
async def test_publish_install_skipped_when_already_pinged():
    client = RecordingClient()
    settings = {"LastAttributionPing77": "1"}
    events = FBSDKAppEvents("77", client, settings, "adv")
    await events.publish_install()
    assert client.posts == []
    assert "LastInstallResponse77" not in settings


@pytest.mark.asyncio
@pytest.mark.parametrize("app_id", [None, ""])
async def test_activate_app_requires_app_id(app_id):
    events = FBSDKAppEvents(app_id, RecordingClient(), {})
    with pytest.raises(ValueError):
        await events.activate_app()


@pytest.mark.asyncio
async def test_activate_app_sends_both_events():
    client = RecordingClient()
    settings: dict[str, Any] = {}
    events = FBSDKAppEvents("42", client, settings, "adv")
    await events.activate_app()
    kinds = sorted(params["event"] for _, params in client.posts)
    assert kinds == ["CUSTOM_APP_EVENTS", "MOBILE_APP_INSTALL"]
    assert "LastAttributionPing42" in settings


@pytest.mark.asyncio
async def test_activate_app_swallows_network_errors():
    client = RecordingClient(fail=True)
    settings: dict[str, Any] = {}
    events = FBSDKAppEvents("42", client, settings, "adv")
    await events.activate_app()
    assert len(client.posts) == 2
    assert settings["LastInstallResponse42"] == ""