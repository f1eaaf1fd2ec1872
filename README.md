# fbgraphsdk

This package provides small building blocks for talking to a Graph-style HTTP API from Python.

It has no runtime dependencies. It does not perform HTTP requests itself. You pass in an object with async `get`, `post` and `delete` methods, as described by `fbgraphsdk.http_manager.HttpClient`. Each method returns the response body as text, or `None` when the request failed.

## Installation

```
pip install .
pip install ".[test]"    # also installs pytest and pytest-asyncio
```

## Modules

### `fbgraphsdk.result`

`FBError(code, error_type, message)` is a frozen dataclass.

`FBResult(obj)` holds either a value or an `FBError`, depending on what it is given:

- `succeeded` is true when a non-`None` value is held.
- `object` returns the held value.
- `error_info` returns the error.

### `fbgraphsdk.permissions`

`FBPermissions(values)` is an ordered tuple of permission names, available as `values`.

- `FBPermissions.from_string("a,b")` splits the string on commas.
- `str()` joins the names with commas.
- `FBPermissions.difference(minuend, subtrahend)` removes one occurrence of each name in `subtrahend` from `minuend`.

Instances compare equal when their names are the same and in the same order.

### `fbgraphsdk.feed_request`

`FBFeedRequest.from_feed_dialog_response(uri)` reads the `post_id` query parameter from a redirect URI. If the parameter appears more than once, the last value wins.

It returns an `FBFeedRequest`, whose ID is available as `post_id`. If the parameter is missing or empty, it returns `None`.

### `fbgraphsdk.media`

`FBMediaObject` holds `content_type`, `file_name` and `value`. Its `with_value(data)` method stores a copy of `data` as bytes and returns the object itself.

`FBMediaStream(file_name, stream)` is a frozen pair of a file name and a stream object.

### `fbgraphsdk.hls_color`

`Color(r, g, b, a=255)` is an 8-bit RGBA colour. It raises `ValueError` if a channel is outside 0..255.

`HlsColor(hue, luminosity, saturation, alpha)` holds the hue in degrees and the other three values in the range 0..1.

- `HlsColor.from_rgb(color)` builds an `HlsColor` from a `Color`.
- `to_rgb()` converts back, truncating each channel to a byte.

### `fbgraphsdk.scale_converter`

`ScaleConverter().convert(value, float, "0.5", language)` returns `value` multiplied by the number at the start of the parameter string.

It raises errors in these cases:

- `ValueError` if the target type is not `float`.
- `ValueError` if the parameter does not start with a number.
- `TypeError` if the value or the parameter has the wrong type.

`convert_back` always raises `NotImplementedError`.

### `fbgraphsdk.graph_uri`

`GraphUriBuilder(path, api_major_version=2, api_minor_version=1)` turns a relative or absolute path into a full Graph API URI:

- If the path has no scheme and host, it is prefixed with `https://graph.facebook.com/`.
- Repeated slashes in the path are collapsed.
- A leading `vX.Y` segment in the path is used as the API version. Otherwise `vMAJOR.MINOR` is inserted, unless the major version is 0.
- Query parameters already in the path are kept.

`add_query_param(name, value)` sets a parameter, replacing any earlier value.

`make_uri()` returns the URI as a string, with names and values percent-encoded. If a `request_host` parameter is present, its value replaces the host.

### `fbgraphsdk.http_manager`

`HttpClient` is the abstract interface. It declares `get`, `post`, `delete` and `parameters_to_query_string`.

`HttpManager(client)` forwards every call to its client:

- `HttpManager.instance()` returns one shared manager.
- `set_http_client(client)` replaces the client.

The shared manager starts without a client. Calls raise `RuntimeError` until `set_http_client` has been called.

### `fbgraphsdk.paginated_array`

`FBPaging.from_json(text)` reads a `"paging"` object. It provides `next`, `previous`, and the `before` and `after` cursors. It returns `None` if the text is not a JSON object.

`FBPaginatedArray(request, parameters, object_factory, http_client)` walks a paged result. If no client is given, it uses `HttpManager.instance()`.

- `await first()`, `await next()` and `await previous()` each fetch a page.
- `next()` and `previous()` return an error `FBResult` when there is no such page.
- A failed request (`None` body) gives an error `FBResult`.
- A Graph `"error"` object gives an error `FBResult`.
- A body that is not valid JSON gives `None`.
- A response with neither `"data"` nor `"error"` raises `ValueError`.
- A factory that returns a falsy object raises `ValueError`.

The factory receives each item of `"data"` as JSON text. It defaults to `json.loads`.

After a fetch, these members describe the state:

- `current` holds the objects of the last page.
- `current_data_string` holds the raw `"data"` JSON of the last page.
- `has_current`, `has_next` and `has_previous` report what is available.

Reading `current` or `current_data_string` before any page has been loaded raises `ValueError`.

`object_array_from_web_response(text, factory)` builds objects from a response's `"data"` array. It returns `None` when there is no such array.

### `fbgraphsdk.app_events`

`get_activate_app_json()` returns the activate-app event array as JSON text.

`FBSDKAppEvents(app_id, http_client, settings, advertising_id, campaign_id_provider)` posts events to `<app_id>/activities`:

- `await log_install_event()` posts `MOBILE_APP_INSTALL` with the campaign ID. It returns `""` on any error.
- `await log_activate_event()` posts `CUSTOM_APP_EVENTS`.
- `await publish_install()` logs the install only when `settings` holds no `LastAttributionPing<app_id>` entry. After logging, it stores the ping time and the response.
- `await activate_app()` raises `ValueError` without an app ID. Otherwise it runs both events and ignores their failures.

`settings` is any mutable mapping and defaults to a plain dict. The campaign ID provider may be sync or async.

## Example

```python
from fbgraphsdk.graph_uri import GraphUriBuilder
from fbgraphsdk.permissions import FBPermissions

builder = GraphUriBuilder("me/friends", 2, 8)
builder.add_query_param("limit", "10")
print(builder.make_uri())
# https://graph.facebook.com/v2.8/me/friends?limit=10

wanted = FBPermissions.from_string("public_profile,email,user_friends")
granted = FBPermissions.from_string("public_profile")
print(FBPermissions.difference(wanted, granted))
# email,user_friends
```

```python
import json

from fbgraphsdk.paginated_array import FBPaginatedArray

async def list_friends(client):
    pages = FBPaginatedArray("me/friends", None, json.loads, client)
    result = await pages.first()
    while result is not None and result.succeeded:
        for friend in result.object:
            print(friend["name"])
        if not pages.has_next:
            break
        result = await pages.next()
```

## What this package does not do

The package has no HTTP transport of its own: you always supply the client.

It has no login or session handling and does not store access tokens. It has no dialogs or UI controls. It provides no command-line program.

Persistence for app events is limited to the mapping you pass as `settings`.