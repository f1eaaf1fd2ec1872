"""Response of a successful use of the feed dialog."""

from __future__ import annotations

from urllib.parse import parse_qsl, urlsplit


class FBFeedRequest:
    """Holds the ID of a post created through the feed dialog."""

    __slots__ = ("_post_id",)

    def __init__(self, post_id: str) -> None:
        self._post_id = post_id

    @property
    def post_id(self) -> str:
        """ID of the post, usable to update or delete it later."""
        return self._post_id

    @classmethod
    def from_feed_dialog_response(cls, response: str) -> FBFeedRequest | None:
        """Build from the dialog's redirect URI, or return None if it has no post_id."""
        query = urlsplit(response).query
        post_id = None
        for name, value in parse_qsl(query, keep_blank_values=True):
            if name == "post_id":
                post_id = value
        return cls(post_id) if post_id else None

    def __repr__(self) -> str:
        return f"FBFeedRequest(post_id={self._post_id!r})"