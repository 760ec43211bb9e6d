import logging
from dataclasses import dataclass

import tweepy.asynchronous

from app.config import settings

log = logging.getLogger("ferias.publisher")


@dataclass(frozen=True)
class PostResult:
    id: str
    text: str


class XPublisher:
    """Posts status text through the X API v2 with user-context (OAuth 1.0a) credentials."""

    def __init__(self, client: tweepy.asynchronous.AsyncClient | None = None):
        self._client = client

    def _make_client(self) -> tweepy.asynchronous.AsyncClient:
        return tweepy.asynchronous.AsyncClient(
            consumer_key=settings.consumer_key,
            consumer_secret=settings.consumer_secret,
            access_token=settings.access_token,
            access_token_secret=settings.access_token_secret,
        )

    async def post(self, text: str) -> PostResult:
        """Publish one post. Auth, rate-limit and network errors propagate to the caller."""
        if self._client is None:
            self._client = self._make_client()
        log.info("Posting %d-character status", len(text))
        response = await self._client.create_tweet(text=text)
        data = response.data
        return PostResult(id=str(data["id"]), text=data["text"])
