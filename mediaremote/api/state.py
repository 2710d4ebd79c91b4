"""Shared application state (injected into routes)."""
import logging
from typing import Optional

from fastapi import Request

from mediaremote.config import (
    DEFAULT_ALBUM,
    DEFAULT_ARTIST,
    DEFAULT_TITLE,
    PREFERRED_PLAYER,
    VIRTUAL_PLAYER_DBUS_NAME,
    VIRTUAL_PLAYER_IDENTITY,
    require_api_token,
)
from mediaremote.core.commands import Commands
from mediaremote.core.player_registry import PlayerRegistry
from mediaremote.core.publisher_mirror import PublisherMirror
from mediaremote.core.status import StatusAggregator
from mediaremote.models.playback import MediaMetadata, Playback

logger = logging.getLogger(__name__)


def default_metadata() -> MediaMetadata:
    return MediaMetadata(title=DEFAULT_TITLE, artist=DEFAULT_ARTIST, album=DEFAULT_ALBUM)


class AppState:
    """Everything a request handler needs. One instance per app; tests build their own."""

    def __init__(
        self,
        api_token: str,
        registry,
        publisher,
        own_identity: str = VIRTUAL_PLAYER_IDENTITY,
        preferred_player: str = PREFERRED_PLAYER,
    ) -> None:
        self.api_token = api_token
        self.registry = registry
        self.publisher = publisher
        self.own_identity = own_identity
        self.preferred_player = preferred_player.lower()
        self.mirror = PublisherMirror(publisher)
        self.commands = Commands(registry, self.mirror, own_identity, self.preferred_player)
        self.status = StatusAggregator(self.mirror, self.commands.find_player)

    def start(
        self,
        metadata: Optional[MediaMetadata] = None,
        playback: Optional[Playback] = None,
    ) -> None:
        """Register the virtual player and announce the startup state. Raises PublisherError."""
        self.publisher.start(on_event=self.on_media_key)
        self.mirror.initialize(metadata or default_metadata(), playback or Playback.paused())

    def stop(self) -> None:
        self.publisher.stop()

    def on_media_key(self, event: str) -> None:
        # Hardware key presses on the virtual player are only logged
        logger.info("media key: %s", event)


def build_state() -> AppState:
    """State wired to the session bus and environment. Raises ConfigError without a token."""
    api_token = require_api_token()
    from mediaremote.core.mpris_publisher import MprisPublisher

    return AppState(
        api_token=api_token,
        registry=PlayerRegistry(),
        publisher=MprisPublisher(VIRTUAL_PLAYER_DBUS_NAME, VIRTUAL_PLAYER_IDENTITY),
    )


def get_state(request: Request) -> AppState:
    return request.app.state.remote
