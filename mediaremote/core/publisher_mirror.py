"""Local record of what the virtual player last announced."""
import logging
import threading
from typing import Tuple

from mediaremote.core.errors import PublisherError
from mediaremote.models.playback import MediaMetadata, Playback

logger = logging.getLogger(__name__)


class PublisherMirror:
    """Metadata and playback of the virtual player behind one lock.

    The mirror is the source of truth for /status. Forwarding to the
    publisher is best effort after startup: a failed broadcast is logged and
    the committed value stays.
    """

    def __init__(self, publisher) -> None:
        self._publisher = publisher
        self._lock = threading.Lock()
        self._metadata = MediaMetadata()
        self._playback = Playback.stopped()

    def initialize(self, metadata: MediaMetadata, playback: Playback) -> None:
        """Set the startup state and broadcast it. Raises PublisherError on failure."""
        with self._lock:
            self._metadata = metadata
            self._playback = playback
            try:
                self._publisher.set_metadata(metadata)
                self._publisher.set_playback(playback)
            except PublisherError:
                raise
            except Exception as e:
                raise PublisherError(f"failed to publish initial state: {e}") from e
        logger.info("Virtual player initialized: %s, %s", metadata.title, playback)

    def set_playback(self, playback: Playback) -> Playback:
        with self._lock:
            self._playback = playback
            try:
                self._publisher.set_playback(playback)
            except Exception as e:
                logger.warning("Broadcasting playback %s failed: %s", playback, e)
        return playback

    def get_playback(self) -> Playback:
        with self._lock:
            return self._playback

    def get_metadata(self) -> MediaMetadata:
        with self._lock:
            return self._metadata

    def read(self) -> Tuple[MediaMetadata, Playback]:
        """Metadata and playback from the same moment."""
        with self._lock:
            return self._metadata, self._playback
