"""Playback commands: update the virtual player, then the selected external player."""
import logging
from typing import Callable, Optional

from mediaremote.config import SEEK_OFFSET_SEC
from mediaremote.core.errors import CannotSeekError, NoPlayerError, StatusQueryError
from mediaremote.core.player_selector import select_player
from mediaremote.core.publisher_mirror import PublisherMirror
from mediaremote.models.playback import Playback, PlaybackStatus

logger = logging.getLogger(__name__)


def best_effort(description: str, action: Callable[[], object]) -> bool:
    """Run one external player call whose failure must not change the response.

    Returns True if the call went through. Failures are logged and dropped
    (no retry).
    """
    try:
        action()
        return True
    except Exception as e:
        logger.warning("%s failed: %s", description, e)
        return False


class Commands:
    """Command handlers shared by the HTTP routes.

    The player is selected anew for every command since players come and go
    between requests. The mirror lock is never held while talking to a player.
    """

    def __init__(
        self,
        registry,
        mirror: PublisherMirror,
        own_identity: str,
        preferred_player: str,
        seek_offset_sec: float = SEEK_OFFSET_SEC,
    ) -> None:
        self._registry = registry
        self._mirror = mirror
        self._own_identity = own_identity
        self._preferred_player = preferred_player
        self._seek_offset_sec = seek_offset_sec

    def find_player(self) -> Optional[object]:
        return select_player(self._registry.discover(), self._own_identity, self._preferred_player)

    def _require_player(self):
        player = self.find_player()
        if player is None:
            raise NoPlayerError()
        return player

    def play(self) -> str:
        self._mirror.set_playback(Playback.playing())
        player = self.find_player()
        if player is not None:
            best_effort(f"Play on {player.identity}", player.play)
        return "playing"

    def pause(self) -> str:
        self._mirror.set_playback(Playback.paused())
        player = self.find_player()
        if player is not None:
            best_effort(f"Pause on {player.identity}", player.pause)
        return "paused"

    def toggle(self) -> str:
        """Pause if the external player is playing, otherwise play.

        Without an external player we can only announce Playing ourselves.
        Raises StatusQueryError if the player's status cannot be read.
        """
        player = self.find_player()
        if player is None:
            self._mirror.set_playback(Playback.playing())
            return "playing (no external player)"

        try:
            status = player.playback_status()
        except Exception as e:
            logger.error("Failed to get playback status of %s: %s", player.identity, e)
            raise StatusQueryError() from e

        if status == PlaybackStatus.PLAYING.value:
            self._mirror.set_playback(Playback.paused())
            best_effort(f"Pause on {player.identity}", player.pause)
            return "paused"
        self._mirror.set_playback(Playback.playing())
        best_effort(f"Play on {player.identity}", player.play)
        return "playing"

    def next(self) -> str:
        player = self._require_player()
        best_effort(f"Next on {player.identity}", player.next)
        return "skipped to next track"

    def previous(self) -> str:
        player = self._require_player()
        best_effort(f"Previous on {player.identity}", player.previous)
        return "skipped to previous track"

    def _seek(self, offset_sec: float) -> None:
        player = self._require_player()
        try:
            can_seek = player.can_seek()
        except Exception as e:
            logger.warning("CanSeek on %s failed: %s", player.identity, e)
            can_seek = False
        if not can_seek:
            raise CannotSeekError()
        best_effort(f"Seek {offset_sec:+g}s on {player.identity}", lambda: player.seek(offset_sec))

    def seek_forward(self) -> str:
        self._seek(self._seek_offset_sec)
        return f"seeked forward {self._seek_offset_sec:g}s"

    def seek_backward(self) -> str:
        self._seek(-self._seek_offset_sec)
        return f"seeked backward {self._seek_offset_sec:g}s"
