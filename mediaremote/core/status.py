"""Combine the virtual player's announced state with the controlled player's live state."""
import logging
from typing import Callable, Optional

from mediaremote.core.publisher_mirror import PublisherMirror
from mediaremote.models.status import StatusSnapshot

logger = logging.getLogger(__name__)


class StatusAggregator:
    """find_player is the same selection the commands use (Commands.find_player)."""

    def __init__(self, mirror: PublisherMirror, find_player: Callable[[], Optional[object]]) -> None:
        self._mirror = mirror
        self._find_player = find_player

    def snapshot(self) -> StatusSnapshot:
        """Best effort: a failed live query leaves other_playback empty, never raises."""
        metadata, playback = self._mirror.read()

        player = self._find_player()
        other_playback = None
        controlled_player = None
        if player is not None:
            controlled_player = player.identity
            try:
                other_playback = player.playback_status()
            except Exception as e:
                logger.warning("Reading status of %s failed: %s", player.identity, e)

        return StatusSnapshot(
            our_playback=str(playback),
            other_playback=other_playback,
            title=metadata.title,
            controlled_player=controlled_player,
        )
