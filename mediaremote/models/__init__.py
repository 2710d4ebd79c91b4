"""Data models for playback, metadata and status."""
from mediaremote.models.playback import MediaMetadata, Playback, PlaybackStatus
from mediaremote.models.status import StatusSnapshot

__all__ = [
    "MediaMetadata",
    "Playback",
    "PlaybackStatus",
    "StatusSnapshot",
]
