"""Playback state and track metadata of the virtual player."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class PlaybackStatus(str, Enum):
    """MPRIS PlaybackStatus values."""
    PLAYING = "Playing"
    PAUSED = "Paused"
    STOPPED = "Stopped"


@dataclass(frozen=True)
class Playback:
    """What the virtual player last announced."""
    status: PlaybackStatus
    progress: Optional[float] = None  # seconds into the track, if known

    @classmethod
    def playing(cls, progress: Optional[float] = None) -> "Playback":
        return cls(PlaybackStatus.PLAYING, progress)

    @classmethod
    def paused(cls, progress: Optional[float] = None) -> "Playback":
        return cls(PlaybackStatus.PAUSED, progress)

    @classmethod
    def stopped(cls) -> "Playback":
        return cls(PlaybackStatus.STOPPED)

    @property
    def is_playing(self) -> bool:
        return self.status is PlaybackStatus.PLAYING

    def __str__(self) -> str:
        # Stopped never carries a position
        if self.progress is None or self.status is PlaybackStatus.STOPPED:
            return self.status.value
        return f"{self.status.value} ({self.progress:.1f}s)"


@dataclass(frozen=True)
class MediaMetadata:
    """Track metadata broadcast by the virtual player."""
    title: Optional[str] = None
    artist: Optional[str] = None
    album: Optional[str] = None
