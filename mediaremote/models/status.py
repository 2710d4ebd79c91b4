"""Combined status reported by GET /status."""
from dataclasses import dataclass
from typing import Optional


@dataclass
class StatusSnapshot:
    """Our announced state next to the live state of the controlled player."""
    our_playback: str
    other_playback: Optional[str]
    title: Optional[str]
    controlled_player: Optional[str]
