"""Core: player discovery and selection, virtual player mirror, commands, status."""
from mediaremote.core.player_selector import select_player
from mediaremote.core.publisher_mirror import PublisherMirror

__all__ = ["PublisherMirror", "select_player"]
