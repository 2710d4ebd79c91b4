"""In-memory stand-ins for the session bus collaborators."""
from typing import List, Optional


class FakePlayer:
    """Records calls like an MPRIS PlayerHandle would receive them."""

    def __init__(
        self,
        identity: str,
        status: str = "Paused",
        can_seek: Optional[bool] = True,
        fail_commands: bool = False,
        fail_status: bool = False,
    ) -> None:
        self.identity = identity
        self.status = status
        self._can_seek = can_seek  # None: capability query fails
        self.fail_commands = fail_commands
        self.fail_status = fail_status
        self.calls: List[tuple] = []

    def _command(self, name: str, *args) -> None:
        self.calls.append((name, *args))
        if self.fail_commands:
            raise RuntimeError(f"{name} rejected")

    def play(self) -> None:
        self._command("play")
        self.status = "Playing"

    def pause(self) -> None:
        self._command("pause")
        self.status = "Paused"

    def next(self) -> None:
        self._command("next")

    def previous(self) -> None:
        self._command("previous")

    def seek(self, offset_sec: float) -> None:
        self._command("seek", offset_sec)

    def playback_status(self) -> str:
        if self.fail_status:
            raise RuntimeError("org.freedesktop.DBus.Error.NoReply")
        return self.status

    def can_seek(self) -> bool:
        if self._can_seek is None:
            raise RuntimeError("org.freedesktop.DBus.Error.NoReply")
        return self._can_seek


class FakeRegistry:
    def __init__(self, players=None) -> None:
        self.players = list(players or [])
        self.discover_count = 0

    def discover(self):
        self.discover_count += 1
        return list(self.players)


class FakePublisher:
    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.started = False
        self.stopped = False
        self.on_event = None
        self.metadata = []
        self.playback = []

    def start(self, on_event=None) -> None:
        self.started = True
        self.on_event = on_event

    def stop(self) -> None:
        self.stopped = True

    def set_metadata(self, metadata) -> None:
        if self.fail:
            raise RuntimeError("bus gone")
        self.metadata.append(metadata)

    def set_playback(self, playback) -> None:
        if self.fail:
            raise RuntimeError("bus gone")
        self.playback.append(playback)
