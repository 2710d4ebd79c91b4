"""MPRIS player discovery on the session bus (dbus-python)."""
import logging
from typing import Callable, List, Optional

from mediaremote.config import BUS_TIMEOUT_SEC

logger = logging.getLogger(__name__)

# Optional: dbus-python for a real desktop session
_DBUS_AVAILABLE = False
try:
    import dbus
    _DBUS_AVAILABLE = True
except ImportError:
    pass

MPRIS_PREFIX = "org.mpris.MediaPlayer2."
MPRIS_PATH = "/org/mpris/MediaPlayer2"
ROOT_INTERFACE = "org.mpris.MediaPlayer2"
PLAYER_INTERFACE = "org.mpris.MediaPlayer2.Player"
PROPERTIES_INTERFACE = "org.freedesktop.DBus.Properties"
BUS_DAEMON_NAME = "org.freedesktop.DBus"
BUS_DAEMON_PATH = "/org/freedesktop/DBus"
BUS_DAEMON_INTERFACE = "org.freedesktop.DBus"


class PlayerHandle:
    """One MPRIS player found by a single discovery pass. Do not keep across requests."""

    def __init__(self, proxy, bus_name: str, identity: str, timeout: float = BUS_TIMEOUT_SEC) -> None:
        self._proxy = proxy
        self._timeout = timeout
        self.bus_name = bus_name
        self.identity = identity

    def __repr__(self) -> str:
        return f"PlayerHandle({self.identity!r}, {self.bus_name!r})"

    # Proxies are created without introspection, so argument signatures are explicit
    def _call(self, method: str, *args, signature: str = ""):
        return getattr(self._proxy, method)(
            *args, dbus_interface=PLAYER_INTERFACE, signature=signature, timeout=self._timeout
        )

    def _get(self, prop: str):
        return self._proxy.Get(
            PLAYER_INTERFACE,
            prop,
            dbus_interface=PROPERTIES_INTERFACE,
            signature="ss",
            timeout=self._timeout,
        )

    def play(self) -> None:
        self._call("Play")

    def pause(self) -> None:
        self._call("Pause")

    def next(self) -> None:
        self._call("Next")

    def previous(self) -> None:
        self._call("Previous")

    def seek(self, offset_sec: float) -> None:
        """Seek relative to the current position; negative offsets go backwards."""
        self._call("Seek", int(offset_sec * 1_000_000), signature="x")

    def playback_status(self) -> str:
        """Live PlaybackStatus: 'Playing', 'Paused' or 'Stopped'."""
        return str(self._get("PlaybackStatus"))

    def can_seek(self) -> bool:
        return bool(self._get("CanSeek"))


class PlayerRegistry:
    """Lists MPRIS players currently on the session bus."""

    def __init__(
        self,
        bus_factory: Optional[Callable[[], object]] = None,
        timeout: float = BUS_TIMEOUT_SEC,
    ) -> None:
        self._bus_factory = bus_factory
        self._timeout = timeout

    def _bus(self):
        if self._bus_factory is not None:
            return self._bus_factory()
        if not _DBUS_AVAILABLE:
            return None
        return dbus.SessionBus()

    def discover(self) -> List[PlayerHandle]:
        """Return players in bus order. An unreachable bus means no players, not an error."""
        try:
            bus = self._bus()
            if bus is None:
                logger.debug("dbus-python not installed, no players")
                return []
            all_names = bus.call_blocking(
                BUS_DAEMON_NAME,
                BUS_DAEMON_PATH,
                BUS_DAEMON_INTERFACE,
                "ListNames",
                "",
                (),
                timeout=self._timeout,
            )
            names = [str(n) for n in all_names if str(n).startswith(MPRIS_PREFIX)]
        except Exception as e:
            logger.warning("Player discovery failed: %s", e)
            return []

        handles = []
        for name in names:
            try:
                proxy = bus.get_object(name, MPRIS_PATH, introspect=False)
                identity = proxy.Get(
                    ROOT_INTERFACE,
                    "Identity",
                    dbus_interface=PROPERTIES_INTERFACE,
                    signature="ss",
                    timeout=self._timeout,
                )
            except Exception as e:
                logger.debug("Skipping %s: %s", name, e)
                continue
            handles.append(PlayerHandle(proxy, name, str(identity), timeout=self._timeout))
        return handles
