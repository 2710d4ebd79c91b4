"""Virtual MPRIS player so desktop media widgets see one stable player.

Exports org.mpris.MediaPlayer2 and org.mpris.MediaPlayer2.Player on the
session bus and runs a GLib main loop on a daemon thread. Method calls from
the desktop (media keys, lock screen buttons) are passed to an event callback
and not acted upon here.
"""
import logging
import threading
from typing import Callable, Optional

import dbus
import dbus.mainloop.glib
import dbus.service
from gi.repository import GLib

from mediaremote.core.errors import PublisherError
from mediaremote.models.playback import MediaMetadata, Playback, PlaybackStatus

logger = logging.getLogger(__name__)

ROOT_INTERFACE = "org.mpris.MediaPlayer2"
PLAYER_INTERFACE = "org.mpris.MediaPlayer2.Player"
PROPERTIES_INTERFACE = dbus.PROPERTIES_IFACE
OBJECT_PATH = "/org/mpris/MediaPlayer2"
NO_TRACK = "/org/mpris/MediaPlayer2/TrackList/NoTrack"

MediaKeyCallback = Callable[[str], None]


def _to_dbus_metadata(metadata: MediaMetadata) -> dbus.Dictionary:
    md = {"mpris:trackid": dbus.ObjectPath(NO_TRACK)}
    if metadata.title is not None:
        md["xesam:title"] = dbus.String(metadata.title)
    if metadata.artist is not None:
        md["xesam:artist"] = dbus.Array([metadata.artist], signature="s")
    if metadata.album is not None:
        md["xesam:album"] = dbus.String(metadata.album)
    return dbus.Dictionary(md, signature="sv")


class MprisPlayerObject(dbus.service.Object):
    """D-Bus object at /org/mpris/MediaPlayer2. Only touched from the GLib loop thread."""

    def __init__(self, bus_name: dbus.service.BusName, identity: str, on_event: MediaKeyCallback) -> None:
        super().__init__(bus_name, OBJECT_PATH)
        self._identity = identity
        self._on_event = on_event
        self._metadata = _to_dbus_metadata(MediaMetadata())
        self._status = PlaybackStatus.STOPPED.value
        self._position_us = 0

    def _root_properties(self) -> dict:
        return {
            "CanQuit": dbus.Boolean(False),
            "CanRaise": dbus.Boolean(False),
            "HasTrackList": dbus.Boolean(False),
            "Identity": dbus.String(self._identity),
            "SupportedUriSchemes": dbus.Array([], signature="s"),
            "SupportedMimeTypes": dbus.Array([], signature="s"),
        }

    def _player_properties(self) -> dict:
        return {
            "PlaybackStatus": dbus.String(self._status),
            "Metadata": self._metadata,
            "Position": dbus.Int64(self._position_us),
            "Rate": dbus.Double(1.0),
            "MinimumRate": dbus.Double(1.0),
            "MaximumRate": dbus.Double(1.0),
            "Volume": dbus.Double(1.0),
            "CanGoNext": dbus.Boolean(True),
            "CanGoPrevious": dbus.Boolean(True),
            "CanPlay": dbus.Boolean(True),
            "CanPause": dbus.Boolean(True),
            "CanSeek": dbus.Boolean(True),
            "CanControl": dbus.Boolean(True),
        }

    def update_metadata(self, metadata: MediaMetadata) -> bool:
        self._metadata = _to_dbus_metadata(metadata)
        self.PropertiesChanged(PLAYER_INTERFACE, {"Metadata": self._metadata}, [])
        return False  # GLib.idle_add: run once

    def update_playback(self, playback: Playback) -> bool:
        self._status = playback.status.value
        self._position_us = 0 if playback.progress is None else int(playback.progress * 1_000_000)
        self.PropertiesChanged(
            PLAYER_INTERFACE, {"PlaybackStatus": dbus.String(self._status)}, []
        )
        return False

    # org.freedesktop.DBus.Properties

    @dbus.service.method(PROPERTIES_INTERFACE, in_signature="ss", out_signature="v")
    def Get(self, interface, prop):
        props = self.GetAll(interface)
        if prop not in props:
            raise dbus.exceptions.DBusException(
                f"No such property {interface}.{prop}",
                name="org.freedesktop.DBus.Error.InvalidArgs",
            )
        return props[prop]

    @dbus.service.method(PROPERTIES_INTERFACE, in_signature="s", out_signature="a{sv}")
    def GetAll(self, interface):
        if interface == ROOT_INTERFACE:
            return self._root_properties()
        if interface == PLAYER_INTERFACE:
            return self._player_properties()
        raise dbus.exceptions.DBusException(
            f"No such interface {interface}",
            name="org.freedesktop.DBus.Error.UnknownInterface",
        )

    @dbus.service.method(PROPERTIES_INTERFACE, in_signature="ssv", out_signature="")
    def Set(self, interface, prop, value):
        self._on_event(f"Set{prop}({value})")

    @dbus.service.signal(PROPERTIES_INTERFACE, signature="sa{sv}as")
    def PropertiesChanged(self, interface, changed, invalidated):
        pass

    # org.mpris.MediaPlayer2

    @dbus.service.method(ROOT_INTERFACE, in_signature="", out_signature="")
    def Raise(self):
        self._on_event("Raise")

    @dbus.service.method(ROOT_INTERFACE, in_signature="", out_signature="")
    def Quit(self):
        self._on_event("Quit")

    # org.mpris.MediaPlayer2.Player

    @dbus.service.method(PLAYER_INTERFACE, in_signature="", out_signature="")
    def Play(self):
        self._on_event("Play")

    @dbus.service.method(PLAYER_INTERFACE, in_signature="", out_signature="")
    def Pause(self):
        self._on_event("Pause")

    @dbus.service.method(PLAYER_INTERFACE, in_signature="", out_signature="")
    def PlayPause(self):
        self._on_event("Toggle")

    @dbus.service.method(PLAYER_INTERFACE, in_signature="", out_signature="")
    def Stop(self):
        self._on_event("Stop")

    @dbus.service.method(PLAYER_INTERFACE, in_signature="", out_signature="")
    def Next(self):
        self._on_event("Next")

    @dbus.service.method(PLAYER_INTERFACE, in_signature="", out_signature="")
    def Previous(self):
        self._on_event("Previous")

    @dbus.service.method(PLAYER_INTERFACE, in_signature="x", out_signature="")
    def Seek(self, offset):
        self._on_event(f"SeekBy({int(offset)}us)")

    @dbus.service.method(PLAYER_INTERFACE, in_signature="ox", out_signature="")
    def SetPosition(self, track_id, position):
        self._on_event(f"SetPosition({int(position)}us)")

    @dbus.service.method(PLAYER_INTERFACE, in_signature="s", out_signature="")
    def OpenUri(self, uri):
        self._on_event(f"OpenUri({uri})")


class MprisPublisher:
    """Owns the bus name and GLib loop of the virtual player.

    set_metadata / set_playback may be called from any thread; the update is
    queued onto the loop thread.
    """

    def __init__(self, dbus_name: str, identity: str) -> None:
        self.dbus_name = dbus_name
        self.identity = identity
        self._bus_name: Optional[dbus.service.BusName] = None
        self._object: Optional[MprisPlayerObject] = None
        self.mainloop: Optional[GLib.MainLoop] = None
        self.mainloop_thread: Optional[threading.Thread] = None

    def start(self, on_event: Optional[MediaKeyCallback] = None) -> None:
        """Claim org.mpris.MediaPlayer2.<dbus_name> and start the loop. Raises PublisherError."""
        callback = on_event or (lambda event: logger.info("media key: %s", event))
        try:
            dbus.mainloop.glib.threads_init()
            dbus.mainloop.glib.DBusGMainLoop(set_as_default=True)
            bus = dbus.SessionBus()
            self._bus_name = dbus.service.BusName(
                f"org.mpris.MediaPlayer2.{self.dbus_name}", bus, do_not_queue=True
            )
            self._object = MprisPlayerObject(self._bus_name, self.identity, callback)
        except Exception as e:
            raise PublisherError(f"failed to init MediaControls: {e}") from e

        self.mainloop = GLib.MainLoop()
        self.mainloop_thread = threading.Thread(target=self.mainloop.run, daemon=True)
        self.mainloop_thread.start()
        logger.info("Virtual player '%s' on org.mpris.MediaPlayer2.%s", self.identity, self.dbus_name)

    def _require_object(self) -> MprisPlayerObject:
        if self._object is None:
            raise PublisherError("virtual player not started")
        return self._object

    def set_metadata(self, metadata: MediaMetadata) -> None:
        GLib.idle_add(self._require_object().update_metadata, metadata)

    def set_playback(self, playback: Playback) -> None:
        GLib.idle_add(self._require_object().update_playback, playback)

    def _shutdown(self, obj: Optional[MprisPlayerObject]) -> bool:
        # Runs on the loop thread: unexport first, then let the loop end
        if obj is not None:
            obj.remove_from_connection()
        if self.mainloop is not None:
            self.mainloop.quit()
        return False

    def stop(self) -> None:
        obj, self._object = self._object, None
        GLib.idle_add(self._shutdown, obj)
        if self.mainloop_thread is not None:
            self.mainloop_thread.join(timeout=2.0)
        self._bus_name = None
        logger.info("Virtual player stopped")
