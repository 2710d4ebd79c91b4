import unittest
from unittest import mock

from mediaremote.core.errors import PublisherError
from mediaremote.models.playback import MediaMetadata, Playback

try:
    import dbus
    import dbus.service
    from mediaremote.core import mpris_publisher
except ImportError:
    dbus = None
    mpris_publisher = None

METADATA = MediaMetadata(title="Souvlaki Space Station", artist="Slowdive", album="Souvlaki")


def _player_object(events):
    # Not exported: the bus-facing base constructor is skipped
    with mock.patch.object(dbus.service.Object, "__init__", return_value=None):
        obj = mpris_publisher.MprisPlayerObject(None, "My Player", events.append)
    obj.PropertiesChanged = mock.Mock()
    return obj


@unittest.skipIf(mpris_publisher is None, "dbus-python/PyGObject not installed")
class MetadataConversionTests(unittest.TestCase):
    def test_full_metadata(self):
        md = mpris_publisher._to_dbus_metadata(METADATA)

        self.assertEqual(md.signature, "sv")
        self.assertIsInstance(md["mpris:trackid"], dbus.ObjectPath)
        self.assertEqual(md["mpris:trackid"], mpris_publisher.NO_TRACK)
        self.assertEqual(md["xesam:title"], "Souvlaki Space Station")
        self.assertIsInstance(md["xesam:artist"], dbus.Array)
        self.assertEqual(md["xesam:artist"].signature, "s")
        self.assertEqual(list(md["xesam:artist"]), ["Slowdive"])
        self.assertEqual(md["xesam:album"], "Souvlaki")

    def test_missing_fields_are_left_out(self):
        md = mpris_publisher._to_dbus_metadata(MediaMetadata(title="Only a title"))
        self.assertEqual(set(md), {"mpris:trackid", "xesam:title"})


@unittest.skipIf(mpris_publisher is None, "dbus-python/PyGObject not installed")
class PlayerObjectTests(unittest.TestCase):
    def setUp(self):
        self.events = []
        self.obj = _player_object(self.events)

    def test_root_properties(self):
        props = self.obj.GetAll(mpris_publisher.ROOT_INTERFACE)
        self.assertEqual(props["Identity"], "My Player")
        self.assertFalse(props["CanRaise"])
        self.assertFalse(props["HasTrackList"])

    def test_player_properties(self):
        props = self.obj.GetAll(mpris_publisher.PLAYER_INTERFACE)
        self.assertEqual(props["PlaybackStatus"], "Stopped")
        self.assertEqual(props["Position"], 0)
        self.assertTrue(props["CanSeek"])
        self.assertTrue(props["CanControl"])
        self.assertIn("mpris:trackid", props["Metadata"])

    def test_get_single_property(self):
        self.assertEqual(self.obj.Get(mpris_publisher.ROOT_INTERFACE, "Identity"), "My Player")

    def test_get_unknown_property(self):
        with self.assertRaises(dbus.exceptions.DBusException) as ctx:
            self.obj.Get(mpris_publisher.PLAYER_INTERFACE, "Shuffle")
        self.assertEqual(ctx.exception.get_dbus_name(), "org.freedesktop.DBus.Error.InvalidArgs")

    def test_get_all_unknown_interface(self):
        with self.assertRaises(dbus.exceptions.DBusException) as ctx:
            self.obj.GetAll("org.mpris.MediaPlayer2.TrackList")
        self.assertEqual(ctx.exception.get_dbus_name(), "org.freedesktop.DBus.Error.UnknownInterface")

    def test_methods_become_events(self):
        self.obj.Play()
        self.obj.Pause()
        self.obj.PlayPause()
        self.obj.Next()
        self.obj.Previous()
        self.obj.Seek(dbus.Int64(-5_000_000))
        self.obj.Set(mpris_publisher.PLAYER_INTERFACE, "Volume", 0.5)

        self.assertEqual(
            self.events,
            ["Play", "Pause", "Toggle", "Next", "Previous", "SeekBy(-5000000us)", "SetVolume(0.5)"],
        )

    def test_update_metadata_signals_change(self):
        self.obj.update_metadata(METADATA)

        props = self.obj.GetAll(mpris_publisher.PLAYER_INTERFACE)
        self.assertEqual(props["Metadata"]["xesam:title"], "Souvlaki Space Station")
        interface, changed, invalidated = self.obj.PropertiesChanged.call_args[0]
        self.assertEqual(interface, mpris_publisher.PLAYER_INTERFACE)
        self.assertIn("Metadata", changed)

    def test_update_playback_position(self):
        self.assertFalse(self.obj.update_playback(Playback.playing(12.5)))
        props = self.obj.GetAll(mpris_publisher.PLAYER_INTERFACE)
        self.assertEqual(props["PlaybackStatus"], "Playing")
        self.assertEqual(props["Position"], 12_500_000)
        changed = self.obj.PropertiesChanged.call_args[0][1]
        self.assertEqual(changed, {"PlaybackStatus": "Playing"})

    def test_update_playback_without_progress_resets_position(self):
        self.obj.update_playback(Playback.playing(12.5))
        self.obj.update_playback(Playback.paused())

        props = self.obj.GetAll(mpris_publisher.PLAYER_INTERFACE)
        self.assertEqual(props["PlaybackStatus"], "Paused")
        self.assertEqual(props["Position"], 0)


@unittest.skipIf(mpris_publisher is None, "dbus-python/PyGObject not installed")
class PublisherTests(unittest.TestCase):
    def test_updates_before_start_fail(self):
        publisher = mpris_publisher.MprisPublisher("my_player", "My Player")
        with self.assertRaises(PublisherError):
            publisher.set_playback(Playback.playing())
        with self.assertRaises(PublisherError):
            publisher.set_metadata(METADATA)

    def test_stop_unexports_on_loop_thread(self):
        publisher = mpris_publisher.MprisPublisher("my_player", "My Player")
        obj = mock.Mock()
        publisher._object = obj
        publisher.mainloop = mock.Mock()
        scheduled = []

        def idle_add(callback, *args):
            scheduled.append(callback)
            return callback(*args)

        with mock.patch.object(mpris_publisher, "GLib") as glib:
            glib.idle_add.side_effect = idle_add
            publisher.stop()

        self.assertEqual(scheduled, [publisher._shutdown])
        obj.remove_from_connection.assert_called_once_with()
        publisher.mainloop.quit.assert_called_once_with()
        with self.assertRaises(PublisherError):
            publisher.set_playback(Playback.paused())


if __name__ == "__main__":
    unittest.main()
