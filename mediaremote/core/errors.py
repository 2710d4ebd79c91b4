"""Error types raised by the core and mapped to HTTP status codes by the API."""


class MediaRemoteError(Exception):
    """Base error; status_code is the HTTP status the API reports it as."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NoPlayerError(MediaRemoteError):
    status_code = 404

    def __init__(self, message: str = "no external player found") -> None:
        super().__init__(message)


class CannotSeekError(MediaRemoteError):
    status_code = 400

    def __init__(self, message: str = "player cannot seek") -> None:
        super().__init__(message)


class StatusQueryError(MediaRemoteError):
    """Live playback status was needed for a decision but could not be read."""

    def __init__(self, message: str = "couldn't read status") -> None:
        super().__init__(message)


class MixerError(MediaRemoteError):
    """pactl could not be launched or exited non-zero."""


class PublisherError(MediaRemoteError):
    """The virtual MPRIS player could not be registered or updated."""


class ConfigError(MediaRemoteError):
    pass
