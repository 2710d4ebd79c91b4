"""Configuration: env, API bind, MPRIS identity, bus timeouts."""
import os
from pathlib import Path

from mediaremote.core.errors import ConfigError

# Base paths (project root = parent of mediaremote package)
BASE_DIR = Path(__file__).resolve().parent.parent

# Load .env from project root so MEDIA_CONTROL_API_TOKEN etc. are set
try:
    from dotenv import load_dotenv
    load_dotenv(BASE_DIR / ".env")
except ImportError:
    pass

# API
API_HOST = os.getenv("MEDIA_CONTROL_API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("MEDIA_CONTROL_API_PORT", "8080"))
API_TOKEN = os.getenv("MEDIA_CONTROL_API_TOKEN", "")

# Player selection: substring matched case-insensitively against MPRIS Identity
DEFAULT_PREFERRED_PLAYER = "chromium"
PREFERRED_PLAYER = os.getenv("MEDIA_CONTROL_PREFERRED_PLAYER", DEFAULT_PREFERRED_PLAYER).lower()

# Virtual publisher (our own MPRIS player)
VIRTUAL_PLAYER_DBUS_NAME = os.getenv("MEDIA_CONTROL_DBUS_NAME", "my_player")
VIRTUAL_PLAYER_IDENTITY = os.getenv("MEDIA_CONTROL_IDENTITY", "My Player")
DEFAULT_TITLE = "Souvlaki Space Station"
DEFAULT_ARTIST = "Slowdive"
DEFAULT_ALBUM = "Souvlaki"

# Upper bound for a single session bus call or pactl run (seconds)
BUS_TIMEOUT_SEC = float(os.getenv("MEDIA_CONTROL_BUS_TIMEOUT", "3.0"))

SEEK_OFFSET_SEC = 30
VOLUME_STEP = "5%"


def require_api_token() -> str:
    """Return the bearer secret; refuse to start without one."""
    if not API_TOKEN:
        raise ConfigError("must set MEDIA_CONTROL_API_TOKEN")
    return API_TOKEN
