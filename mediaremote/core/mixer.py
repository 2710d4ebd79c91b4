"""System output volume via pactl on the default sink."""
import logging
import shutil
import subprocess

from mediaremote.config import BUS_TIMEOUT_SEC, VOLUME_STEP
from mediaremote.core.errors import MixerError

logger = logging.getLogger(__name__)

DEFAULT_SINK = "@DEFAULT_SINK@"


def _run_pactl(*args: str, timeout: float = BUS_TIMEOUT_SEC) -> None:
    pactl = shutil.which("pactl") or "pactl"
    try:
        result = subprocess.run(
            [pactl, *args],
            capture_output=True,
            text=True,
            check=False,
            timeout=timeout,
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.error("failed to launch pactl: %s", e)
        raise MixerError(f"failed to launch pactl: {e}") from e
    if result.returncode != 0:
        logger.warning("pactl %s exited with %s: %s", " ".join(args), result.returncode, result.stderr.strip())
        raise MixerError(f"pactl exited with exit status: {result.returncode}")


def adjust_volume(delta: str, timeout: float = BUS_TIMEOUT_SEC) -> str:
    """Change default sink volume by a relative amount like '+5%'."""
    _run_pactl("set-sink-volume", DEFAULT_SINK, delta, timeout=timeout)
    return f"system volume {delta}"


def volume_up() -> str:
    return adjust_volume(f"+{VOLUME_STEP}")


def volume_down() -> str:
    return adjust_volume(f"-{VOLUME_STEP}")
