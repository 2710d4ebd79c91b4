"""Pick the one external MPRIS player we control."""
import logging
from typing import Optional, Sequence

logger = logging.getLogger(__name__)

CHROMIUM = "chromium"
# Chromium and Chrome advertise different identities for the same kind of player
CHROMIUM_FALLBACK = "chrome"


def _first_containing(handles, needle: str):
    for h in handles:
        if needle in h.identity.lower():
            return h
    return None


def select_player(handles: Sequence, own_identity: str, preferred: str) -> Optional[object]:
    """Return the handle to control, or None when no external player exists.

    Priority: preferred substring, then "chrome" when the preference is the
    "chromium" default, then whatever came first on the bus. Our own virtual
    player (exact identity match) is never a candidate.
    """
    external = [h for h in handles if h.identity != own_identity]
    if not external:
        logger.info("No external MPRIS players found")
        return None

    preferred = preferred.lower()
    player = _first_containing(external, preferred)
    if player is not None:
        logger.info("Found preferred player '%s': %s", preferred, player.identity)
        return player

    if preferred == CHROMIUM:
        player = _first_containing(external, CHROMIUM_FALLBACK)
        if player is not None:
            logger.info("Found Chrome player as Chromium fallback: %s", player.identity)
            return player

    player = external[0]
    logger.info("Using fallback player (preferred '%s' not found): %s", preferred, player.identity)
    return player
