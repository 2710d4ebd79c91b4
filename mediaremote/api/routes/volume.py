"""System volume up/down (pactl, default sink)."""
from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse

from mediaremote.core import mixer
from mediaremote.core.errors import MixerError

router = APIRouter(default_response_class=PlainTextResponse)


@router.post("/volume_up")
def volume_up():
    """Raise system volume by 5%."""
    try:
        return mixer.volume_up()
    except MixerError as e:
        raise HTTPException(status_code=500, detail=e.message)


@router.post("/volume_down")
def volume_down():
    """Lower system volume by 5%."""
    try:
        return mixer.volume_down()
    except MixerError as e:
        raise HTTPException(status_code=500, detail=e.message)
