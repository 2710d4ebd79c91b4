"""Combined status of the virtual player and the controlled player."""
from dataclasses import asdict
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from mediaremote.api.state import AppState, get_state

router = APIRouter()


class StatusResponse(BaseModel):
    our_playback: str
    other_playback: Optional[str] = None
    title: Optional[str] = None
    controlled_player: Optional[str] = None


@router.get("/status", response_model=StatusResponse)
def get_status(state: AppState = Depends(get_state)):
    """Return what we last announced and what the controlled player reports. Always 200."""
    return asdict(state.status.snapshot())
