"""Playback commands: play, pause, toggle, track skip and seek."""
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse

from mediaremote.api.state import AppState, get_state
from mediaremote.core.errors import CannotSeekError, NoPlayerError, StatusQueryError

router = APIRouter(default_response_class=PlainTextResponse)


@router.post("/play")
def play(state: AppState = Depends(get_state)):
    """Announce Playing and tell the controlled player to play."""
    return state.commands.play()


@router.post("/pause")
def pause(state: AppState = Depends(get_state)):
    """Announce Paused and tell the controlled player to pause."""
    return state.commands.pause()


@router.post("/toggle")
def toggle(state: AppState = Depends(get_state)):
    """Pause if the controlled player is playing, otherwise play."""
    try:
        return state.commands.toggle()
    except StatusQueryError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.post("/next")
def next_track(state: AppState = Depends(get_state)):
    try:
        return state.commands.next()
    except NoPlayerError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.post("/previous")
def prev_track(state: AppState = Depends(get_state)):
    try:
        return state.commands.previous()
    except NoPlayerError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.post("/seek_forward")
def seek_forward(state: AppState = Depends(get_state)):
    """Jump 30 s ahead within the current track."""
    try:
        return state.commands.seek_forward()
    except (NoPlayerError, CannotSeekError) as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.post("/seek_backward")
def seek_backward(state: AppState = Depends(get_state)):
    """Jump 30 s back within the current track."""
    try:
        return state.commands.seek_backward()
    except (NoPlayerError, CannotSeekError) as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
