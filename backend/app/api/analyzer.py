from typing import Callable, Dict, Optional
from uuid import uuid4
from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from app.schemas.analyzer_models import AnalyzerView
from app.services.controller_service import AnalyzerController
from app.services.session_service import SessionRegistry

router = APIRouter(prefix="/analyzer", tags=["Analyzer"])

# One controller per open widget, held in memory only
controllers = SessionRegistry()


class TextRequest(BaseModel):
    """Schema for text change events."""

    text: str


class ToggleRequest(BaseModel):
    """Schema for checkbox change events."""

    enabled: bool


class CharLimitRequest(BaseModel):
    """Schema for the raw contents of the character limit field."""

    value: Optional[str] = None


class SessionResponse(BaseModel):
    """Schema returned when a widget session is opened."""

    session_id: str
    view: AnalyzerView


def get_controller(session_id: str) -> AnalyzerController:
    """Looks up the controller for a widget session.

    Args:
        session_id (str): The id returned when the session was created.

    Returns:
        AnalyzerController: The session's controller.

    Raises:
        HTTPException: If the session does not exist or has expired.
    """
    controller = controllers.get(session_id)
    if controller is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return controller


def dispatch(
    session_id: str, handler: Callable[[AnalyzerController], AnalyzerView]
) -> AnalyzerView:
    """Runs one event against a session, one event at a time per session."""
    controller = get_controller(session_id)
    with controller.lock:
        return handler(controller)


@router.post("/sessions", status_code=201)
def create_session() -> SessionResponse:
    """Opens a new widget session with the default configuration.

    Returns:
        SessionResponse: The new session id and its initial view.
    """
    session_id = uuid4().hex
    controller = AnalyzerController()
    controllers.add(session_id, controller)
    return SessionResponse(session_id=session_id, view=controller.view())


@router.get("/sessions/{session_id}")
def get_session_view(session_id: str) -> AnalyzerView:
    return dispatch(session_id, lambda c: c.view())


@router.delete("/sessions/{session_id}")
def close_session(session_id: str) -> Dict[str, str]:
    """Discards a widget session and the text it holds."""
    if controllers.pop(session_id) is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return {"message": "Closed"}


@router.post("/sessions/{session_id}/text")
def text_changed(session_id: str, request: TextRequest) -> AnalyzerView:
    """Recomputes all statistics for the new text.

    Args:
        session_id (str): The widget session.
        request (TextRequest): The full current contents of the text box.

    Returns:
        AnalyzerView: The updated view.
    """
    return dispatch(session_id, lambda c: c.on_text_changed(request.text))


@router.post("/sessions/{session_id}/exclude-spaces")
def exclude_spaces_changed(session_id: str, request: ToggleRequest) -> AnalyzerView:
    return dispatch(session_id, lambda c: c.on_exclude_spaces_changed(request.enabled))


@router.post("/sessions/{session_id}/char-limit/toggle")
def char_limit_toggled(session_id: str, request: ToggleRequest) -> AnalyzerView:
    return dispatch(session_id, lambda c: c.on_char_limit_toggled(request.enabled))


@router.post("/sessions/{session_id}/char-limit/commit")
def char_limit_committed(session_id: str, request: CharLimitRequest) -> AnalyzerView:
    """Applies the character limit field once the user leaves it.

    Invalid values are not an HTTP error: the view comes back with
    limit_field_error set and no limit applied.
    """
    return dispatch(session_id, lambda c: c.on_char_limit_committed(request.value))


@router.post("/sessions/{session_id}/window/expand")
def expand_window(session_id: str) -> AnalyzerView:
    return dispatch(session_id, lambda c: c.on_expand_window())


@router.post("/sessions/{session_id}/window/collapse")
def collapse_window(session_id: str) -> AnalyzerView:
    return dispatch(session_id, lambda c: c.on_collapse_window())
