from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.core.database import get_session
from app.schemas.theme import ThemeState
from app.services.theme_service import load_theme, toggle_theme

router = APIRouter(prefix="/theme", tags=["Theme"])


@router.get("")
def get_theme(session: Session = Depends(get_session)) -> ThemeState:
    """Returns the saved theme so the page can apply it on load.

    Args:
        session (Session): The database session.

    Returns:
        ThemeState: The saved theme, dark when nothing was saved.
    """
    return load_theme(session)


@router.post("/toggle")
def post_toggle_theme(session: Session = Depends(get_session)) -> ThemeState:
    """Switches between light and dark and saves the choice.

    Args:
        session (Session): The database session.

    Returns:
        ThemeState: The theme now in effect.
    """
    return toggle_theme(session)
