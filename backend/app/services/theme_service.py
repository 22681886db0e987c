from sqlmodel import Session
from app.crud.crud import get_preference, set_preference
from app.schemas.theme import ThemeState

THEME_KEY = "theme"
LIGHT = "light"
DARK = "dark"

# Image assets swapped by the frontend when the theme changes
THEME_ASSETS = {
    LIGHT: {
        "logo": "./assets/images/logo-light-theme.svg",
        "icon": "./assets/images/icon-moon.svg",
    },
    DARK: {
        "logo": "./assets/images/logo-dark-theme.svg",
        "icon": "./assets/images/icon-sun.svg",
    },
}


def _theme_state(theme: str) -> ThemeState:
    return ThemeState(theme=theme, is_light=theme == LIGHT, **THEME_ASSETS[theme])


def load_theme(session: Session) -> ThemeState:
    """Reads the saved theme. Anything other than "light" means dark.

    Args:
        session (Session): The database session.

    Returns:
        ThemeState: The theme to apply at startup.
    """
    saved = get_preference(session, THEME_KEY)
    return _theme_state(LIGHT if saved == LIGHT else DARK)


def toggle_theme(session: Session) -> ThemeState:
    """Flips the current theme and persists the new choice.

    Args:
        session (Session): The database session.

    Returns:
        ThemeState: The theme now in effect.
    """
    current = load_theme(session)
    new_theme = DARK if current.is_light else LIGHT
    set_preference(session, THEME_KEY, new_theme)
    return _theme_state(new_theme)
