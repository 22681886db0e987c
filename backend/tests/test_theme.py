from fastapi.testclient import TestClient
from sqlmodel import Session
from app.crud.crud import get_preference, set_preference
from app.services.theme_service import load_theme, toggle_theme


def test_default_theme_is_dark(client: TestClient):
    """Test that a fresh database starts in the dark theme."""
    response = client.get("/theme")
    assert response.status_code == 200
    assert response.json() == {
        "theme": "dark",
        "is_light": False,
        "logo": "./assets/images/logo-dark-theme.svg",
        "icon": "./assets/images/icon-sun.svg",
    }


def test_toggle_theme_persists(client: TestClient, session: Session):
    """Test that each toggle flips the theme and saves it."""
    response = client.post("/theme/toggle")
    assert response.status_code == 200
    data = response.json()
    assert data["theme"] == "light"
    assert data["logo"] == "./assets/images/logo-light-theme.svg"
    assert data["icon"] == "./assets/images/icon-moon.svg"
    assert get_preference(session, "theme") == "light"

    # Reload reads the saved value
    assert client.get("/theme").json()["theme"] == "light"

    data = client.post("/theme/toggle").json()
    assert data["theme"] == "dark"
    assert get_preference(session, "theme") == "dark"


def test_saved_light_theme_is_loaded(client: TestClient, light_session: Session):
    response = client.get("/theme")
    assert response.json()["theme"] == "light"
    assert response.json()["is_light"] is True


def test_unknown_saved_value_falls_back_to_dark(session: Session):
    """Test that anything other than "light" is treated as dark."""
    set_preference(session, "theme", "sepia")
    assert load_theme(session).theme == "dark"

    # Toggling from the fallback switches to light
    assert toggle_theme(session).theme == "light"
    assert get_preference(session, "theme") == "light"


def test_preference_last_write_wins(session: Session):
    assert get_preference(session, "theme") is None

    set_preference(session, "theme", "light")
    first = set_preference(session, "theme", "dark")
    assert first.value == "dark"
    assert get_preference(session, "theme") == "dark"
