from datetime import datetime, timezone
from typing import Optional
from sqlmodel import Session
from app.models.models import Preference


def get_preference(session: Session, key: str) -> Optional[str]:
    """Looks up a stored preference value.

    Args:
        session (Session): The database session.
        key (str): The preference key.

    Returns:
        Optional[str]: The stored value, or None if it was never written.
    """
    preference = session.get(Preference, key)
    if not preference:
        return None
    return preference.value


def set_preference(session: Session, key: str, value: str) -> Preference:
    """Creates or overwrites a preference. The last write wins.

    Args:
        session (Session): The database session.
        key (str): The preference key.
        value (str): The value to store.

    Returns:
        Preference: The saved row.
    """
    preference = session.get(Preference, key)
    if not preference:
        preference = Preference(key=key, value=value)
    else:
        preference.value = value
        preference.updated_at = datetime.now(timezone.utc)

    session.add(preference)
    session.commit()
    session.refresh(preference)
    return preference
