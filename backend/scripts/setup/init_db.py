import os
import sys

# Add parent directory to path to allow importing from backend modules
sys.path.append(os.path.join(os.path.dirname(__file__), "..", ".."))

from sqlmodel import Session
from app.core.database import engine, create_db_and_tables
from app.crud.crud import get_preference, set_preference
from app.services.theme_service import THEME_KEY, DARK


def init_db():
    """Creates the tables and stores the default theme if none is saved."""
    print("Creating tables...")
    create_db_and_tables()

    with Session(engine) as session:
        saved = get_preference(session, THEME_KEY)
        if saved:
            print(f"Theme already set to '{saved}'. Skipping seed.")
            return

        set_preference(session, THEME_KEY, DARK)
        print(f"Theme set to '{DARK}'.")


if __name__ == "__main__":
    init_db()
