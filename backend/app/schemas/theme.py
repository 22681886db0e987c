"""
Pydantic schemas for the persisted colour theme.
"""

from pydantic import BaseModel
from typing import Literal


class ThemeState(BaseModel):
    """Theme preference plus the image assets that match it.

    Attributes:
        theme (str): Either "light" or "dark".
        is_light (bool): Convenience flag for toggling the body class.
        logo (str): Path of the header logo for this theme.
        icon (str): Path of the theme button icon for this theme.
    """

    theme: Literal["light", "dark"]
    is_light: bool
    logo: str
    icon: str
