"""
Domain enums for LunchTray application.
Contains all enumeration types used across the domain models.
"""

import enum


class Category(str, enum.Enum):
    """Order slot a menu item can fill"""

    ENTREE = "entree"
    SIDE = "side"
    ACCOMPANIMENT = "accompaniment"
