"""
Repository package - read-only data access for the menu.
"""

from repositories.menu_repository import MenuCatalog

__all__ = ["MenuCatalog"]
