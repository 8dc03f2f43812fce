"""
Theme Service

Light/dark preference, persisted under the "theme" storage key.
"""
import logging

from ims_frontend.services.storage import FileStorage

logger = logging.getLogger(__name__)

THEME_KEY = "theme"
THEMES = ("light", "dark")


class ThemeService:

    def __init__(self, storage: FileStorage, default: str = "light"):
        self._storage = storage
        self._default = default if default in THEMES else "light"

    @property
    def theme(self) -> str:
        stored = self._storage.get_item(THEME_KEY)
        return stored if stored in THEMES else self._default

    @property
    def is_dark_mode(self) -> bool:
        return self.theme == "dark"

    def toggle(self) -> str:
        theme = "light" if self.is_dark_mode else "dark"
        self._storage.set_item(THEME_KEY, theme)
        logger.debug(f"Theme switched to {theme}")
        return theme
