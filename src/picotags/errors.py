# src/picotags/errors.py
from __future__ import annotations


class PicoTagsError(Exception):
    """Base exception for all picotags errors."""

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigError(PicoTagsError):
    """Raised when config is missing or invalid."""


class MissingSettingError(ConfigError):
    """Raised when a required configuration value is absent."""

    def __init__(self, setting_name: str, message: str | None = None) -> None:
        detail = message or f"Missing required setting: {setting_name}"
        super().__init__(
            detail,
            hint=f"Set `{setting_name}` in the config file or pass it on the command line.",
        )
        self.setting_name = setting_name


class ContentError(PicoTagsError):
    """Base error for content loading failures."""


class ContentRepositoryError(ContentError):
    """Raised when the content repository cannot complete an operation."""


class PageNotFoundError(ContentError):
    """Raised when the requested page is not part of the loaded pages."""

    def __init__(self, page_id: str) -> None:
        super().__init__(
            f"Page not found: {page_id}",
            hint="Page ids are content-relative paths without the .md suffix.",
        )
        self.page_id = page_id
