"""Shared application configuration package."""

from .settings import (
    Settings,
    clear_settings_cache,
    find_env_file,
    get_settings,
    project_root,
)

__all__ = [
    "Settings",
    "clear_settings_cache",
    "find_env_file",
    "get_settings",
    "project_root",
]
