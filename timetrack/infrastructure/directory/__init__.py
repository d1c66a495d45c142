"""
Task and user directory adapters.
"""

import logging
from functools import lru_cache
from typing import Union

from timetrack.config import get_settings
from .http_directory import HttpDirectory, DirectoryUnavailableError
from .memory_directory import InMemoryDirectory


logger = logging.getLogger(__name__)


@lru_cache()
def get_directory() -> Union[HttpDirectory, InMemoryDirectory]:
    """Directory configured for this process."""
    settings = get_settings()
    if settings.directory_service_url:
        logger.info(f"Using directory service at {settings.directory_service_url}")
        return HttpDirectory(
            settings.directory_service_url,
            timeout=settings.collaborator_timeout_seconds,
        )
    if settings.directory_seed_path:
        return InMemoryDirectory.from_file(settings.directory_seed_path)

    logger.warning("No directory service configured; using an empty in-memory directory")
    return InMemoryDirectory()


__all__ = [
    "HttpDirectory",
    "InMemoryDirectory",
    "DirectoryUnavailableError",
    "get_directory",
]
