"""
Storage - Centralized path management (Laravel-style)
Provides consistent path resolution across the application
"""

import os
from pathlib import Path
from typing import Union


class Storage:
    """
    Centralized path management helper (Laravel-style)

    Directory structure:
    /
    ├── config/             # Configuration files
    ├── resources/
    │   └── views/          # Templates
    └── storage/
        └── logs/           # Log files
    """

    _base_path: Path = None

    @classmethod
    def initialize(cls, base_path: Union[str, Path] = None):
        """
        Initialize paths (should be called during app startup)

        Args:
            base_path: Application base directory (defaults to current working directory)
        """
        if base_path is None:
            base_path = os.getcwd()

        cls._base_path = Path(base_path).resolve()

    @classmethod
    def base(cls, *paths: str) -> Path:
        """
        Get application base path

        Example:
            Storage.base('resources', 'views')  # /project/resources/views
        """
        if cls._base_path is None:
            cls.initialize()

        if paths:
            clean_paths = [p.lstrip('/') for p in paths]
            return cls._base_path.joinpath(*clean_paths)
        return cls._base_path

    @classmethod
    def resources(cls, *paths: str) -> Path:
        """Get resources path (resources/)"""
        return cls.base('resources', *paths)

    @classmethod
    def views(cls, *paths: str) -> Path:
        """Get views path (resources/views/)"""
        return cls.resources('views', *paths)

    @classmethod
    def storage(cls, *paths: str) -> Path:
        """Get storage path (storage/)"""
        return cls.base('storage', *paths)

    @classmethod
    def logs(cls, *paths: str) -> Path:
        """Get logs path (storage/logs/)"""
        return cls.storage('logs', *paths)

    @staticmethod
    def ensure_directory(path: Union[str, Path]) -> Path:
        """Create directory (and parents) if it does not exist"""
        path = Path(path)
        path.mkdir(parents=True, exist_ok=True)
        return path
