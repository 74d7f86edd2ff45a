"""
View Finder
Maps dotted view names to template files on disk
"""
import os
from pathlib import Path
from typing import Union

from laraview.defaults import DEFAULT_BLADE_EXTENSION, DEFAULT_VIEW_EXTENSION
from laraview.exceptions import ViewNotFoundException
from laraview.logging import getLogger

logger = getLogger(__name__)


class ViewFinder:
    """
    Resolves view names against a views directory

    'home.index' is looked up as views/home/index.blade.html first and
    views/home/index.html second. Nothing is cached: every lookup hits
    the filesystem.
    """

    def __init__(
        self,
        path: Union[str, Path],
        blade_extension: str = DEFAULT_BLADE_EXTENSION,
        extension: str = DEFAULT_VIEW_EXTENSION
    ):
        self.path = Path(path)
        self.blade_extension = blade_extension
        self.extension = extension

    def find(self, name: str) -> str:
        """
        Get the path to a given view on disk

        Raises:
            ViewNotFoundException: if neither the Blade nor the plain file exists
        """
        view = name.replace('.', '/')

        for candidate in self.candidates(view):
            if os.path.isfile(candidate):
                logger.debug("Resolved view", extra={'view': name, 'template_path': candidate})
                return candidate

        raise ViewNotFoundException.for_view(view)

    def candidates(self, view: str):
        """Candidate files for a slash-separated view, in lookup order"""
        base = str(self.path / view)
        return [base + self.blade_extension, base + self.extension]

    def exists(self, name: str) -> bool:
        """
        Check if a view exists

        Example:
            if finder.exists('errors.404'):
                ...
        """
        try:
            self.find(name)
        except ViewNotFoundException:
            return False
        return True

    def is_blade(self, path: Union[str, Path]) -> bool:
        """Determine if a resolved path uses the Blade dialect"""
        return str(path).endswith(self.blade_extension)
