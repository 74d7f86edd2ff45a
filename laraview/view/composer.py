"""
View Composer
Looks up named views and calls composer callbacks before a view renders
"""
from collections.abc import Mapping
from typing import Any, Callable, Dict, Optional, TYPE_CHECKING

from laraview.defaults import SHARED_COMPOSER_KEY
from laraview.logging import getLogger

if TYPE_CHECKING:
    from laraview.view.view import View

logger = getLogger(__name__)

ComposerCallback = Callable[['View'], Any]


class ViewComposer:
    """
    Registry of view composers

    The configuration maps a view key to one of:
        - an alias string:              'home.index': 'home'
        - a composer callable:          'home.index': compose_home
        - a mapping with both:          'home.index': {'name': 'home', 'composer': compose_home}

    The reserved 'shared' key holds a callable run for every view.

    Example:
        composer = ViewComposer({
            'shared': lambda view: view.with_('app_name', 'Blog'),
            'layouts.default': {'name': 'layout', 'composer': add_menu},
        })
        composer.name('layout')  # 'layouts.default'
    """

    def __init__(self, composers: Optional[Mapping] = None):
        # Insertion order decides which key wins an alias lookup
        self.composers: Dict[str, Any] = dict(composers or {})

    def name(self, name: str) -> Optional[str]:
        """
        Find the key for a view by alias

        Returns:
            The first configured key whose alias matches, or None
        """
        for key, value in self.composers.items():
            if value == name:
                return key
            if isinstance(value, Mapping) and value.get('name') == name:
                return key
        return None

    def compose(self, view: 'View') -> None:
        """
        Call the composers for the view instance

        The shared composer always runs first; then the first callable found
        in the view's own entry runs. Anything else in the entry is ignored.
        """
        shared = self.composers.get(SHARED_COMPOSER_KEY)
        if callable(shared):
            logger.debug("Running shared composer", extra={'view': view.view})
            shared(view)

        entry = self.composers.get(view.view)
        if entry is None:
            return

        for value in self._values(entry):
            if callable(value):
                logger.debug("Running view composer", extra={'view': view.view})
                value(view)
                return

    @staticmethod
    def _values(entry: Any):
        if isinstance(entry, Mapping):
            return list(entry.values())
        if isinstance(entry, (list, tuple)):
            return list(entry)
        return [entry]

    def has(self, key: str) -> bool:
        """Check if a composer entry exists for a view key"""
        return key in self.composers
