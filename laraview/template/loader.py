"""
View Loader
Resolves {% include %} names through the view factory
"""
from typing import Callable, Tuple, TYPE_CHECKING

from jinja2 import BaseLoader

from laraview.logging import getLogger

if TYPE_CHECKING:
    from laraview.view.factory import ViewFactory

logger = getLogger(__name__)


class ViewLoader(BaseLoader):
    """
    Loads included templates by view name

    Names are resolved by the factory's finder, so dotted names and both
    dialects work in includes: Blade files go through the factory's
    compiler first.

    Raises:
        ViewNotFoundException: if no template exists for the included name
    """

    def __init__(self, factory: 'ViewFactory'):
        self.factory = factory

    def get_source(self, environment, template: str) -> Tuple[str, str, Callable[[], bool]]:
        path = self.factory.finder.find(template)
        logger.debug("Including view", extra={'view': template, 'template_path': path})
        return self.factory.source(path), path, lambda: False
