"""
View Factory
Entry point for creating View instances
"""
from pathlib import Path
from typing import Any, Dict, Optional, Protocol, Union

from laraview.defaults import DEFAULT_BLADE_EXTENSION, DEFAULT_TEMPLATE_ENCODING, DEFAULT_VIEW_EXTENSION
from laraview.exceptions import NamedViewUndefinedException
from laraview.logging import getLogger
from laraview.template import BladeCompiler, ViewLoader, create_environment
from laraview.view.composer import ViewComposer
from laraview.view.finder import ViewFinder
from laraview.view.view import View

logger = getLogger(__name__)


class TemplateCompiler(Protocol):
    """Turns a Blade-dialect file into plain-dialect template source"""

    def compile(self, path: Union[str, Path]) -> str:
        ...


class ViewFactory:
    """
    The view factory is responsible for the instantiation of views. It is
    meant to be built once at application start and shared afterwards.

    Example:
        factory = ViewFactory(ViewComposer(composers), 'resources/views')

        view = factory.make('home.index', {'name': 'Fred'})
        view = factory.of('layout', {'name': 'Fred'})
    """

    def __init__(
        self,
        composer: ViewComposer,
        path: Union[str, Path],
        compiler: Optional[TemplateCompiler] = None,
        finder: Optional[ViewFinder] = None
    ):
        self.composer = composer
        self.path = Path(path)
        self.compiler = compiler or BladeCompiler()
        self.finder = finder or ViewFinder(self.path)
        self.environment = create_environment(ViewLoader(self))

    @classmethod
    def from_config(cls) -> 'ViewFactory':
        """
        Build a factory from config/view.py

        Reads view.PATH (or the VIEW_PATH environment variable),
        view.BLADE_EXTENSION, view.EXTENSION and view.COMPOSERS.
        """
        from laraview.support import Config, EnvHelper, Storage

        path = Config.get('view.PATH') or EnvHelper.get('VIEW_PATH') or Storage.views()
        finder = ViewFinder(
            path,
            blade_extension=Config.get('view.BLADE_EXTENSION', DEFAULT_BLADE_EXTENSION),
            extension=Config.get('view.EXTENSION', DEFAULT_VIEW_EXTENSION)
        )
        composer = ViewComposer(Config.get('view.COMPOSERS', {}))

        logger.debug("View factory configured", extra={'views_path': str(path)})
        return cls(composer, path, finder=finder)

    def make(self, view: str, data: Optional[Dict[str, Any]] = None) -> View:
        """
        Create a new view instance

        Dots or slashes may be used to reference views within sub-directories.

        Example:
            view = factory.make('home.index')
            view = factory.make('home.index', {'name': 'Fred'})

        Raises:
            ViewNotFoundException: if no template exists for the view
        """
        return View(self, self.composer, view, data, self.finder.find(view))

    def of(self, name: str, data: Optional[Dict[str, Any]] = None) -> View:
        """
        Create a new view instance from a view alias

        Aliases are defined in the composer configuration.

        Example:
            view = factory.of('layout', {'name': 'Fred'})

        Raises:
            NamedViewUndefinedException: if no composer entry carries the alias
        """
        view = self.composer.name(name)
        if view is None:
            raise NamedViewUndefinedException.for_name(name)

        logger.debug("Resolved named view", extra={'alias': name, 'view': view})
        return self.make(view, data)

    def source(self, path: str) -> str:
        """
        Get the template source for a resolved path

        Blade files are passed through the compiler; plain files are read as-is.
        """
        if self.finder.is_blade(path):
            return self.compiler.compile(path)
        return Path(path).read_text(encoding=DEFAULT_TEMPLATE_ENCODING)

    def exists(self, view: str) -> bool:
        """Determine if a view exists on disk"""
        return self.finder.exists(view)
