"""
View
A template name, its bound data and the logic to render them to a string
"""
from types import MappingProxyType
from typing import Any, Dict, Iterator, Optional, TYPE_CHECKING

from markupsafe import Markup

from laraview.defaults import RESERVED_BINDINGS
from laraview.exceptions import UndefinedDataKeyException
from laraview.logging import getLogger
from laraview.template import Template

if TYPE_CHECKING:
    from laraview.view.composer import ViewComposer
    from laraview.view.factory import ViewFactory

logger = getLogger(__name__)

_MISSING = object()


def is_renderable(value: Any) -> bool:
    """Views, responses and anything else exposing render() are renderable"""
    return callable(getattr(value, 'render', None))


class ViewContext:
    """
    Read-only stand-in for a view inside its own template

    Bound as `view`; renders as the view name rather than the view itself.
    """
    __slots__ = ('view', 'path', 'data')

    def __init__(self, view: 'View'):
        self.view = view.view
        self.path = view.path
        self.data = MappingProxyType(dict(view.data))

    def __str__(self):
        return self.view

    def __repr__(self):
        return f'ViewContext({self.view!r})'


class View:
    """
    The view class is returned by ViewFactory.make() and is the primary
    class for working with individual views. It binds data to the view
    and evaluates its template.

    Example:
        view = factory.make('home.index', {'name': 'Fred'})
        view.with_('title', 'Home').partial('footer', 'partials.footer')
        html = view.render()
    """

    def __init__(
        self,
        factory: 'ViewFactory',
        composer: 'ViewComposer',
        view: str,
        data: Optional[Dict[str, Any]],
        path: str
    ):
        self.view = view
        self.data: Dict[str, Any] = dict(data or {})
        self._path = path
        self._factory = factory
        self._composer = composer

    @property
    def path(self) -> str:
        """Resolved template path"""
        return self._path

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> Markup:
        """
        Get the evaluated string content of the view

        Composers run first, then every sub-view or response in the data is
        rendered to its string value before the template is evaluated.
        """
        self._composer.compose(self)

        for key, value in self.data.items():
            if is_renderable(value):
                self.data[key] = value.render()

        template = Template.from_string(self._source(), name=self.view, environment=self._factory.environment)

        return template.render(self._bindings())

    def bladed(self) -> bool:
        """Determine if the view is using the Blade dialect"""
        return self._factory.finder.is_blade(self._path)

    def _source(self) -> str:
        return self._factory.source(self._path)

    def _bindings(self) -> Dict[str, Any]:
        bindings: Dict[str, Any] = {'view': ViewContext(self)}
        for key, value in self.data.items():
            if key in RESERVED_BINDINGS:
                logger.warning(
                    "View data key shadows a reserved binding and was skipped",
                    extra={'view': self.view, 'key': key}
                )
                continue
            bindings[key] = value
        return bindings

    def __str__(self):
        return self.render()

    def __html__(self):
        return self.render()

    # ------------------------------------------------------------------
    # Binding
    # ------------------------------------------------------------------

    def with_(self, key: str, value: Any) -> 'View':
        """
        Add a key / value pair to the view data

        Example:
            view.with_('name', 'Fred').with_('age', 42)
        """
        self.data[key] = value
        return self

    def partial(self, key: str, view: str, data: Optional[Dict[str, Any]] = None) -> 'View':
        """
        Add a view instance to the view data

        Example:
            view.partial('footer', 'partials.footer', {'year': 2024})
        """
        return self.with_(key, self._factory.make(view, data))

    # ------------------------------------------------------------------
    # Data access
    # ------------------------------------------------------------------

    def get(self, key: str, default: Any = _MISSING) -> Any:
        """
        Get an item from the view data

        Raises:
            UndefinedDataKeyException: if the key is not bound and no default is given
        """
        if key in self.data:
            return self.data[key]
        if default is _MISSING:
            raise UndefinedDataKeyException(key, self.view)
        return default

    def set(self, key: str, value: Any) -> 'View':
        return self.with_(key, value)

    def has(self, key: str) -> bool:
        return key in self.data

    def remove(self, key: str) -> 'View':
        self.data.pop(key, None)
        return self

    def __getitem__(self, key: str) -> Any:
        return self.get(key)

    def __setitem__(self, key: str, value: Any):
        self.with_(key, value)

    def __delitem__(self, key: str):
        if key not in self.data:
            raise UndefinedDataKeyException(key, self.view)
        del self.data[key]

    def __contains__(self, key: str) -> bool:
        return self.has(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __repr__(self):
        return f'View({self.view!r}, keys={list(self.data)!r})'
