"""
Template
Sandboxed Jinja2 environment used to evaluate plain-dialect templates
"""
from collections.abc import Mapping
from typing import Any, Iterator, Optional

from jinja2 import BaseLoader, ChainableUndefined, TemplateRuntimeError, TemplateSyntaxError
from jinja2.runtime import LoopContext, Macro
from jinja2.sandbox import SandboxedEnvironment
from markupsafe import Markup

from laraview.exceptions import TemplateRuntimeException, TemplateSyntaxException


class Undefined(ChainableUndefined):
    """
    Value of a name or attribute that is not bound

    Falsy, iterates as empty and renders as ''. Ordering comparisons are
    False and arithmetic yields Undefined again, so guards such as
    {% if count > 0 %} work on unbound names.
    """
    __slots__ = ()

    def _absorb(self, *args: Any) -> 'Undefined':
        return self

    def _never(self, other: Any) -> bool:
        return False

    __add__ = __radd__ = __sub__ = __rsub__ = _absorb
    __mul__ = __rmul__ = __truediv__ = __rtruediv__ = _absorb
    __floordiv__ = __rfloordiv__ = __mod__ = __rmod__ = _absorb
    __pow__ = __rpow__ = __pos__ = __neg__ = _absorb

    __lt__ = __le__ = __gt__ = __ge__ = _never


class ViewSandbox(SandboxedEnvironment):
    """
    Sandbox that treats bound data as read-only

    Only the environment's own helpers (range, dict, ...), macros and loop
    helpers can be called; methods of view data cannot.
    """

    def is_safe_callable(self, obj: Any) -> bool:
        if not self._is_template_callable(obj):
            return False
        return super().is_safe_callable(obj)

    def _is_template_callable(self, obj: Any) -> bool:
        if isinstance(obj, (Macro, LoopContext)):
            return True
        if isinstance(getattr(obj, '__self__', None), LoopContext):
            return True
        return any(obj is helper for helper in self.globals.values())


def _finalize(value: Any) -> Any:
    return '' if value is None else value


def _items(value: Any) -> Iterator:
    """Key / value pairs of a mapping, index / value pairs of a sequence"""
    if value is None or isinstance(value, Undefined):
        return iter(())
    if isinstance(value, Mapping):
        return iter(value.items())
    return enumerate(value)


def create_environment(loader: Optional[BaseLoader] = None) -> ViewSandbox:
    """
    Build the sandboxed environment views are evaluated in

    Output is HTML-escaped; a single newline after a block or comment tag is
    dropped; nothing is cached.
    """
    environment = ViewSandbox(
        loader=loader,
        autoescape=True,
        undefined=Undefined,
        finalize=_finalize,
        trim_blocks=True,
        keep_trailing_newline=True,
        cache_size=0,
    )
    environment.filters['items'] = _items
    return environment


class Template:
    """
    Compiled template ready for rendering

    Example:
        template = Template.from_string("Hello {{ name|title }}!")
        template.render({'name': 'fred'})  # 'Hello Fred!'
    """

    def __init__(self, template, name: Optional[str] = None):
        self.template = template
        self.name = name

    @classmethod
    def from_string(
        cls,
        source: str,
        name: Optional[str] = None,
        environment: Optional[ViewSandbox] = None
    ) -> 'Template':
        """
        Raises:
            TemplateSyntaxException: if the source cannot be parsed
        """
        environment = environment or create_environment()
        try:
            return cls(environment.from_string(source), name)
        except TemplateSyntaxError as e:
            raise TemplateSyntaxException(e.message, line=e.lineno, template=name) from e

    def render(self, bindings: Optional[Mapping] = None) -> Markup:
        """
        Raises:
            TemplateSyntaxException: if an included template cannot be parsed
            TemplateRuntimeException: if the template breaks the sandbox
        """
        try:
            return Markup(self.template.render(dict(bindings or {})))
        except TemplateSyntaxError as e:
            raise TemplateSyntaxException(e.message, line=e.lineno, template=e.name or self.name) from e
        except TemplateRuntimeError as e:
            raise TemplateRuntimeException(str(e), template=self.name) from e
