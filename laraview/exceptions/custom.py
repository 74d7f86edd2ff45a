"""
Custom Exception Classes
View-layer exceptions with HTTP status codes
"""
from typing import Optional


class FrameworkException(Exception):
    """Base exception for all framework exceptions"""
    status_code = 500
    message = "An error occurred"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or self.__class__.message
        self.status_code = status_code or self.__class__.status_code
        super().__init__(self.message)

    def __str__(self):
        return self.message


class ViewException(FrameworkException):
    """Base exception for view resolution and rendering errors"""
    message = "View error"


class ViewNotFoundException(ViewException):
    """
    Raised when no template file exists for a view name

    Example:
        raise ViewNotFoundException.for_view('home/index')
    """
    message = "View does not exist"

    def __init__(self, message: Optional[str] = None, view: Optional[str] = None):
        super().__init__(message)
        self.view = view

    @classmethod
    def for_view(cls, view: str) -> 'ViewNotFoundException':
        return cls(f"View [{view}] does not exist.", view=view)


class NamedViewUndefinedException(ViewException):
    """
    Raised when an alias is not defined in the composer configuration

    Example:
        raise NamedViewUndefinedException.for_name('layout')
    """
    message = "Named view is not defined"

    def __init__(self, message: Optional[str] = None, name: Optional[str] = None):
        super().__init__(message)
        self.name = name

    @classmethod
    def for_name(cls, name: str) -> 'NamedViewUndefinedException':
        return cls(f"Named view [{name}] is not defined.", name=name)


class UndefinedDataKeyException(ViewException, KeyError):
    """Raised on a strict read of a key that is not bound to the view"""
    message = "Undefined view data key"

    def __init__(self, key: str, view: Optional[str] = None):
        super().__init__(f"Key [{key}] is not bound to view [{view}].")
        self.key = key
        self.view = view


class TemplateSyntaxException(ViewException):
    """
    Raised when a template cannot be parsed

    Example:
        raise TemplateSyntaxException("Unclosed tag 'if'", line=12, template='home.index')
    """
    message = "Template syntax error"

    def __init__(self, message: Optional[str] = None, line: Optional[int] = None, template: Optional[str] = None):
        self.line = line
        self.template = template
        detail = message or self.__class__.message
        if line is not None:
            detail = f"{detail} (line {line})"
        if template:
            detail = f"{detail} in [{template}]"
        super().__init__(detail)


class TemplateRuntimeException(ViewException):
    """
    Raised when a template breaks the sandbox while rendering,
    e.g. by calling a method of view data
    """
    message = "Template runtime error"

    def __init__(self, message: Optional[str] = None, template: Optional[str] = None):
        self.template = template
        detail = message or self.__class__.message
        if template:
            detail = f"{detail} in [{template}]"
        super().__init__(detail)
