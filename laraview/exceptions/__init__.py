"""
Exceptions Package
"""
from laraview.exceptions.custom import (
    FrameworkException,
    ViewException,
    ViewNotFoundException,
    NamedViewUndefinedException,
    UndefinedDataKeyException,
    TemplateSyntaxException,
    TemplateRuntimeException,
)

__all__ = [
    'FrameworkException',
    'ViewException',
    'ViewNotFoundException',
    'NamedViewUndefinedException',
    'UndefinedDataKeyException',
    'TemplateSyntaxException',
    'TemplateRuntimeException',
]
