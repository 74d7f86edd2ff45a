"""
Laraview
Laravel-style views for Sanic applications
"""
from laraview.view import ViewFactory, View, ViewComposer, ViewFinder, Response
from laraview.exceptions import (
    ViewNotFoundException,
    NamedViewUndefinedException,
    UndefinedDataKeyException,
    TemplateSyntaxException,
    TemplateRuntimeException,
)

__version__ = '1.0.0'

__all__ = [
    'ViewFactory',
    'View',
    'ViewComposer',
    'ViewFinder',
    'Response',
    'ViewNotFoundException',
    'NamedViewUndefinedException',
    'UndefinedDataKeyException',
    'TemplateSyntaxException',
    'TemplateRuntimeException',
]
