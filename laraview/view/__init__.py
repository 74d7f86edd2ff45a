"""
View Package
Name-to-template resolution, composers and view rendering
"""
from laraview.view.finder import ViewFinder
from laraview.view.composer import ViewComposer
from laraview.view.view import View, ViewContext, is_renderable
from laraview.view.factory import ViewFactory, TemplateCompiler
from laraview.view.response import Response

__all__ = [

    # Core
    'ViewFactory',
    'View',
    'ViewComposer',
    'ViewFinder',

    # Rendering
    'Response',
    'ViewContext',
    'TemplateCompiler',
    'is_renderable',
]
