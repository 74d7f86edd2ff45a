"""
Template Package
Sandboxed template evaluation and the Blade-to-plain compiler
"""
from laraview.template.template import Template, Undefined, ViewSandbox, create_environment
from laraview.template.loader import ViewLoader
from laraview.template.compiler import BladeCompiler

__all__ = [
    'Template',
    'Undefined',
    'ViewSandbox',
    'ViewLoader',
    'create_environment',
    'BladeCompiler',
]
