"""
Framework Support Classes
"""

from laraview.support.storage import Storage
from laraview.support.env_helper import EnvHelper
from laraview.support.config import Config

__all__ = [
    'Storage',
    'EnvHelper',
    'Config',
]
