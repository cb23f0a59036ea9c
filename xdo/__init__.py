"""
xdo
Extendable data objects
"""

__version__ = "0.1.0"

from .xdo import Xdo
from .errors import XdoError, UndefinedProperty, UndefinedMethod
from .factory import XdoFactory
from .config import Config
