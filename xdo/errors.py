"""
errors
Exceptions raised by extendable data objects
"""

from .logger import Logger

class XdoError(Logger.LogException):
    """
    Base class for all xdo errors.
    Both derived errors signal a programming or configuration mistake; they are never recovered internally.
    """

    def __init__(self, name : str, text : str):
        Logger.LogException.__init__(self, text)
        self.name = name

class UndefinedProperty(XdoError, KeyError):
    """
    Raised when a property is read which is not defined.
    'name' is the name after alias resolution.
    """

    def __init__(self, name : str):
        XdoError.__init__(self, name, 'Property "%s" is not defined.' % name)

class UndefinedMethod(XdoError, AttributeError):
    """
    Raised when a custom method is called which was never registered.
    'name' is the requested method name.
    """

    def __init__(self, name : str):
        XdoError.__init__(self, name, 'Custom method "%s" is not defined.' % name)
