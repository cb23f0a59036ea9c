"""
factory
Assembles extendable data objects from rows of data
"""

from collections.abc import Mapping
import pandas as pd
from .xdo import Xdo
from .config import Config
from .util import fmt_list
from .logger import Logger
_log = Logger(__file__)

def _callable( f ):
    """ 'cast' for Config which only accepts callables """
    if not callable(f):
        raise TypeError("'%s' is not callable" % type(f).__name__)
    return f

class XdoFactory(object):
    """
    Builds Xdo objects which share the same protection function, aliases and custom methods.
    Typical use is wrapping the rows returned by a data access layer before handing them to view code:

        factory = XdoFactory( html.escape, aliases={ 'headline' : 'title' } )
        factory.add_method( 'teaser', lambda self, n: self.get('title')[:n] )

        row  = factory( { 'title' : '<b>Hi</b>' } )
        rows = list( factory.records( cursor ) )
        rows = list( factory.frame( df ) )

    Each object receives its own copy of the aliases, so calling set_aliases() on one object does not
    affect others. Changes to the factory only affect objects built afterwards.
    """

    def __init__(self, protect, aliases : Mapping = None, methods : Mapping = None ):
        """
        Parameters
        ----------
            protect : callable
                Protection function passed to each Xdo
            aliases : Mapping, optional
                Aliases passed to each Xdo
            methods : Mapping, optional
                Dictionary of name -> operation registered with each Xdo
        """
        _log.verify( callable(protect), "'protect' must be callable. Found type %s", type(protect).__name__ )
        self._protect = protect
        self._aliases = dict(aliases) if not aliases is None else {}
        self._methods = {}
        for name, operation in ( methods.items() if not methods is None else [] ):
            self.add_method(name, operation)

    @staticmethod
    def from_config( config : Config ):
        """
        Creates a factory from a Config with keys
            protect : callable, required
            aliases : dict, optional
            methods : either a dict, or a child config of name -> callable, optional
        All keys of 'config' must be used; see Config.done()
        """
        protect = config("protect", cast=_callable, help="Protection function applied to every property read")
        aliases = config("aliases", {}, dict, help="Maps public names to property names")
        if "methods" in config:
            methods = config("methods", {}, dict, help="Custom methods")
        else:
            child   = config.methods
            methods = { name : child(name, cast=_callable, help="Custom method") for name in list(child) }
        config.done()
        return XdoFactory( protect, aliases=aliases, methods=methods )

    # Setup
    # -----

    def set_aliases(self, aliases : Mapping ):
        """ Replaces the aliases used for objects built from now on """
        self._aliases = dict(aliases) if not aliases is None else {}

    def add_method(self, name : str, operation ):
        """ Registers 'operation' as custom method 'name' for objects built from now on """
        _log.verify( callable(operation), "Custom method '%s' must be callable. Found type %s", name, type(operation).__name__ )
        self._methods[name] = operation

    # Build
    # -----

    def __call__(self, properties : Mapping ) -> Xdo:
        """ Returns an Xdo wrapping 'properties' """
        xdo = Xdo( self._protect, properties, dict(self._aliases) )
        for name, operation in self._methods.items():
            xdo.add_method(name, operation)
        _log.debug( "Built object with properties %s and methods %s", fmt_list(properties), fmt_list(self._methods) )
        return xdo

    def records(self, rows ):
        """ Generator which returns an Xdo for each mapping in 'rows' """
        for row in rows:
            yield self(row)

    def frame(self, df : pd.DataFrame, index : bool = False ):
        """
        Generator which returns an Xdo for each row of the pandas DataFrame 'df'.
        If 'index' is True, the index is added as property(ies) named after the index name(s), or 'index' if unnamed.
        """
        if index:
            df = df.reset_index()
        _log.debug( "Building %ld objects from frame with columns %s", len(df), list(df.columns) )
        return self.records( df.to_dict(orient="records") )
