"""
xdo
Extendable data object: protected, aliased read access to a fixed set of properties plus instance-bound custom methods
"""

from collections.abc import Mapping
from .util import bind
from .errors import UndefinedProperty, UndefinedMethod
from .logger import Logger
_log = Logger(__file__)

class Xdo(object):
    """
    Extendable data object.
    Wraps a fixed dictionary of properties such that each value is passed through a 'protect' function when read,
    for example an HTML escaping function when handing database rows to a template:

        import html
        x = Xdo( html.escape, { 'title' : '<b>Hi</b>' } )
        x.get('title')          --> '&lt;b&gt;Hi&lt;/b&gt;'
        x['title']              --> same
        x.get_raw_data()        --> { 'title' : '<b>Hi</b>' }

    Aliases rename how a property is addressed without touching the data:

        x.set_aliases( { 'headline' : 'title' } )
        x['headline']           --> '&lt;b&gt;Hi&lt;/b&gt;'

    Custom methods are bound to the object, i.e. they receive it as first argument:

        def shout(self, suffix):
            return self.get('title').upper() + suffix
        x.add_method( 'shout', shout )
        x.invoke( 'shout', '!' )  --> '&LT;B&GT;HI&LT;/B&GT;!'
        x.shout( '!' )            --> same

    Member notation only ever dispatches to custom methods; properties are read with get() or [].

    Thread safety
    -------------
    set_aliases() and add_method() are not synchronized. Reads may be performed concurrently as long as
    no thread modifies aliases or methods at the same time; callers are responsible for any locking.
    """

    def __init__(self, protect, properties : Mapping, aliases : Mapping = None ):
        """
        Parameters
        ----------
            protect : callable
                Function of one value returning one value. Applied to every property read with get().
            properties : Mapping
                The properties. Stored by reference and never modified.
            aliases : Mapping, optional
                Maps public names to property names.
        """
        self._protect    = protect
        self._properties = properties
        self._aliases    = aliases if not aliases is None else {}
        self._methods    = {}

    # Aliases
    # -------

    def set_aliases(self, aliases : Mapping ):
        """
        Replaces all aliases with 'aliases'.
        Alias targets are not validated; a missing target is reported when the alias is read.
        """
        self._aliases = aliases if not aliases is None else {}
        _log.debug( "Aliases set: %s", dict(self._aliases) )

    @property
    def aliases(self) -> Mapping:
        """ Returns the current alias mapping """
        return self._aliases

    def resolve(self, name : str ) -> str:
        """ Returns the property name 'name' refers to """
        return self._aliases.get(name, name)

    # Read
    # ----

    def get(self, name : str ):
        """
        Returns the protected value of property 'name'.
        'name' is first resolved through the aliases.

        Raises
        ------
            UndefinedProperty if the resolved name is not a property. 'protect' is not called in this case.
        """
        name = self.resolve(name)
        if not name in self._properties:
            raise _log.logged( UndefinedProperty(name) )
        return self._protect( self._properties[name] )

    def __getitem__(self, name : str ):
        """ Equivalent to self.get(name), except that a missing property is not logged """
        name = self.resolve(name)
        if not name in self._properties:
            raise UndefinedProperty(name)  # not logged: mappings are probed with [], e.g. by ChainMap
        return self._protect( self._properties[name] )

    def __contains__(self, name : str ) -> bool:
        """ Whether 'name', after alias resolution, is a property """
        return self.resolve(name) in self._properties

    def get_raw_data(self) -> Mapping:
        """
        Returns the original properties, without applying aliases or 'protect'.
        The caller is responsible for any sanitization.
        """
        return self._properties

    # Custom methods
    # --------------

    def add_method(self, name : str, operation ):
        """
        Registers 'operation' as custom method 'name'.
        'operation' is bound to this object, i.e. it is called as operation(self, *args).
        An existing method of the same name is replaced.
        """
        bound = bind(operation, self)
        _log.debug_if( name in self._methods, "Replacing custom method '%s'", name )
        self._methods[name] = bound

    def invoke(self, name : str, *args, **kwargs ):
        """
        Calls custom method 'name' with the arguments provided and returns its result.

        Raises
        ------
            UndefinedMethod if no method 'name' was registered.
        """
        method = self._methods.get(name, None)
        if method is None:
            raise _log.logged( UndefinedMethod(name) )
        return method(*args, **kwargs)

    def __getattr__(self, name : str ):
        """ Returns custom method 'name'. Properties are never returned here; use get() """
        if name[:1] == "_":
            raise AttributeError(name)   # private members are not custom methods
        method = self._methods.get(name, None)
        if method is None:
            raise UndefinedMethod(name)  # not logged: hasattr() probes land here
        return method

    def __copy__(self):
        """ Returns a shallow copy whose custom methods are bound to the copy """
        other = type(self)( self._protect, self._properties, self._aliases )
        for name, method in self._methods.items():
            other._methods[name] = bind(method, other)
        return other

    def __repr__(self) -> str:
        return "Xdo(" + ", ".join( str(k) for k in self._properties ) + ")"
