"""
config
Usage-tracking configuration object used to assemble extendable data objects
"""

from collections import OrderedDict
from sortedcontainers import SortedDict
from .util import fmt_list
from .logger import Logger
_log = Logger(__file__)

class _ID(object):
    pass

no_default = _ID()    # creates a unique object which can be used to detect if a default value was provided

class Config(OrderedDict):
    """
    A simple Config class.

    Write
        Set data as usual, or with member notation:

            config = Config()
            config['protect'] = html.escape
            config.aliases    = { 'headline' : 'title' }
            config.methods.shout = shout          # creates child config 'methods'

    Read
        def read_config( config ):
            protect = config("protect", help="Protection function applied on read")
            aliases = config("aliases", {}, dict, help="Property aliases")
            methods = config.methods
            config.done()                         # raises an error if a key was provided but not read

    Call usage_report() after the config has been read to get a summary of all values requested from it.
    """

    def __init__(self, *args, config_name : str = None, **kwargs):
        """
        Parameters
        ----------
            *args : list
                List of dictionaries to update() with, iteratively.
            config_name : str, optional
                Name of the configuration used in error messages. Default is 'config'
            **kwargs : dict
                Used to initialize the config, e.g. Config(a=1, b=2)
        """
        OrderedDict.__init__(self)
        self._done           = set()
        self._name           = config_name if not config_name is None else "config"
        self._children       = OrderedDict()
        self._recorder       = SortedDict()
        for k in args:
            if not k is None:
                self.update(k)
        self.update(kwargs)

    @property
    def config_name(self) -> str:
        """ Returns the fully qualified name of this config """
        return self._name

    # Read
    # ----

    def __call__(self, key : str, default = no_default, cast = None, help : str = None ):
        """
        Reads 'key' from the config. If not found, return 'default' if specified.

            config("key")                      - returns the value for 'key' or if not found raises a KeyError
            config("key", 1)                   - returns the value for 'key' or if not found returns 1
            config("key", 1, int)              - if 'key' is found, cast the result with int().
            config("key", 1, int, "A number")  - also records a help text for usage_report()

        Parameters
        ----------
            key : str
                Keyword to read
            default : optional
                Default value. If not provided, a KeyError is raised if 'key' could not be found.
            cast : callable, optional
                Applied to the value read, e.g. int or dict. Exceptions raised by 'cast' are reported as config errors.
            help : str, optional
                Help text recorded for usage_report()
        """
        _log.verify( isinstance(key, str), "'key' must be a string. Found type %s", type(key).__name__ )
        if not key in self:
            if default is no_default:
                raise KeyError(key, "Error in config '%s': key '%s' not found" % (self._name, key))
            value = default
        else:
            value = OrderedDict.get(self,key)

        if not cast is None:
            try:
                value = cast(value)
            except (TypeError, ValueError):
                _log.throw( "Error in config '%s': value for key '%s' of type %s cannot be cast with %s", self._name, key, type(value).__name__, getattr(cast,"__name__",str(cast)) )

        self._done.add(key)
        self._recorder[self.record_key(key)] = SortedDict( value=value,
                                                           help=str(help) if not help is None else "",
                                                           help_default="" if default is no_default else str(default) )
        return value

    def get_raw(self, key : str, default = no_default ):
        """ Reads 'key' without marking it as read and without recording its use """
        if not key in self:
            if default is no_default:
                raise KeyError(key)
            return default
        return OrderedDict.get(self,key)

    def __getattr__(self, key : str):
        """
        Returns a child config with the name 'key', creating it on the fly if need be.
        Values are read with config(key)
        """
        if key[:1] == "_":
            raise AttributeError(key)
        if key in self._children:
            return self._children[key]
        _log.verify( key.find(" ") == -1, "Error in config '%s': sub-config names cannot contain spaces. Found %s", self._name, key )
        config = Config(config_name=self._name + "." + key)
        config._recorder    = self._recorder
        self._children[key] = config
        return config

    # Write
    # -----

    def __setattr__(self, key, value):
        """ Identical to self[key] = value. Keys with leading underscores become classic members """
        if key[:1] == "_":
            OrderedDict.__setattr__(self, key, value)
        else:
            self[key] = value

    def __setitem__(self, key, value):
        """ Assigns 'value'. Config values become children of this config """
        if isinstance(value, Config):
            value._name     = self._name + "." + key
            value._recorder = self._recorder
            self._children[key] = value
        else:
            OrderedDict.__setitem__(self, key, value)

    def update(self, other=None, **kwargs):
        """ Adds all elements of 'other' and 'kwargs' via __setitem__ """
        if not other is None:
            for k, v in other.items():
                self[k] = v
        for k, v in kwargs.items():
            self[k] = v

    # Usage
    # -----

    def done(self, include_children : bool = True ):
        """
        Checks that all keys of this config (and its children) have been read.
        Raises an exception naming the unread keys otherwise, which catches typos in configurations.
        """
        rest = [ k for k in self if not k in self._done ]
        _log.verify( len(rest) == 0, "Error closing config '%s': the following config arguments were not read: %s", self._name, fmt_list(rest) )
        if include_children:
            for c in self._children.values():
                c.done(include_children=include_children)

    def mark_done(self, include_children : bool = True ):
        """ Mark all members as being read """
        self._done.update( self )
        if include_children:
            for c in self._children.values():
                c.mark_done(include_children=include_children)

    @property
    def not_done(self) -> dict:
        """ Returns a dictionary of keys which were not read yet """
        h = { key : False for key in self if not key in self._done }
        for k, c in self._children.items():
            ch = c.not_done
            if len(ch) > 0:
                h[k] = ch
        return h

    def record_key(self, key : str) -> str:
        """ Returns the fully qualified 'record' key for a relative 'key', e.g. config.methods['shout'] """
        return self._name + "['" + key + "']"

    def usage_report(self, with_values : bool = True, with_help : bool = True ) -> str:
        """ Returns a human readable report of all values read from this config and its children """
        report = ""
        for key, record in self._recorder.items():
            line = key + " = " + str(record['value']) if with_values else key
            if with_help and record['help'] != "":
                line += " # " + record['help']
                if record['help_default'] != "":
                    line += "; default: " + record['help_default']
            report += line + "\n"
        return report
