"""
Basic utilities for xdo
"""

import types as types

# =============================================================================
# string formatting
# =============================================================================

def _fmt( text : str, args = None, kwargs = None ) -> str:
    """ Utility function. See fmt() """
    if text.find('%') == -1:
        return text
    if not args is None and len(args) > 0:
        assert kwargs is None or len(kwargs) == 0, "Cannot specify both 'args' and 'kwargs'"
        return text % tuple(args)
    if not kwargs is None and len(kwargs) > 0:
        return text % kwargs
    return text

def fmt(text : str,*args,**kwargs) -> str:
    """
    String formatting made easy
        text - pattern
    Examples
        fmt("The is one = %ld", 1)
        fmt("The is text = %s", 1.3)
        fmt("Using keywords: one=%(one)d, two=%(two)d", two=2, one=1)
    """
    return _fmt(text,args,kwargs)

def fmt_list( lst : list, none : str = "-", link : str = "and" ) -> str:
    """
    Returns a nicely formatted list of string with commas, e.g. for [1,2,3] it returns '1, 2 and 3'

    Parameters
    ----------
        lst  : list. The list() operator is applied to it, so it will resolve dictionaries and generators.
        none : string used when list was empty
        link : string used to connect the last item.
    """
    if lst is None:
        return str(none)
    lst  = list(lst)
    if len(lst) == 0:
        return none
    if len(lst) == 1:
        return str(lst[0])
    link = str(link) if not link is None else ""
    link = (" " + link + " ") if len(link)>0 else ", "
    return ", ".join( str(k) for k in lst[:-1] ) + link + str(lst[-1])

# =============================================================================
# functional programming
# =============================================================================

def bind( operation, instance ):
    """
    Binds 'operation' to 'instance' such that 'instance' is passed as first argument.
    For example
        def mult_x(self, a):
            return self.get("x") * a
        f = bind(mult_x, xdo)
        f(2)                 # mult_x(xdo, 2)

    A method already bound to another object is re-pointed to 'instance'.
    Any other callable, e.g. an object implementing __call__ or a functools.partial, is bound as is.
    """
    if isinstance(operation,types.MethodType):
        return types.MethodType(operation.__func__,instance)
    if not callable(operation):
        raise TypeError("Cannot bind object of type '%s': it is not callable" % type(operation).__name__)
    return types.MethodType(operation,instance)
