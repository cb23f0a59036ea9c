"""
Basic log file logic
"""

from .util import _fmt
import sys as sys
import logging as logging
import traceback as traceback

class Logger(object):
    """
    Simple utility object to decorate loggers, plus:
        - debug() and error() also accept named argument formatting ie "The error is %(message)s" instead of positional %
        - added Exceptn function which logs an error before returning an exception.
          It also make sure an exception is only tracked once.
    The point of this class is to be able to write
        from .logger import Logger
        _log = Logger(__file__)
        ...
        _log.verify( some_condition_we_want_met, "Error: cannot find %s", message)
    and it will keep a log of that exception.

    Exceptions independent of logging level

        verify( cond, text, *args, **kwargs )
            If cond is not met, raise an exception with util.fmt( text, *args, **kwargs )

        throw( text, *args, **kwargs )
            Raise an exception with fmt( text, *args, **kwargs )

        logged( exception )
            Logs an existing exception object as an error and returns it, i.e.
                raise _log.logged( UndefinedProperty(name) )

    Unconditional logging

        debug( text, *args, **kwargs )
        error( text, *args, **kwargs )

    Conditional logging functions

        debug_if( cond, text, *args, **kwargs )
    """

    CRITICAL = logging.CRITICAL
    ERROR = logging.ERROR
    WARNING = logging.WARNING
    INFO = logging.INFO
    DEBUG = logging.DEBUG
    NOTSET = logging.NOTSET

    def __init__(self,topic : str):
        assert topic !="", "Logger cannot be empty"
        setupAppLogging()   # ensure system is ready
        i = topic.rfind('/')
        if i == -1:
            i = topic.rfind('\\')
        if i != -1 and i<len(topic)-1:
            topic = topic[i+1:]
        if topic[-3:] == ".py":
            topic = topic[:-3]
        self.logger = logging.getLogger("xdo." + topic)

    # Exception support
    # -----------------

    class LogException(Exception):
        """ Base class for exceptions which were logged by a Logger """

        def __init__(self,text : str):
            Exception.__init__(self,text)

        def __str__(self) -> str:
            return self.args[0] if len(self.args) > 0 else ""

    def Exceptn(self, text : str, *args, **kwargs ):
        """
        Returns an exception object with 'text' % kwargs and stores an 'error' message
            If an exception is present, it will be printed, too.
            If the base logger logs 'debug' information, the call stack will be printed as well

        Usage:
            raise _log.Exceptn("Something happened")
        """
        text = _fmt(text,args,kwargs)
        (typ, val, trc) = sys.exc_info()

        # are we already throwing our own exception?
        if not typ is None and issubclass(typ, Logger.LogException):
            return val               # --> already logged --> keep raising the exception but don't do anything

        # new exception?
        if typ is None:
            self.error( text )
            return Logger.LogException(text)

        # another exception is being thrown.
        # we re-cast this as one of our own.
        if text[-1:] == ".":
            text = text + " " + str(val)
        else:
            text = text + ". " + str(val)

        # in debug, add trace information
        if self.logger.getEffectiveLevel() <= logging.DEBUG:
            text = text.rstrip()
            txt = traceback.format_exception(typ,val,trc,limit = 100)
            for t in txt:
                text += "\n  " + t[:-1]
        self.error( text )
        return Logger.LogException(text)

    def logged(self, exception : Exception ) -> Exception:
        """
        Writes 'exception' as an 'error' and returns it.
        Usage:
            raise _log.logged( UndefinedMethod(name) )
        """
        self.error( str(exception) )
        return exception

    # logging() replacemets
    # ---------------------

    def debug(self, text, *args, **kwargs ):
        """ Reports debug information with new style formatting """
        if self.logger.getEffectiveLevel() <= logging.DEBUG and len(text) > 0:
            self.logger.debug(_fmt(text,args,kwargs))

    def error(self, text, *args, **kwargs ):
        """ Reports an error with new style formatting """
        if self.logger.getEffectiveLevel() <= logging.ERROR and len(text) > 0:
            self.logger.error(_fmt(text,args,kwargs))

    def throw( self, text, *args, **kwargs ):
        """ Raise an exception """
        raise self.Exceptn(text,*args,**kwargs)

    # run time utilities with validity check
    # --------------------------------------

    def verify(self, cond, text, *args, **kwargs ):
        """
        Verifies 'cond'. Raises an exception if 'cond' is not met with the specified text.
        Usage:
            _log.verify( i>0, "i must be positive, found %d", i)
        """
        if not cond:
            self.throw(text,*args,**kwargs)

    def debug_if(self, cond, text, *args, **kwargs ):
        """ If 'cond' is true, writes debug 'info' """
        if cond:
            self.debug(text,*args,**kwargs)

    # interface into logging
    # ----------------------

    def setLevel(self, level):
        """ logging.setLevel """
        self.logger.setLevel(level)

    def getEffectiveLevel(self):
        """ logging.getEffectiveLevel """
        return self.logger.getEffectiveLevel()

# ====================================================================================================
# setupAppLogging
# ---------------
# Defines logging at stdout and, optionally, file level for all 'xdo' loggers.
# ====================================================================================================

GLOBAL_LOG_DATA = "xdo.logger"

xdoLog = logging.getLogger("xdo")      # package level logger
logFileName = None

def setupAppLogging( force = False, logFile : str = None, levelPrint = logging.ERROR, levelFile = logging.WARNING):
    """
    Package wide logging control: attaches a stdout handler and optionally a log file to the 'xdo' logger.
    This function only has an effect the first time it is called, unless 'force' is True.
    """
    global logFileName

    data = globals().get(GLOBAL_LOG_DATA,None)
    if not data is None and not force:
        return data
    if not data is None:
        for handler in data.values():
            if isinstance(handler, logging.Handler):
                xdoLog.removeHandler(handler)
                handler.close()

    fmtt   = logging.Formatter(fmt="%(asctime)s %(levelname)-10s: %(message)s" )
    stdOut = logging.StreamHandler(sys.stdout)
    stdOut.setFormatter(fmtt)
    stdOut.setLevel(levelPrint)
    xdoLog.addHandler(stdOut)
    xdoLog.setLevel(min(levelPrint,levelFile) if not logFile is None else levelPrint)
    data = {'strm':stdOut}

    if not logFile is None:
        fileE = logging.FileHandler(logFile)
        fileE.setFormatter(fmtt)
        fileE.setLevel(levelFile)
        xdoLog.addHandler(fileE)
        data['file'] = fileE
        data['logFileName'] = logFile

    globals()[GLOBAL_LOG_DATA] = data
    logFileName = data.get('logFileName', None)
    return data
