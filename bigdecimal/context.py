#
# An implementation of arbitrary-precision decimal arithmetic
#
# (c) Neil Booth 2007-2021.  All rights reserved.
#

import logging
import threading

__all__ = ('Context', 'DefaultContext', 'get_context', 'set_context', 'local_context',
           'PowersOfTen', 'powers_of_ten', 'power_of_ten', 'power_of_five',
           'ROUND_CEILING', 'ROUND_FLOOR', 'ROUND_DOWN', 'ROUND_UP',
           'ROUND_HALF_EVEN', 'ROUND_HALF_UP', 'ROUND_HALF_DOWN', 'ROUND_UNNECESSARY',
           'ROUNDING_MODES', 'DEFAULT_PRECISION')

logger = logging.getLogger(__name__)


# Rounding modes
ROUND_CEILING     = 'ROUND_CEILING'       # Towards +infinity
ROUND_FLOOR       = 'ROUND_FLOOR'         # Towards -infinity
ROUND_DOWN        = 'ROUND_DOWN'          # Towards zero
ROUND_UP          = 'ROUND_UP'            # Away from zero
ROUND_HALF_EVEN   = 'ROUND_HALF_EVEN'     # To nearest with ties towards even
ROUND_HALF_DOWN   = 'ROUND_HALF_DOWN'     # To nearest with ties towards zero
ROUND_HALF_UP     = 'ROUND_HALF_UP'       # To nearest with ties away from zero
ROUND_UNNECESSARY = 'ROUND_UNNECESSARY'   # The result must be exact

ROUNDING_MODES = (ROUND_UP, ROUND_DOWN, ROUND_CEILING, ROUND_FLOOR,
                  ROUND_HALF_UP, ROUND_HALF_DOWN, ROUND_HALF_EVEN, ROUND_UNNECESSARY)

# More or less arbitrary, but 64 significant digits is plenty for most purposes
DEFAULT_PRECISION = 64


class Context:
    '''The configuration consulted by operations not given an explicit precision or
    rounding mode.  Carries the default precision (significant digits), the default
    rounding mode, the exponent delimiter used for scientific notation and a list of
    listeners.

    A listener is a callable with signature

        def listener(precision, rounding):

    It is called synchronously, in order of registration, whenever the precision or the
    rounding mode is set to a value different from the current one.

    Contexts do no locking.  If several threads change one, the caller must serialize
    them.
    '''

    __slots__ = ('_precision', '_rounding', '_exponent_delimiter', 'listeners')

    def __init__(self, *, precision=DEFAULT_PRECISION, rounding=ROUND_HALF_EVEN,
                 exponent_delimiter='e'):
        self._precision = check_precision(precision)
        self._rounding = check_rounding(rounding)
        self._exponent_delimiter = check_exponent_delimiter(exponent_delimiter)
        self.listeners = []

    @property
    def precision(self):
        return self._precision

    @precision.setter
    def precision(self, value):
        value = check_precision(value)
        if value != self._precision:
            logger.debug('default precision changed from %d to %d', self._precision, value)
            self._precision = value
            self._notify()

    @property
    def rounding(self):
        return self._rounding

    @rounding.setter
    def rounding(self, value):
        value = check_rounding(value)
        if value != self._rounding:
            logger.debug('default rounding changed from %s to %s', self._rounding, value)
            self._rounding = value
            self._notify()

    @property
    def exponent_delimiter(self):
        return self._exponent_delimiter

    @exponent_delimiter.setter
    def exponent_delimiter(self, value):
        self._exponent_delimiter = check_exponent_delimiter(value)

    def add_listener(self, listener):
        '''Register a listener; it is called after those already registered.'''
        if not callable(listener):
            raise TypeError('listener must be callable')
        self.listeners.append(listener)

    def remove_listener(self, listener):
        '''Remove the first registration of listener (compared by identity).  Other
        listeners keep their relative order.  Unknown listeners are ignored.'''
        for n, registered in enumerate(self.listeners):
            if registered is listener:
                del self.listeners[n]
                break

    def _notify(self):
        listeners = list(self.listeners)
        logger.debug('notifying %d listener(s)', len(listeners))
        for listener in listeners:
            listener(self._precision, self._rounding)

    def copy(self):
        '''Return a copy of the context.  The copy has its own listener list.'''
        result = Context(precision=self._precision, rounding=self._rounding,
                         exponent_delimiter=self._exponent_delimiter)
        result.listeners = list(self.listeners)
        return result

    def __repr__(self):
        return (f'<Context precision={self._precision} rounding={self._rounding} '
                f'exponent_delimiter={self._exponent_delimiter!r}>')


def check_precision(precision):
    if not isinstance(precision, int) or isinstance(precision, bool):
        raise TypeError('precision must be an integer')
    if precision < 1:
        raise ValueError(f'precision must be positive: {precision}')
    return precision


def check_rounding(rounding):
    if rounding not in ROUNDING_MODES:
        raise ValueError(f'unknown rounding mode: {rounding!r}')
    return rounding


def check_exponent_delimiter(delimiter):
    if delimiter not in ('e', 'E'):
        raise ValueError(f"exponent delimiter must be 'e' or 'E': {delimiter!r}")
    return delimiter


#
# Powers of ten
#

class PowersOfTen:
    '''A read-through cache of non-negative integer powers of ten.

    Entries are keyed by exponent.  Only requested powers are computed, so asking for a
    large power costs that power alone, and computed entries are never discarded.
    Insertion is done under a lock, so the cache can be shared between threads.
    '''

    def __init__(self, size=64):
        self.table = {n: 10 ** n for n in range(size)}
        self.lock = threading.Lock()

    def __getitem__(self, n):
        if n < 0:
            raise ValueError(f'negative power of ten: {n}')
        value = self.table.get(n)
        if value is None:
            with self.lock:
                value = self.table.get(n)
                if value is None:
                    value = self.table[n] = 10 ** n
        return value

    def __len__(self):
        return len(self.table)


powers_of_ten = PowersOfTen()


def power_of_ten(n):
    '''Return 10^n for n >= 0.'''
    return powers_of_ten[n]


def power_of_five(n):
    '''Return 5^n for n >= 0.  Since 5^n = 10^n / 2^n this is a shift of a cached power of
    ten.'''
    return powers_of_ten[n] >> n


#
# Exported functions
#

DefaultContext = Context()
_context = DefaultContext


def get_context():
    '''Return the process-wide context.'''
    return _context


def set_context(context):
    '''Sets the process-wide context to context (not a copy of it).'''
    global _context
    if not isinstance(context, Context):
        raise TypeError('context must be a Context instance')
    _context = context


class LocalContext:
    '''A context manager that will set the process-wide context to a copy of context on
    entry to the with-statement and restore the previous context on exit.  If no context
    is specified a copy of the current context is taken instead.
    '''

    def __init__(self, context=None):
        self.saved_context = None
        self.context_to_set = context

    def __enter__(self):
        self.saved_context = get_context()
        context = (self.context_to_set or self.saved_context).copy()
        set_context(context)
        return context

    def __exit__(self, etype, value, traceback):
        set_context(self.saved_context)


local_context = LocalContext
