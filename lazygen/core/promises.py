"""
Per-invocation state of a generator function.

Every frame creates one promise. The frame calls into the promise at the
three points where the generator body suspends::

    +-------------------------+
    | @generator              |
    | def foo():              |    initial_suspend()
    |     ...   <-------------|------ nothing runs before the first resume
    |     yield value --------|----> yield_value(value)   slot: VALUE
    |     ...                 |
    |     raise Exception ----|----> unhandled_exception(exc)  slot: ERROR
    | (return) ---------------|----> return_void()
    +-------------------------+      final_suspend()     slot: EMPTY
                                     (an ERROR is kept for the consumer)

The frame stays suspended after final_suspend; only the owning generator
destroys it.
"""
__all__ = ['GeneratorPromise']

from lazygen.core.slots import Slot


class GeneratorPromise(object):
    __slots__ = ('slot', 'observed', 'traceback')

    def __init__(self):
        self.slot = Slot()
        # set once the stored exception was raised at the consumer
        self.observed = False
        self.traceback = None

    def initial_suspend(self):
        """Generators are lazy: they suspend right away and only produce
        the first value when asked for."""
        return True

    def final_suspend(self):
        """Called when the generator body has returned or failed. A normal
        completion empties the slot, which is the "finished" marker; a
        failure stays put so it can be re-raised at the consumer."""
        if self.slot.current_error() is None:
            self.slot.clear()
        return True

    def unhandled_exception(self, exc):
        "Store the exception that escaped the generator body."
        self.observed = False
        self.traceback = exc.__traceback__
        self.slot.set_error(exc)

    def yield_value(self, value):
        "Store a value produced by the generator body."
        self.slot.set_value(value)
        return True

    def return_void(self):
        "The return value of a generator body is ignored."

    def exception(self):
        return self.slot.current_error()

    def value(self):
        return self.slot.current_value()

    def finished(self):
        return self.slot.is_finished()

    def discard(self):
        """Drop whatever is left in the slot. Used when the consumer moves
        past a failed position without reading it."""
        self.traceback = None
        self.slot.clear()

    def __repr__(self):
        return "<%s@0x%X slot:%r>" % (
            self.__class__.__name__,
            id(self),
            self.slot
        )
