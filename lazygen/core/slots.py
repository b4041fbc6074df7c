"""
The single cell shared between a generator body and its consumer.

A slot holds exactly one of:

======== ===================================================================
Tag      Meaning
======== ===================================================================
EMPTY    nothing produced yet, or the generator has finished
-------- -------------------------------------------------------------------
VALUE    the last value yielded by the generator body
-------- -------------------------------------------------------------------
ERROR    the exception that escaped the generator body
======== ===================================================================

Only the promise writes to the slot; iterators read it through the promise.
"""
__all__ = ['Slot', 'EMPTY', 'VALUE', 'ERROR']

from lazygen.core.errors import SlotEmpty

EMPTY, VALUE, ERROR = range(3)

class Slot(object):
    __slots__ = ('tag', 'content')
    _tag_names = "EMPTY", "VALUE", "ERROR"

    def __init__(self):
        self.tag = EMPTY
        self.content = None

    def set_value(self, value):
        self.tag = VALUE
        self.content = value

    def set_error(self, exc):
        assert isinstance(exc, BaseException), \
            "Expected an exception instance, got %r" % (exc,)
        self.tag = ERROR
        self.content = exc

    def clear(self):
        self.tag = EMPTY
        self.content = None

    def current_error(self):
        "Peek at the stored exception. Returns None if there isn't one."
        if self.tag == ERROR:
            return self.content

    def current_value(self):
        """Return the stored value. Raises SlotEmpty if the slot holds
        nothing or an exception - check `is_finished` and `current_error`
        first."""
        if self.tag != VALUE:
            raise SlotEmpty("Slot holds %s, not a value." %
                            self._tag_names[self.tag])
        return self.content

    def is_finished(self):
        return self.tag == EMPTY

    def __repr__(self):
        return "<%s@0x%X %s %r>" % (
            self.__class__.__name__,
            id(self),
            self._tag_names[self.tag],
            self.content
        )
