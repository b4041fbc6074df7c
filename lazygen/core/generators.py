"""
Lazy generators: the handle returned from a generator function and the
iterator used to pull values out of it.

Example::

    @generator
    def numbers(n):
        for i in range(n):
            yield i

    gen = numbers(3)        # nothing ran yet
    it, end = gen.begin(), gen.end()
    while it != end:
        print(it.dereference())
        it.advance()
    gen.close()             # the frame is destroyed here

or just::

    with numbers(3) as gen:
        for i in gen:
            print(i)

If the generator body raises, the exception is kept and raised only when
the consumer reads that position::

    @generator
    def broken():
        yield 'a'
        raise ValueError('boom')

    it = broken().begin()
    it.dereference()        # 'a'
    it.advance()            # fine, doesn't raise
    it.dereference()        # raises ValueError('boom')
"""
__all__ = [
    'Generator', 'GeneratorIterator', 'GeneratorFunction', 'generator',
    'DebugGeneratorFunction', 'debug_generator'
]

import functools

from lazygen.core.frames import Frame
from lazygen.core.errors import InvalidIterator, FrameDestroyed


class GeneratorIterator(object):
    """
    Single pass cursor over the values produced by a generator. It only
    references the frame, the `Generator` owns it.

    Advancing the iterator resumes the generator body until it yields the
    next value or finishes. After the generator has finished the iterator
    is equal to `Generator.end()`.
    """
    __slots__ = ('frame',)

    def __init__(self, frame=None):
        self.frame = frame

    def advance(self):
        """Resume the generator to get the next value. Does nothing if this
        is the past-the-end iterator. Returns the iterator itself."""
        frame = self.frame
        if frame is None:
            return self
        frame.check()
        if frame.done:
            # moving past a failed position, the exception is dropped
            frame.promise.discard()
        else:
            frame.resume()
        if frame.promise.finished():
            self.frame = None
        return self

    def dereference(self):
        """Return the current value. If the generator body raised at this
        position the exception is raised here (every time it's called)."""
        frame = self.frame
        if frame is None:
            raise InvalidIterator("Can't dereference the past-the-end iterator.")
        frame.check()
        promise = frame.promise
        exc = promise.exception()
        if exc is not None:
            promise.observed = True
            # each raise starts over from where the body failed
            raise exc.with_traceback(promise.traceback)
        return promise.value()

    def __eq__(self, other):
        if not isinstance(other, GeneratorIterator):
            return NotImplemented
        return self.frame is other.frame

    def __ne__(self, other):
        if not isinstance(other, GeneratorIterator):
            return NotImplemented
        return self.frame is not other.frame

    __hash__ = None

    def __repr__(self):
        return "<%s@0x%X %s>" % (
            self.__class__.__name__,
            id(self),
            self.frame is None and 'END' or self.frame
        )


class Generator(object):
    """
    Handle to a running generator function. You get one by calling a
    function decorated with `generator`, you don't make them yourself.

    The generator owns the frame of the generator function. Closing the
    generator (explicitly, by leaving a with block or by garbage collection)
    destroys the frame even if it didn't finish - everything the body holds
    is released (its finally clauses run).

    Generators can't be copied. Use `transfer` to hand the frame over to a
    new Generator object.
    """
    __slots__ = ('frame', '__weakref__')

    def __init__(self, frame):
        self.frame = frame

    def _owned(self):
        if self.frame is None:
            raise FrameDestroyed(
                "%s doesn't own a frame (closed or transferred)." % self)
        return self.frame

    def begin(self):
        """Resume the generator to produce its first value and return an
        iterator for it. If the generator finished (or failed) without
        producing anything the iterator is equal to end()."""
        frame = self._owned()
        if not frame.done:
            frame.resume()
        promise = frame.promise
        if promise.finished() or promise.exception() is not None:
            return GeneratorIterator(None)
        return GeneratorIterator(frame)

    def end(self):
        "Return the past-the-end iterator."
        return GeneratorIterator(None)

    def __iter__(self):
        it, end = self.begin(), self.end()
        while it != end:
            yield it.dereference()
            it.advance()

    def transfer(self):
        """Move the frame to a new Generator and return it. This one is left
        empty, closing it does nothing."""
        frame = self._owned()
        self.frame = None
        return self.__class__(frame)

    def close(self):
        "Destroy the frame. Calling this again does nothing."
        frame, self.frame = self.frame, None
        if frame is not None:
            frame.destroy()

    @property
    def closed(self):
        return self.frame is None

    @property
    def finished(self):
        "True if the generator body has returned or raised."
        return self._owned().done

    @property
    def exception(self):
        """The exception raised by the generator body, if it's still there
        (it's dropped once the consumer advances past it)."""
        return self._owned().promise.exception()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, tb):
        self.close()

    def __del__(self):
        if getattr(self, 'frame', None) is not None:
            self.close()

    def __copy__(self):
        raise TypeError("%s objects can't be copied, use transfer()." %
                        self.__class__.__name__)

    def __deepcopy__(self, memo):
        raise TypeError("%s objects can't be copied, use transfer()." %
                        self.__class__.__name__)

    def __reduce_ex__(self, protocol):
        raise TypeError("%s objects can't be pickled." %
                        self.__class__.__name__)

    def __repr__(self):
        return "<%s@0x%X frame:%s>" % (
            self.__class__.__name__,
            id(self),
            self.frame
        )


class GeneratorFunction(object):
    """
    A decorator for generator functions. Calls of the decorated function
    return `Generator` instances.

    Example::

        @generator
        def plain_ol_generator():
            yield bla
            yield bla
            ...

    * constructor - the frame class used for calls, see
      :mod:`lazygen.magic.greenframes` for a greenlet based one.
    * debug, output - trace every resume of the frames on the *output*
      stream (stderr if None).
    """
    def __init__(self, func, constructor=Frame, debug=False, output=None):
        self.wrapped_func = func
        self.constructor = constructor
        self.debug = debug
        self.output = output
        functools.update_wrapper(self, func)

    def __repr__(self):
        return "<%s at 0x%08X wrapping %r>" % (
            self.__class__.__name__,
            id(self),
            self.wrapped_func,
        )
    __str__ = __repr__

    def __get__(self, instance, owner):
        """Decorating methods with a class needs the class to be a
        descriptor, __call__ doesn't get bound to the instance like it
        happens with functions."""
        return self.__class__(
            self.wrapped_func.__get__(instance, owner),
            self.constructor,
            self.debug,
            self.output
        )

    def __call__(self, *args, **kwargs):
        "Return a Generator instance. The function isn't called yet."
        frame = self.constructor(self.wrapped_func, *args, **kwargs)
        frame.debug = self.debug
        if self.output is not None:
            frame.output = self.output
        return Generator(frame)

generator = GeneratorFunction

class DebugGeneratorFunction(GeneratorFunction):
    "Same as GeneratorFunction but the frames trace what they do."
    def __init__(self, func, constructor=Frame, debug=True, output=None):
        super(DebugGeneratorFunction, self).__init__(
            func, constructor, debug, output)

debug_generator = DebugGeneratorFunction
