"""
Frame handles - the paused computation behind a generator.

A frame wraps the generator body (a python generator here, a greenlet in
:mod:`lazygen.magic.greenframes`) and drives it one step at a time::

    NOTSTARTED --resume()--> SUSPENDED --resume()--> SUSPENDED ...
        |                       |
        |                       +--(return)------> COMPLETED --+
        |                       +--(exception)---> FAILED -----+
        |                                                      |
        +------------------------ destroy() -------------------+--> DESTROYED

Exactly one `Generator` owns a frame and it is the only thing that calls
destroy(). Iterators hold a plain reference and only resume it.
"""
__all__ = ['Frame']

import sys
import types

from lazygen.core.promises import GeneratorPromise
from lazygen.core.errors import FrameDestroyed
from lazygen.core.util import fmt_value, handle_error


class Frame(object):
    '''
    Frame for python generators (or anything with `send`, `throw` and
    `close`).

    The frame is created with the generator function and its arguments and
    doesn't call it until the first resume - so no code from the body runs
    before someone asks for the first value. A callable that doesn't return
    a generator is treated like a generator function that yields nothing.
    '''
    STATE_NEED_INIT, STATE_SUSPENDED, STATE_RUNNING, STATE_COMPLETED, \
        STATE_FAILED, STATE_DESTROYED = range(6)
    _state_names = "NOTSTARTED", "SUSPENDED", "RUNNING", "COMPLETED", \
        "FAILED", "DESTROYED"
    __slots__ = (
        'f_args', 'f_kws', 'name', 'state', 'coro', 'promise',
        'debug', 'output', '__weakref__',
    )
    done = property(lambda self: self.state >= self.STATE_COMPLETED)
    destroyed = property(lambda self: self.state == self.STATE_DESTROYED)

    def __init__(self, coro, *args, **kws):
        self.debug = False
        self.output = sys.stderr
        self.f_args = args
        self.f_kws = kws
        if self._valid_gen(coro):
            self.state = self.STATE_SUSPENDED
            self.name = getattr(coro, '__name__', coro.__class__.__name__)
        elif callable(coro):
            self.state = self.STATE_NEED_INIT
            self.name = getattr(coro, '__name__', coro.__class__.__name__)
        else:
            raise ValueError("Bad generator: %r" % (coro,))
        self.coro = coro
        self.promise = GeneratorPromise()
        if not self.promise.initial_suspend():
            self.resume()

    def _valid_gen(self, coro):
        if isinstance(coro, types.GeneratorType):
            return True
        elif hasattr(coro, 'send') and \
             hasattr(coro, 'throw'):
            return True
        return False

    def _start(self):
        """Call the generator function. Returns False if it didn't give us
        a generator (there's nothing to step through). Whatever the call
        raises is a failure of the body, StopIteration included."""
        coro = self.coro(*self.f_args, **self.f_kws)
        self.f_args = self.f_kws = None
        if self._valid_gen(coro):
            self.coro = coro
            return True
        self.coro = None
        return False

    def _step(self):
        """Run the body till the next yield. Returns a (finished, value)
        pair. Only the StopIteration ending the generator means finished."""
        try:
            return False, self.coro.send(None)
        except StopIteration:
            return True, None

    def _close(self):
        "Unwind the suspended body (runs its finally clauses)."
        if hasattr(self.coro, 'close'):
            self.coro.close()

    def check(self):
        if self.state == self.STATE_DESTROYED:
            raise FrameDestroyed("%s was already destroyed." % self)

    def resume(self):
        """
        Run the generator body until it yields, returns or raises:

        * on yield the value goes in the promise, state is SUSPENDED

        * on return the promise is finalized, state is COMPLETED

        * on exception the exception goes in the promise and it's
          finalized, state is FAILED. The exception isn't raised here.

        KeyboardInterrupt, SystemExit and GeneratorExit are not captured.
        The body can't resume its own frame (state is RUNNING meanwhile).
        """
        self.check()
        assert self.state != self.STATE_RUNNING, \
            "%s resumed while it's running!" % self
        assert self.state < self.STATE_COMPLETED, \
            "%s resumed, expected state less than %s!" % (
                self,
                self._state_names[self.STATE_COMPLETED]
            )
        if self.debug:
            print('Running %r' % self, file=self.output)
        state, self.state = self.state, self.STATE_RUNNING
        try:
            if state == self.STATE_NEED_INIT and not self._start():
                finished, value = True, None
            else:
                finished, value = self._step()
        except (KeyboardInterrupt, GeneratorExit, SystemExit):
            self.state = state
            raise
        except BaseException as exc:
            self.state = self.STATE_FAILED
            self.promise.unhandled_exception(exc)
            self.promise.final_suspend()
        else:
            if finished:
                self.state = self.STATE_COMPLETED
                self.promise.return_void()
                self.promise.final_suspend()
            else:
                self.state = self.STATE_SUSPENDED
                self.promise.yield_value(value)
        finally:
            if self.debug:
                self._trace()

    def _trace(self):
        if self.state == self.STATE_SUSPENDED:
            if not self.promise.finished():
                print("Yields %s." % fmt_value(self.promise.value()),
                      file=self.output)
        elif self.state == self.STATE_COMPLETED:
            print("Finished.", file=self.output)
        elif self.state == self.STATE_FAILED:
            print("Failed with %r." % self.promise.exception(),
                  file=self.output)

    def destroy(self):
        """
        Tear down the frame, whatever state it's in. A suspended body gets
        unwound, the slot is emptied and references to the arguments are
        dropped. Exceptions raised while unwinding the body propagate.
        """
        assert self.state != self.STATE_DESTROYED, \
            "%s destroyed twice!" % self
        exc = self.promise.exception()
        if self.debug and exc is not None and not self.promise.observed:
            handle_error(exc, self, self.output)
        try:
            if self.state != self.STATE_NEED_INIT and self.coro is not None:
                self._close()
        finally:
            self.state = self.STATE_DESTROYED
            self.coro = None
            self.f_args = self.f_kws = None
            self.promise.discard()

    def __repr__(self):
        return "<%s %s instance at 0x%08X wrapping %r, state: %s>" % (
            self.name,
            self.__class__.__name__,
            id(self),
            self.coro,
            self._state_names[self.state]
        )
    __str__ = __repr__
