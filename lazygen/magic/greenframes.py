"""
Greenlet based generators.

The generator body is a plain function running in a greenlet. It produces
values by calling `yield_` - from any depth of nested calls, not just from
the decorated function::

    def walk(node):
        for child in node.children:
            walk(child)
        yield_(node)

    @greenlet_generator
    def postorder(tree):
        walk(tree)

    for node in postorder(tree):
        ...

Apart from that these behave exactly like :func:`lazygen.core.generators.generator`.
"""
__all__ = [
    'yield_', 'GreenletFrame', 'GreenletGeneratorFunction',
    'greenlet_generator', 'DebugGreenletGeneratorFunction',
    'debug_greenlet_generator'
]

import functools

from greenlet import greenlet, getcurrent

from lazygen.core.frames import Frame
from lazygen.core.generators import GeneratorFunction, DebugGeneratorFunction
from lazygen.core.errors import NotInGenerator


def yield_(value):
    """Hand *value* to the consumer and suspend till the next value is asked
    for. Must be called from the body of a greenlet generator."""
    current = getcurrent()
    if not isinstance(current, FrameGreenlet):
        raise NotInGenerator("yield_(%r) called outside a greenlet generator." % (value,))
    current.parent.switch(value)
    assert current is getcurrent(), \
        "Something was switched wrong: current is %s but it should be the original yielder (%s)" % (
            getcurrent(), current)

class FrameGreenlet(greenlet):
    def __init__(self, run):
        super(FrameGreenlet, self).__init__(run, getcurrent())

    def __repr__(self):
        return "<%s instance at 0x%08X wrapping %r>" % (
            self.__class__.__name__,
            id(self),
            getattr(self, 'run', 'N/A'),
        )
    __str__ = __repr__

class GreenletFrame(Frame):
    '''
    Frame running a plain function in a greenlet instead of a generator.

    The greenlet's parent is switched to whoever resumes the frame, so
    greenlet generators can be consumed from inside other greenlet
    generators.
    '''
    __slots__ = ()

    def _valid_gen(self, coro):
        return False

    def _start(self):
        self.coro = FrameGreenlet(
            functools.partial(self.coro, *self.f_args, **self.f_kws))
        self.f_args = self.f_kws = None
        return True

    def _step(self):
        # the body has finished only when the greenlet is dead, anything
        # raised out of switch() is a failure of the body
        self.coro.parent = getcurrent()
        rop = self.coro.switch()
        if self.coro.dead:
            return True, None
        return False, rop

    def _close(self):
        # a greenlet is true only while started and not dead
        if self.coro:
            self.coro.parent = getcurrent()
            self.coro.throw()


class GreenletGeneratorFunction(GeneratorFunction):
    """
    A decorator for functions that produce values with `yield_`.

    Example::

        @greenlet_generator
        def plain_ol_func():
            yield_(bla)
            yield_(bla)
            ...
    """
    def __init__(self, func, constructor=GreenletFrame, debug=False, output=None):
        super(GreenletGeneratorFunction, self).__init__(
            func, constructor, debug, output)

greenlet_generator = GreenletGeneratorFunction

class DebugGreenletGeneratorFunction(DebugGeneratorFunction):
    def __init__(self, func, constructor=GreenletFrame, debug=True, output=None):
        super(DebugGreenletGeneratorFunction, self).__init__(
            func, constructor, debug, output)

debug_greenlet_generator = DebugGreenletGeneratorFunction
