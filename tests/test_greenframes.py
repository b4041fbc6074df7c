__doc_all__ = []

import unittest
import sys

from io import StringIO

from lazygen.common import *
from lazygen.core.errors import NotInGenerator
from lazygen.magic.greenframes import greenlet_generator, debug_greenlet_generator, \
    yield_, GreenletFrame
from base import Failure

class Node(object):
    def __init__(self, name, *children):
        self.name = name
        self.children = children

class GreenletGeneratorTest(unittest.TestCase):
    def setUp(self):
        self.msgs = []

    def test_nested_calls(self):
        def walk(node):
            for child in node.children:
                walk(child)
            yield_(node.name)
        @greenlet_generator
        def postorder(tree):
            walk(tree)
        tree = Node('root', Node('a', Node('a1'), Node('a2')), Node('b'))
        with postorder(tree) as g:
            self.assertEqual(list(g), ['a1', 'a2', 'a', 'b', 'root'])

    def test_suspend_on_start(self):
        put = self.msgs.append
        @greenlet_generator
        def gen():
            put('started')
            yield_(1)
        g = gen()
        self.assertEqual(self.msgs, [])
        self.assertEqual(g.begin().dereference(), 1)
        self.assertEqual(self.msgs, ['started'])
        g.close()

    def test_outside_generator(self):
        self.assertRaises(NotInGenerator, yield_, 1)

    def test_teardown_in_nested_call(self):
        put = self.msgs.append
        def helper():
            try:
                yield_(1)
                put('after')
                yield_(2)
            finally:
                put('helper released')
        @greenlet_generator
        def gen():
            try:
                helper()
            finally:
                put('released')
        g = gen()
        self.assertEqual(g.begin().dereference(), 1)
        g.close()
        self.assertEqual(self.msgs, ['helper released', 'released'])

    def test_consumed_by_greenlet_generator(self):
        @greenlet_generator
        def inner(n):
            for i in range(n):
                yield_(i)
        @greenlet_generator
        def outer():
            for n in (2, 3):
                with inner(n) as g:
                    for value in g:
                        yield_((n, value))
        with outer() as g:
            self.assertEqual(list(g), [(2, 0), (2, 1), (3, 0), (3, 1), (3, 2)])

    def test_mixed_with_python_generators(self):
        @generator
        def numbers():
            yield 1
            yield 2
        @greenlet_generator
        def doubled():
            with numbers() as g:
                for value in g:
                    yield_(value * 2)
        with doubled() as g:
            self.assertEqual(list(g), [2, 4])

    def test_lazy_failure(self):
        def helper():
            yield_('a')
            raise Failure('F')
        @greenlet_generator
        def gen():
            helper()
            yield_('b')
        g = gen()
        it = g.begin()
        self.assertEqual(it.dereference(), 'a')
        it.advance()
        self.assertNotEqual(it, g.end())
        self.assertRaises(Failure, it.dereference)
        it.advance()
        self.assertEqual(it, g.end())
        g.close()

    def test_stop_iteration_is_failure(self):
        put = self.msgs.append
        @greenlet_generator
        def gen():
            yield_('a')
            next(iter([]))
            put('b')
            yield_('b')
        g = gen()
        it = g.begin()
        self.assertEqual(it.dereference(), 'a')
        it.advance()
        self.assertNotEqual(it, g.end())
        self.assertTrue(isinstance(g.exception, StopIteration))
        self.assertRaises(StopIteration, it.dereference)
        self.assertEqual(self.msgs, [])
        g.close()

    def test_stop_iteration_before_first_value(self):
        @greenlet_generator
        def gen():
            raise StopIteration
        g = gen()
        self.assertEqual(g.begin(), g.end())
        self.assertTrue(isinstance(g.exception, StopIteration))
        g.close()

    def test_return_value_ignored(self):
        @greenlet_generator
        def gen():
            yield_(1)
            return 'ignored'
        with gen() as g:
            self.assertEqual(list(g), [1])

    def test_frame_class(self):
        @greenlet_generator
        def gen():
            yield_(1)
        g = gen()
        self.assertTrue(isinstance(g.frame, GreenletFrame))
        g.close()
        self.assertRaises(ValueError, GreenletFrame, 123)

    def test_debug(self):
        output = StringIO()
        def gen():
            yield_(1)
        g = debug_greenlet_generator(gen, output=output)()
        self.assertEqual(list(g), [1])
        g.close()
        trace = output.getvalue()
        self.assertTrue('Running <gen GreenletFrame instance' in trace)
        self.assertTrue('Yields 1.' in trace)
        self.assertTrue('Finished.' in trace)

if __name__ == "__main__":
    sys.argv.insert(1, '-v')
    unittest.main()
