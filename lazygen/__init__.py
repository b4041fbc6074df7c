# -*- coding: utf-8 -*-
'''
This is a library for lazy, pull based generators.

A generator function produces a sequence of values over time instead of
computing all of them before returning. Calling one doesn't run anything:
you get a `Generator` back and the body runs one step every time the
consumer asks for another value.

::

    Roughly the lazygen internals work like this:

    +------------------------+
    | @generator             |           gen = foo()  (nothing runs)
    | def foo():             |                |
    |     ...                |           it = gen.begin()
    |  +->yield value -------|------+         |
    |  |  ...                |      |    frame.resume()
    +--|---------------------+      |         |
       |                     promise.yield_value(value)
       |                            |         |
       |                     slot: VALUE  ----+----> it.dereference()
       |                                      |
       +---------------- frame.resume() <---- it.advance()
                                              |
                          body returns -> slot: EMPTY -> it == gen.end()
                          body raises  -> slot: ERROR -> it.dereference()
                                                         raises it

    gen.close() destroys the frame wherever it is.

The frame does the stepping (via resume and destroy), the promise keeps the
slot up to date and the iterator reads it. Only the Generator destroys the
frame.
'''

__license__ = u'''
Copyright (c) 2007, Mărieş Ionel Cristian

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in
all copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN
THE SOFTWARE.
'''

__author__ = u"Mărieş Ionel Cristian"
__email__ = "ionel.mc@gmail.com"
__version__ = '0.3.0'

from lazygen import core
from lazygen import common
