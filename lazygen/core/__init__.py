'''
The generator machinery, leaves first:

* :mod:`lazygen.core.slots` - the value/exception cell

* :mod:`lazygen.core.promises` - per call state, decides what happens to
  the slot when the body suspends

* :mod:`lazygen.core.frames` - the handle that resumes and destroys the
  paused body

* :mod:`lazygen.core.generators` - the Generator owning the frame, the
  iterator reading from it and the decorators

Example::

    @generator
    def mygen(bla):
        yield bla
        yield bla

Nothing in `mygen` runs until the first value is asked for, and at most one
produced value is waiting for the consumer at any time.
'''
