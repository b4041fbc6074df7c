"""
A module for quick importing the essential core stuff.
(generator, Generator, errors)
"""
from lazygen.core.generators import generator, debug_generator, Generator, \
    GeneratorIterator
from lazygen.core.frames import Frame
from lazygen.core import errors
from lazygen.core.errors import GeneratorError, SlotEmpty, InvalidIterator, \
    FrameDestroyed
