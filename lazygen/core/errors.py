"""
Exceptions raised by the generator machinery itself.

Failures raised *inside* a generator body are not wrapped in any of these:
they are stored as they are and re-raised when the consumer reads the
position where they happened.
"""
__all__ = [
    'GeneratorError', 'SlotEmpty', 'InvalidIterator', 'FrameDestroyed',
    'NotInGenerator'
]

class GeneratorError(Exception):
    "Base class for misuse of generators, iterators and frames."
    __doc_all__ = []
class SlotEmpty(GeneratorError):
    "Raised when a value is read from a slot that doesn't hold one."
    __doc_all__ = []
class InvalidIterator(GeneratorError):
    "Raised when the past-the-end iterator is dereferenced."
    __doc_all__ = []
class FrameDestroyed(GeneratorError):
    """Raised when a frame is used after the owning generator destroyed it
    (or after ownership was transferred to another generator)."""
    __doc_all__ = []
class NotInGenerator(GeneratorError):
    "Raised when yield_ is called outside a greenlet generator."
    __doc_all__ = []
