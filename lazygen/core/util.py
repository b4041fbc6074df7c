"""
Mischelaneous helpers for the debug traces.
"""
__all__ = ['fmt_value', 'handle_error']

import traceback


def fmt_value(value, lim=100):
    """Return a repr of *value* cut at *lim* characters. Yielded values can
    be arbitrarily large (think of file chunks), the traces shouldn't be."""
    text = repr(value)
    if len(text) > lim:
        return "%s ... (%s more)" % (text[:lim], len(text) - lim)
    return text

def handle_error(exc, frame, output):
    """Print a banner with the traceback of *exc* (a failure captured from
    *frame*) on the *output* stream."""
    print('-' * 40, file=output)
    print('Exception happened during processing of generator.', file=output)
    traceback.print_exception(type(exc), exc, exc.__traceback__, file=output)
    print("Generator %s destroyed, exception discarded." % frame, file=output)
    print('-' * 40, file=output)
