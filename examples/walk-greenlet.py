"""
Walks a directory tree with plain recursive functions, the paths are
produced with yield_ from whatever depth they're found at.
"""
import os
import sys

from lazygen.magic.greenframes import greenlet_generator, yield_

def walk(path):
    for name in sorted(os.listdir(path)):
        full = os.path.join(path, name)
        if os.path.isdir(full):
            walk(full)
        else:
            yield_(full)

@greenlet_generator
def files(top):
    walk(top)

with files(len(sys.argv) > 1 and sys.argv[1] or '.') as gen:
    it, end = gen.begin(), gen.end()
    while it != end:
        print(it.dereference())
        it.advance()
