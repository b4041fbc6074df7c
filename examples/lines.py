"""
Lazily reads a file and yields the non-empty lines. Stop early and the
file still gets closed.
"""
import sys

from lazygen.common import generator

@generator
def lines(path):
    with open(path) as fh:
        for line in fh:
            line = line.rstrip('\n')
            if line:
                yield line

with lines(len(sys.argv) > 1 and sys.argv[1] or __file__) as gen:
    for nr, line in enumerate(gen):
        print("%3s: %s" % (nr, line))
        if nr == 9:
            break
