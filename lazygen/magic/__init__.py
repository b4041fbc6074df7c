"""
Generators that don't need the yield statement, see
:mod:`lazygen.magic.greenframes`. Requires greenlet.
"""
